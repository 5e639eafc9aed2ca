"""Certificate of Conformity (CoC) for one part."""

from datetime import datetime
from typing import List, Optional

from ..config import Config, default_config
from ..layout.canvas import PageCanvas, draw_label_values, draw_section_title, draw_text_lines
from ..models.compliance import ComplianceData
from ..models.part import PartTraceabilityData
from .base import Clock, DocumentBuilder, document_number

TITLE = "CERTIFICATE OF CONFORMITY"

STATEMENT_BULLETS = (
    "• Conform to the approved design data and specifications",
    "• Have been manufactured under an approved quality system",
    "• Have been inspected and tested in accordance with applicable procedures",
    "• Are delivered in an airworthy condition and eligible for installation",
    "• Comply with all applicable airworthiness requirements",
)


def conformity_statement(compliance: ComplianceData) -> List[str]:
    authority = " & ".join(compliance.aviation_compliance.basis_labels())
    return [
        "We hereby certify that the above mentioned part(s):",
        "",
        *STATEMENT_BULLETS,
        "",
        f"This certificate is issued under the authority of {authority} regulations.",
    ]


def _draw_signature_block(canvas: PageCanvas, y: float, today: str) -> float:
    cfg = canvas.config
    canvas.rect(cfg.margin_left, y - 60, cfg.content_width, 60)
    canvas.text(60, y - 15, "AUTHORIZED SIGNATURE", size=cfg.box_title_size, bold=True)
    canvas.text(60, y - 35, "Signature: ________________________")
    canvas.text(300, y - 35, "Name: ________________________")
    canvas.text(60, y - 50, f"Date: {today}")
    canvas.text(300, y - 50, "Title: Quality Manager")
    return y - 60


def generate_conformity_certificate(
    part: PartTraceabilityData,
    compliance: ComplianceData,
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
) -> bytes:
    """
    Render the certificate of conformity for one part.

    The certificate number is COC-<order number>-<last 6 digits of the
    generation timestamp in milliseconds>.
    """
    config = config or default_config
    now = (clock or datetime.now)()
    cert_number = document_number("COC", compliance.order_info.order_number, now,
                                  config.number_suffix_digits)

    with DocumentBuilder(TITLE, compliance.company_info, config, now, subject=cert_number) as builder:
        canvas, y = builder.new_page()

        canvas.text(50, y, TITLE, size=config.document_title_size, bold=True, color=config.title_color)
        y -= 40

        canvas.text(50, y, f"Certificate No: {cert_number}", size=10, bold=True)
        canvas.text(400, y, f"Issue Date: {builder.today}", size=10, bold=True)
        y -= 30

        company = compliance.company_info
        y = draw_section_title(canvas, y, "SUPPLIER INFORMATION", gap=20)
        y = draw_text_lines(canvas, y, [
            f"Company: {company.name}",
            f"Address: {company.address}",
            f"Certifications: {', '.join(company.certifications)}",
        ], line_height=15)
        y -= 20

        customer = compliance.customer_info
        y = draw_section_title(canvas, y, "CUSTOMER INFORMATION", gap=20)
        y = draw_text_lines(canvas, y, [
            f"Customer: {customer.name}",
            f"Address: {customer.address}",
        ], line_height=15)
        y -= 15

        y = draw_section_title(canvas, y, "PART DETAILS")
        y = draw_label_values(canvas, y, [
            ("Part Number:", part.part_number),
            ("Serial Number:", part.serial_number),
            ("Description:", part.description),
            ("Manufacturer:", part.manufacturer),
            ("Condition:", part.condition.value.upper()),
            ("Quantity:", str(part.quantity)),
        ])
        y -= 20

        y = draw_section_title(canvas, y, "CONFORMITY STATEMENT")
        y = draw_text_lines(canvas, y, conformity_statement(compliance),
                            blank_gap=8, indent_bullets=10)
        y -= 20

        _draw_signature_block(canvas, y, builder.today)

        return builder.finish()
