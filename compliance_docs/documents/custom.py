"""Free-text custom certificates rendered as plain text pages."""

import re
from datetime import datetime
from typing import Optional

from ..config import Config, default_config
from ..layout.canvas import wrap_text
from ..models.compliance import ComplianceData
from ..models.enums import CertificateTemplate
from ..models.options import CustomCertificate
from .base import Clock, DocumentBuilder

LINE_HEIGHT = 13.0
SIGNATURE_HEIGHT = 60.0


def custom_document_name(certificate: CustomCertificate) -> str:
    """``Custom_<name>.pdf`` with runs of non-word characters collapsed to "_"."""
    slug = re.sub(r"\W+", "_", certificate.name.strip()).strip("_") or "Certificate"
    return f"Custom_{slug}.pdf"


def generate_custom_certificate(
    certificate: CustomCertificate,
    compliance: ComplianceData,
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
) -> bytes:
    """
    Render a custom certificate.

    standard: title and wrapped content.
    aviation: adds the regulatory basis line and a signature block.
    custom:   wrapped content only, under the standard header.
    """
    config = config or default_config
    now = (clock or datetime.now)()
    title = certificate.name or "Certificate"
    template = certificate.template

    with DocumentBuilder(title, compliance.company_info, config, now, subject=title) as builder:
        canvas, y = builder.new_page()

        if template is not CertificateTemplate.CUSTOM:
            canvas.text(50, y, title.upper(), size=config.document_title_size, bold=True,
                        color=config.title_color)
            y -= 40

        if template is CertificateTemplate.AVIATION:
            basis = ", ".join(compliance.aviation_compliance.basis_labels())
            canvas.text(60, y, f"Regulatory Basis: {basis}", bold=True)
            canvas.text(60, y - 15, f"Order Number: {compliance.order_info.order_number}", bold=True)
            y -= 40

        width = config.content_width - 10
        for line in wrap_text(certificate.content, builder.fonts.regular, config.body_size, width):
            canvas, y = builder.ensure_space(canvas, y, 0)
            canvas.text(60, y, line)
            y -= LINE_HEIGHT

        if template is CertificateTemplate.AVIATION:
            canvas, y = builder.ensure_space(canvas, y - 20, SIGNATURE_HEIGHT)
            canvas.rect(config.margin_left, y - SIGNATURE_HEIGHT, config.content_width, SIGNATURE_HEIGHT)
            canvas.text(60, y - 15, "AUTHORIZED SIGNATURE", size=config.box_title_size, bold=True)
            canvas.text(60, y - 35, "Signature: ________________________")
            canvas.text(60, y - 50, f"Date: {builder.today}")
            canvas.text(300, y - 50, f"Company: {compliance.company_info.name}")

        return builder.finish()
