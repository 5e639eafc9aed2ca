"""Traceability certificate (Authorized Release Certificate).

Laid out after EASA Form 1 / FAA 8130-3: four bordered blocks for part
identification, traceability, the compliance declaration and the
authorized signature.
"""

from datetime import datetime
from typing import Optional

from ..config import Config, default_config
from ..layout.canvas import PageCanvas, draw_bordered_section, draw_text_lines
from ..models.compliance import ComplianceData
from ..models.part import PartTraceabilityData
from .base import Clock, DocumentBuilder

TITLE = "AUTHORIZED RELEASE CERTIFICATE"
FORM_REFERENCE = "(Reference: EASA Form 1 / FAA 8130-3)"

DECLARATION_LINES = (
    "This certificate confirms that the above identified item:",
    "• Has been manufactured, inspected, and tested in accordance with applicable specifications",
    "• Conforms to the approved design and is in a condition for safe operation",
    "• Is eligible for installation on aircraft subject to the referenced regulatory standards",
)


def _declaration_bold(line: str) -> bool:
    return not line.startswith("•") and ":" in line


def _draw_part_identification(canvas: PageCanvas, y: float, part: PartTraceabilityData) -> float:
    row_y = draw_bordered_section(canvas, y, 80, "1. PART IDENTIFICATION")
    size = canvas.config.small_size
    pairs = [
        ("Part Number:", part.part_number),
        ("Serial Number:", part.serial_number),
        ("Description:", part.description),
        ("Manufacturer:", part.manufacturer),
        ("Condition:", part.condition.value.upper()),
        ("Quantity:", str(part.quantity)),
    ]
    # Two columns, left-to-right then down
    for index, (label, value) in enumerate(pairs):
        x = 60 if index % 2 == 0 else 320
        if index % 2 == 0 and index > 0:
            row_y -= 15
        canvas.text(x, row_y, label, size=size)
        canvas.text(x + 80, row_y, value, size=size, bold=True)
    return y - 100


def _draw_traceability(canvas: PageCanvas, y: float, part: PartTraceabilityData) -> float:
    row_y = draw_bordered_section(canvas, y, 100, "2. TRACEABILITY INFORMATION")
    size = canvas.config.small_size
    pairs = [
        ("Traceable to:", part.traceable_to),
        ("Source:", part.traceability_source),
        ("Last Certified Agency:", part.last_certified_agency),
        ("Part Status Certification:", part.part_status_certification),
    ]
    for index, (label, value) in enumerate(pairs):
        if index == 2:
            row_y -= 15
        canvas.text(60, row_y, label, size=size)
        canvas.text(200, row_y, value, size=size, bold=True)
        if index < 2:
            row_y -= 15
    return y - 120


def _draw_declaration(canvas: PageCanvas, y: float, compliance: ComplianceData) -> float:
    row_y = draw_bordered_section(canvas, y, 120, "3. COMPLIANCE DECLARATION")
    aviation = compliance.aviation_compliance
    lines = list(DECLARATION_LINES) + [
        "",
        f"Regulatory Basis: {', '.join(aviation.basis_labels())}",
        f"Standards: {', '.join(aviation.applicable_standards)}",
        f"Country of Origin: {aviation.country_of_origin}",
        f"End Use Country: {aviation.end_use_country}",
    ]
    draw_text_lines(canvas, row_y, lines, size=canvas.config.small_size,
                    bold_when=_declaration_bold)
    return y - 140


def _draw_signature(canvas: PageCanvas, y: float, compliance: ComplianceData, today: str) -> float:
    draw_bordered_section(canvas, y, 100, "4. AUTHORIZED SIGNATURE")
    size = canvas.config.small_size
    canvas.text(60, y - 50, "Authorized Person:", size=size)
    canvas.line(150, y - 50, 350, y - 50)
    canvas.text(370, y - 50, "Date:", size=size)
    canvas.text(400, y - 50, today, size=size, bold=True)
    canvas.text(60, y - 70, "Company:", size=size)
    canvas.text(110, y - 70, compliance.company_info.name, size=size, bold=True)
    return y - 100


def generate_traceability_certificate(
    part: PartTraceabilityData,
    compliance: ComplianceData,
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
) -> bytes:
    """
    Render the traceability certificate for one part.

    Args:
        part: Part being released
        compliance: Order-level compliance context
        config: Layout configuration (default_config if None)
        clock: Returns the generation time (datetime.now if None)

    Returns:
        Single-page PDF as bytes
    """
    config = config or default_config
    now = (clock or datetime.now)()

    with DocumentBuilder(TITLE, compliance.company_info, config, now,
                         subject=f"Traceability {part.part_number}") as builder:
        canvas, y = builder.new_page()

        canvas.text(50, y, TITLE, size=config.header_title_size, bold=True)
        canvas.text(50, y - 20, FORM_REFERENCE, size=10, color=config.muted_color)
        y -= 50

        y = _draw_part_identification(canvas, y, part)
        y = _draw_traceability(canvas, y, part)
        y = _draw_declaration(canvas, y, compliance)
        _draw_signature(canvas, y, compliance, builder.today)

        return builder.finish()
