"""Export certificate covering every part in the package."""

from datetime import datetime
from typing import List, Optional, Sequence

from ..config import Config, default_config
from ..layout.canvas import draw_text_lines
from ..models.compliance import ComplianceData
from ..models.part import PartTraceabilityData
from .base import Clock, DocumentBuilder

TITLE = "EXPORT CERTIFICATE"

LICENSE_EXEMPT_DECLARATION = (
    "This is to certify that the goods described below are being exported",
    "in accordance with applicable export regulations and do not require",
    "an export license under current regulations.",
)

LICENSED_DECLARATION = (
    "This is to certify that the goods described below are being exported",
    "in accordance with applicable export regulations under the export",
    "license referenced below.",
)

PART_LINE_HEIGHT = 12.0


def export_declaration(compliance: ComplianceData) -> List[str]:
    """Declaration paragraph and order facts, one string per printed line."""
    aviation = compliance.aviation_compliance
    lines = list(LICENSED_DECLARATION if aviation.export_license else LICENSE_EXEMPT_DECLARATION)
    lines += [
        "",
        f"Country of Origin: {aviation.country_of_origin}",
        f"Destination Country: {aviation.end_use_country}",
        f"Order Number: {compliance.order_info.order_number}",
    ]
    if aviation.export_license:
        lines.append(f"Export License: {aviation.export_license}")
    if aviation.dual_use_goods:
        lines.append("Dual-Use Goods: YES")
    if aviation.restricted_parts:
        lines.append("Restricted Parts: YES")
    lines += ["", "Parts being exported:"]
    return lines


def export_part_lines(parts: Sequence[PartTraceabilityData]) -> List[str]:
    return [
        f"{index}. {part.part_number} - {part.description} (Qty: {part.quantity})"
        for index, part in enumerate(parts, start=1)
    ]


def generate_export_certificate(
    parts: Sequence[PartTraceabilityData],
    compliance: ComplianceData,
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
) -> bytes:
    """Render the export certificate; long part lists continue on new pages."""
    config = config or default_config
    now = (clock or datetime.now)()

    with DocumentBuilder(TITLE, compliance.company_info, config, now,
                         subject=f"Export certificate {compliance.order_info.order_number}") as builder:
        canvas, y = builder.new_page()

        canvas.text(50, y, TITLE, size=config.document_title_size, bold=True, color=config.title_color)
        y -= 40

        y = draw_text_lines(canvas, y, export_declaration(compliance), size=10,
                            line_height=15, bold_when=lambda line: ":" in line)
        y -= 10

        for line in export_part_lines(parts):
            canvas, y = builder.ensure_space(canvas, y, 0)
            canvas.text(80, y, line)
            y -= PART_LINE_HEIGHT

        return builder.finish()
