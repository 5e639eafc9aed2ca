"""Packing slip covering every part in the package."""

from datetime import datetime
from typing import List, Optional, Sequence

from ..config import Config, default_config
from ..layout.canvas import (
    draw_label_values,
    draw_section_title,
    draw_table_header,
    draw_table_row,
    truncate,
)
from ..models.compliance import ComplianceData
from ..models.part import PartTraceabilityData
from .base import Clock, DocumentBuilder

TITLE = "PACKING SLIP"

TABLE_HEADERS = ("Item", "Part Number", "Serial Number", "Description", "Qty", "Condition")
TABLE_COLUMN_WIDTHS = (30, 90, 90, 180, 40, 70)
ROW_HEIGHT = 15.0
TABLE_X = 50.0


def packing_slip_rows(parts: Sequence[PartTraceabilityData], max_description: int = 25) -> List[List[str]]:
    """One table row per part: item, P/N, S/N, truncated description, qty, condition."""
    return [
        [
            str(index),
            part.part_number,
            part.serial_number,
            truncate(part.description, max_description),
            str(part.quantity),
            part.condition.value.upper(),
        ]
        for index, part in enumerate(parts, start=1)
    ]


def generate_packing_slip(
    parts: Sequence[PartTraceabilityData],
    compliance: ComplianceData,
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
) -> bytes:
    """
    Render the packing slip for the whole order.

    Rows that do not fit above the footer continue on a new page under
    a repeated table header.
    """
    config = config or default_config
    now = (clock or datetime.now)()
    order = compliance.order_info

    with DocumentBuilder(TITLE, compliance.company_info, config, now,
                         subject=f"Packing slip {order.order_number}") as builder:
        canvas, y = builder.new_page()

        canvas.text(50, y, TITLE, size=config.document_title_size, bold=True, color=config.title_color)
        y -= 30

        y = draw_label_values(canvas, y, [
            ("Order Number:", order.order_number),
            ("Customer PO:", order.customer_po or "N/A"),
            ("Ship Date:", builder.today),
            ("Total Items:", str(len(parts))),
        ], label_x=50, value_x=150, size=10)
        y -= 20

        y = draw_section_title(canvas, y, "PARTS LIST")
        y = draw_table_header(canvas, y, TABLE_HEADERS, TABLE_COLUMN_WIDTHS, x=TABLE_X)

        for row in packing_slip_rows(parts, config.description_max_chars):
            if y < config.content_bottom:
                canvas, y = builder.new_page()
                y = draw_section_title(canvas, y, "PARTS LIST (continued)")
                y = draw_table_header(canvas, y, TABLE_HEADERS, TABLE_COLUMN_WIDTHS, x=TABLE_X)
            y = draw_table_row(canvas, y, row, TABLE_COLUMN_WIDTHS, x=TABLE_X, row_height=ROW_HEIGHT)

        return builder.finish()
