"""Layout primitives (page canvas, header/footer, sections, tables)."""

from .canvas import (
    DocumentFonts,
    PageCanvas,
    draw_header,
    draw_footer,
    draw_section_title,
    draw_label_values,
    draw_text_lines,
    draw_bordered_section,
    draw_table,
    draw_table_header,
    draw_table_row,
    wrap_text,
    truncate,
)

__all__ = [
    "DocumentFonts",
    "PageCanvas",
    "draw_header",
    "draw_footer",
    "draw_section_title",
    "draw_label_values",
    "draw_text_lines",
    "draw_bordered_section",
    "draw_table",
    "draw_table_header",
    "draw_table_row",
    "wrap_text",
    "truncate",
]
