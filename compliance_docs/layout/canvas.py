"""
Page drawing primitives on top of PyMuPDF.

Coordinates are PDF points measured from the bottom-left corner of a
612x792 US-Letter page, so "y" decreases as content moves down the page.
PyMuPDF itself works top-down; PageCanvas converts at the boundary.

Every drawing helper returns the next free y-coordinate. Callers thread
that value from one call to the next instead of keeping a shared cursor.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import fitz  # PyMuPDF

from ..config import Config, RGB, default_config
from ..models.compliance import CompanyInfo


@dataclass
class DocumentFonts:
    """
    Regular and bold faces for one output document.

    Loaded once per document and reused by all of its pages. Never
    shared between documents.
    """
    regular: fitz.Font
    bold: fitz.Font

    @classmethod
    def load(cls, config: Config = default_config) -> "DocumentFonts":
        return cls(
            regular=fitz.Font(fontname=config.regular_font),
            bold=fitz.Font(fontname=config.bold_font),
        )

    def face(self, bold: bool) -> fitz.Font:
        return self.bold if bold else self.regular


class PageCanvas:
    """
    Drawing surface for a single page.

    Text is buffered in one TextWriter per colour and written to the
    page by flush(). PyMuPDF drops earlier page handles when a page is
    added to the document, so a canvas whose page is no longer the
    newest must be flushed with a freshly loaded page (``doc[index]``).

    Usage:
        canvas = PageCanvas(doc.new_page(width=612, height=792), fonts)
        y = draw_header(canvas, "Packing Slip", company)
        canvas.text(50, y, "Order Number:", size=10)
        canvas.flush()
    """

    def __init__(self, page: fitz.Page, fonts: DocumentFonts, config: Config = default_config):
        self.page = page
        self.fonts = fonts
        self.config = config
        self.width = page.rect.width
        self.height = page.rect.height
        self._writers: Dict[RGB, fitz.TextWriter] = {}

    def _point(self, x: float, y: float) -> fitz.Point:
        return fitz.Point(x, self.height - y)

    def text(
        self,
        x: float,
        y: float,
        text: str,
        size: Optional[float] = None,
        bold: bool = False,
        color: Optional[RGB] = None,
    ) -> None:
        """Queue one line of text with its baseline at (x, y)."""
        if not text:
            return
        color = tuple(color or self.config.text_color)
        writer = self._writers.get(color)
        if writer is None:
            writer = self._writers[color] = fitz.TextWriter(fitz.Rect(0, 0, self.width, self.height))
        writer.append(
            self._point(x, y),
            text,
            font=self.fonts.face(bold),
            fontsize=size or self.config.body_size,
        )

    def flush(self, page: Optional[fitz.Page] = None) -> None:
        """Write queued text; ``page`` rebinds the canvas to a reloaded page."""
        if page is not None:
            self.page = page
        for color, writer in self._writers.items():
            writer.write_text(self.page, color=color)
        self._writers.clear()

    def text_width(self, text: str, size: float, bold: bool = False) -> float:
        return self.fonts.face(bold).text_length(text, fontsize=size)

    def line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        color: Optional[RGB] = None,
        thickness: float = 1.0,
    ) -> None:
        self.page.draw_line(
            self._point(x0, y0),
            self._point(x1, y1),
            color=color or self.config.text_color,
            width=thickness,
        )

    def rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        border_color: Optional[RGB] = None,
        border_width: float = 1.0,
    ) -> None:
        """Outline a rectangle whose bottom-left corner is (x, y)."""
        top_left = self._point(x, y + height)
        self.page.draw_rect(
            fitz.Rect(top_left.x, top_left.y, top_left.x + width, top_left.y + height),
            color=border_color or self.config.text_color,
            width=border_width,
        )


def draw_header(
    canvas: PageCanvas,
    title: str,
    company: CompanyInfo,
    y: Optional[float] = None,
) -> float:
    """
    Draw the standard document header.

    Company name (upper-cased) and address on the left, the document
    title (upper-cased) on the right, and a horizontal rule below.

    Returns:
        First usable y below the header (header_gap below the baseline)
    """
    cfg = canvas.config
    y = cfg.header_y if y is None else y

    canvas.text(cfg.margin_left, y, company.name.upper(), size=cfg.company_name_size,
                bold=True, color=cfg.company_color)
    canvas.text(cfg.margin_left, y - 20, company.address, size=10)
    canvas.text(canvas.width - cfg.header_title_width, y, title.upper(),
                size=cfg.header_title_size, bold=True, color=cfg.title_color)

    rule_y = y - cfg.header_rule_offset
    canvas.line(cfg.margin_left, rule_y, canvas.width - cfg.margin_right, rule_y,
                color=cfg.rule_color)

    return y - cfg.header_gap


def draw_footer(canvas: PageCanvas, page_number: int, total_pages: int, generated_at: str) -> None:
    """Page number on the right, generation timestamp on the left."""
    cfg = canvas.config
    canvas.text(canvas.width - 120, cfg.footer_y, f"Page {page_number} of {total_pages}",
                size=cfg.small_size, color=cfg.footer_color)
    canvas.text(cfg.margin_left, cfg.footer_y, f"Generated: {generated_at}",
                size=cfg.small_size, color=cfg.footer_color)


def draw_section_title(
    canvas: PageCanvas,
    y: float,
    title: str,
    gap: float = 25.0,
    x: Optional[float] = None,
) -> float:
    """Bold, coloured section heading. Returns y - gap."""
    cfg = canvas.config
    canvas.text(cfg.margin_left if x is None else x, y, title,
                size=cfg.section_title_size, bold=True, color=cfg.section_color)
    return y - gap


def draw_label_values(
    canvas: PageCanvas,
    y: float,
    rows: Sequence[Tuple[str, str]],
    label_x: float = 60.0,
    value_x: float = 180.0,
    size: Optional[float] = None,
    line_height: float = 15.0,
) -> float:
    """Label in the regular face, value in bold, one pair per line."""
    size = size or canvas.config.body_size
    for label, value in rows:
        canvas.text(label_x, y, label, size=size)
        canvas.text(value_x, y, value, size=size, bold=True)
        y -= line_height
    return y


def draw_text_lines(
    canvas: PageCanvas,
    y: float,
    lines: Sequence[str],
    x: float = 60.0,
    size: Optional[float] = None,
    line_height: float = 12.0,
    blank_gap: float = 10.0,
    bold_when: Optional[Callable[[str], bool]] = None,
    indent_bullets: float = 0.0,
) -> float:
    """
    Draw a block of lines. Empty strings advance by blank_gap only.

    bold_when decides per line whether the bold face is used; bullet
    lines ("•") are shifted right by indent_bullets.
    """
    size = size or canvas.config.body_size
    for line in lines:
        if line == "":
            y -= blank_gap
            continue
        bold = bold_when(line) if bold_when else False
        line_x = x + indent_bullets if line.startswith("•") else x
        canvas.text(line_x, y, line, size=size, bold=bold)
        y -= line_height
    return y


def draw_bordered_section(
    canvas: PageCanvas,
    y: float,
    height: float,
    title: str,
) -> float:
    """
    Bordered box spanning the content width with a bold title inside.

    Returns:
        y of the first content row inside the box
    """
    cfg = canvas.config
    canvas.rect(cfg.margin_left, y - height, cfg.content_width, height)
    canvas.text(cfg.margin_left + 10, y - 20, title, size=cfg.box_title_size, bold=True)
    return y - 40


CellStyle = Callable[[int, str], Tuple[bool, Optional[RGB]]]


def draw_table(
    canvas: PageCanvas,
    y: float,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    col_widths: Sequence[float],
    x: float = 60.0,
    rule_end_x: Optional[float] = None,
    header_size: Optional[float] = None,
    row_size: Optional[float] = None,
    row_height: float = 15.0,
    cell_style: Optional[CellStyle] = None,
) -> float:
    """
    Header row, a rule under it, then one line per row.

    cell_style(column_index, value) -> (bold, color) overrides the look
    of individual cells.

    Returns:
        y below the last row
    """
    cfg = canvas.config
    header_size = header_size or cfg.body_size
    row_size = row_size or cfg.small_size

    y = draw_table_header(canvas, y, headers, col_widths, x, rule_end_x, header_size)
    for row in rows:
        y = draw_table_row(canvas, y, row, col_widths, x, row_size, row_height, cell_style)
    return y


def draw_table_header(
    canvas: PageCanvas,
    y: float,
    headers: Sequence[str],
    col_widths: Sequence[float],
    x: float = 60.0,
    rule_end_x: Optional[float] = None,
    size: Optional[float] = None,
) -> float:
    """Bold header cells and the rule below them. Returns the first row y."""
    size = size or canvas.config.body_size
    cell_x = x
    for header, width in zip(headers, col_widths):
        canvas.text(cell_x, y, header, size=size, bold=True)
        cell_x += width

    y -= 20
    canvas.line(x, y, rule_end_x if rule_end_x is not None else x + sum(col_widths), y)
    return y - 10


def draw_table_row(
    canvas: PageCanvas,
    y: float,
    row: Sequence[str],
    col_widths: Sequence[float],
    x: float = 60.0,
    size: Optional[float] = None,
    row_height: float = 15.0,
    cell_style: Optional[CellStyle] = None,
) -> float:
    size = size or canvas.config.small_size
    cell_x = x
    for index, (value, width) in enumerate(zip(row, col_widths)):
        bold, color = cell_style(index, value) if cell_style else (False, None)
        canvas.text(cell_x, y, value, size=size, bold=bold, color=color)
        cell_x += width
    return y - row_height


def wrap_text(text: str, font: fitz.Font, size: float, max_width: float) -> List[str]:
    """
    Greedy word wrap measured with the document font.

    Existing line breaks are kept; blank input lines come back as "".
    A single word wider than max_width is placed on its own line.
    """
    wrapped: List[str] = []
    for paragraph in text.splitlines() or [""]:
        words = paragraph.split()
        if not words:
            wrapped.append("")
            continue
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if font.text_length(candidate, fontsize=size) <= max_width:
                current = candidate
            else:
                wrapped.append(current)
                current = word
        wrapped.append(current)
    return wrapped


def truncate(text: str, max_chars: int) -> str:
    """Cut text to max_chars and mark the cut with an ellipsis."""
    return text[:max_chars] + ("..." if len(text) > max_chars else "")
