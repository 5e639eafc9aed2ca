"""Shared skeleton for every document generator.

A DocumentBuilder owns one PyMuPDF document from creation to
serialization: it adds pages (each with the standard header), moves
content onto a fresh page when it would run into the footer area, and
on finish() stamps "Page i of n" footers, writes metadata and returns
the PDF bytes. The document is closed on exit even if drawing fails.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple

import fitz  # PyMuPDF

from ..config import Config, default_config
from ..layout.canvas import DocumentFonts, PageCanvas, draw_footer, draw_header
from ..models.compliance import CompanyInfo

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def document_number(prefix: str, reference: str, now: datetime, digits: int = 6) -> str:
    """
    Build a certificate/report number such as ``COC-SO-2024-001-123456``.

    The suffix is the last ``digits`` digits of the epoch timestamp in
    milliseconds.
    """
    millis = str(int(now.timestamp() * 1000))
    return f"{prefix}-{reference}-{millis[-digits:]}"


class DocumentBuilder:
    """
    One output document under construction.

    Usage:
        with DocumentBuilder("Packing Slip", company, config, now) as builder:
            canvas, y = builder.new_page()
            ...
            return builder.finish()
    """

    def __init__(
        self,
        title: str,
        company: CompanyInfo,
        config: Optional[Config] = None,
        now: Optional[datetime] = None,
        subject: str = "",
    ):
        self.title = title
        self.company = company
        self.config = config or default_config
        self.now = now or datetime.now()
        self.subject = subject
        self.doc = fitz.open()
        self.fonts = DocumentFonts.load(self.config)
        self.pages: List[PageCanvas] = []

    def __enter__(self) -> "DocumentBuilder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if not self.doc.is_closed:
            self.doc.close()

    @property
    def generated_at(self) -> str:
        return self.now.strftime(self.config.timestamp_format)

    @property
    def today(self) -> str:
        return self.now.strftime(self.config.date_format)

    def new_page(self) -> Tuple[PageCanvas, float]:
        """Add a page with the standard header; returns it and the first free y."""
        if self.pages:
            # the previous page handle is still live only until new_page()
            self.pages[-1].flush()
        page = self.doc.new_page(width=self.config.page_width, height=self.config.page_height)
        canvas = PageCanvas(page, self.fonts, self.config)
        self.pages.append(canvas)
        return canvas, draw_header(canvas, self.title, self.company)

    def ensure_space(self, canvas: PageCanvas, y: float, needed: float) -> Tuple[PageCanvas, float]:
        """Continue on a new page if ``needed`` points do not fit above the footer."""
        if y - needed >= self.config.content_bottom:
            return canvas, y
        logger.debug("%s: continuing on page %d", self.title, len(self.pages) + 1)
        return self.new_page()

    def finish(self) -> bytes:
        """Draw footers, set metadata and serialize."""
        total = len(self.pages)
        for index, canvas in enumerate(self.pages):
            draw_footer(canvas, index + 1, total, self.generated_at)
            canvas.flush(self.doc[index])

        self.doc.set_metadata({
            "title": self.title,
            "author": self.company.name,
            "subject": self.subject,
            "creator": self.config.pdf_creator,
            "producer": self.config.pdf_producer,
            "creationDate": fitz.get_pdf_now(),
        })
        data = self.doc.tobytes(garbage=3, deflate=True)
        logger.debug("%s rendered: %d page(s), %d bytes", self.title, total, len(data))
        return data

    @property
    def page_count(self) -> int:
        return len(self.pages)
