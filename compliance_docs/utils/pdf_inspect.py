"""
PDF inspection utilities.

Open generated PDF bytes with PyMuPDF (fitz) to count pages, read text
back and check page geometry. Used by the package assembler for page
accounting and by the tests.
"""

from typing import List, Tuple

import fitz  # PyMuPDF


def open_pdf(data: bytes) -> fitz.Document:
    """Open PDF bytes. Raises if the bytes are not a readable PDF."""
    return fitz.open(stream=data, filetype="pdf")


def get_pdf_page_count(data: bytes) -> int:
    """Get the number of pages in a PDF buffer."""
    doc = open_pdf(data)
    count = len(doc)
    doc.close()
    return count


def is_valid_pdf(data: bytes) -> bool:
    """True if the buffer parses as a PDF with at least one page."""
    if not data:
        return False
    try:
        return get_pdf_page_count(data) > 0
    except (RuntimeError, ValueError):
        return False


def extract_pdf_text(data: bytes) -> str:
    """
    Extract all text from a PDF buffer.

    Args:
        data: PDF bytes

    Returns:
        Combined text from all pages, pages separated by a blank line
    """
    doc = open_pdf(data)
    text_parts = []

    for page_idx in range(len(doc)):
        page = doc.load_page(page_idx)
        text = page.get_text("text")
        if text.strip():
            text_parts.append(text)

    doc.close()
    return "\n\n".join(text_parts)


def extract_page_texts(data: bytes) -> List[str]:
    """Text of every page, in page order."""
    doc = open_pdf(data)
    texts = [doc.load_page(i).get_text("text") for i in range(len(doc))]
    doc.close()
    return texts


def page_sizes(data: bytes) -> List[Tuple[float, float]]:
    """(width, height) in points for every page."""
    doc = open_pdf(data)
    sizes = [(page.rect.width, page.rect.height) for page in doc]
    doc.close()
    return sizes
