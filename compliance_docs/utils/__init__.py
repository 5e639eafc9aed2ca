"""Utility modules (PDF inspection, JSON input)."""

from .pdf_inspect import (
    open_pdf,
    get_pdf_page_count,
    is_valid_pdf,
    extract_pdf_text,
    extract_page_texts,
    page_sizes,
)

from .io import (
    load_json_robust,
    parse_package_request,
    safe_file_name,
)

__all__ = [
    # PDF inspection
    "open_pdf",
    "get_pdf_page_count",
    "is_valid_pdf",
    "extract_pdf_text",
    "extract_page_texts",
    "page_sizes",
    # Input files
    "load_json_robust",
    "parse_package_request",
    "safe_file_name",
]
