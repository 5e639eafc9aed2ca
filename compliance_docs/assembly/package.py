"""Compliance package assembly.

Generates every selected document, then merges them behind a title page
with a document index:

1. Per-part documents, part by part in input order
   (traceability -> conformity -> material test report)
2. Package-level documents (packing slip, then export certificate)
3. Custom certificates, in the order given
4. Title page + every document's pages copied into one PDF

Any exception while generating or merging fails the whole package; no
partial result is returned.

Usage:
    from compliance_docs.assembly import generate_package

    result = generate_package(parts, compliance, options)
    if result.success:
        print(result.total_pages, len(result.documents))
"""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

import fitz  # PyMuPDF

from ..config import Config, default_config
from ..contracts import CompliancePackageResult, GeneratedDocument
from ..documents import (
    PACKAGE_GENERATORS,
    PER_PART_GENERATORS,
    custom_document_name,
    generate_custom_certificate,
    per_part_document_name,
)
from ..documents.base import Clock
from ..layout.canvas import DocumentFonts, PageCanvas
from ..models.compliance import ComplianceData
from ..models.enums import DocumentType
from ..models.options import CompliancePackageOptions
from ..models.part import PartTraceabilityData
from ..utils.pdf_inspect import get_pdf_page_count, open_pdf
from ..validation.validator import find_missing_fields, format_missing_fields

logger = logging.getLogger(__name__)

INDEX_TOP_Y = 520.0
INDEX_LINE_HEIGHT = 15.0


def index_entry(position: int, document: GeneratedDocument) -> str:
    """``<i>. <name> (<p> page[s])``, plus the package pages once merged."""
    plural = "s" if document.pages > 1 else ""
    entry = f"{position}. {document.name} ({document.pages} page{plural})"
    if not document.start_page:
        return entry
    if document.pages > 1:
        return f"{entry} - pp. {document.start_page}-{document.end_page}"
    return f"{entry} - p. {document.start_page}"


def assign_package_pages(documents: Sequence[GeneratedDocument], first_page: int = 2) -> None:
    """Set each document's start page in the merged package (title page is page 1)."""
    page = first_page
    for document in documents:
        document.start_page = page
        page += document.pages


class CompliancePackageGenerator:
    """
    Generate and assemble compliance document packages.

    Usage:
        generator = CompliancePackageGenerator()
        result = generator.generate_package(parts, compliance, options)

        if result.success:
            open("package.pdf", "wb").write(result.merged_package)
        else:
            print(result.error)

    Attributes:
        config: Layout and assembly configuration
        clock: Source of the generation time (datetime.now by default)
    """

    def __init__(self, config: Optional[Config] = None, clock: Optional[Clock] = None):
        self.config = config or default_config
        self.clock = clock or datetime.now

    def generate_documents(
        self,
        parts: Sequence[PartTraceabilityData],
        compliance: ComplianceData,
        options: CompliancePackageOptions,
    ) -> List[GeneratedDocument]:
        """Generate every selected document in package order. Exceptions propagate."""
        documents: List[GeneratedDocument] = []

        for attr in options.unsupported_selections():
            logger.warning("Option %s is selected but no generator exists for it; skipped", attr)

        per_part = options.selected_per_part()
        for part in parts:
            for doc_type in per_part:
                generate, _ = PER_PART_GENERATORS[doc_type]
                data = generate(part, compliance, config=self.config, clock=self.clock)
                documents.append(self._document(
                    per_part_document_name(doc_type, part.part_number), doc_type, data,
                ))

        for doc_type in options.selected_package_level():
            generate, name = PACKAGE_GENERATORS[doc_type]
            data = generate(parts, compliance, config=self.config, clock=self.clock)
            documents.append(self._document(name, doc_type, data))

        for certificate in options.custom_certificates:
            data = generate_custom_certificate(certificate, compliance, config=self.config, clock=self.clock)
            documents.append(self._document(custom_document_name(certificate), DocumentType.CUSTOM, data))

        return documents

    def _document(self, name: str, doc_type: DocumentType, data: bytes) -> GeneratedDocument:
        pages = get_pdf_page_count(data)
        logger.debug("Generated %s (%s, %d page(s))", name, doc_type.value, pages)
        return GeneratedDocument(name=name, type=doc_type, pages=pages, data=data)

    def build_title_page(
        self,
        merged: fitz.Document,
        fonts: DocumentFonts,
        documents: Sequence[GeneratedDocument],
        compliance: ComplianceData,
        now: datetime,
    ) -> PageCanvas:
        """
        Add the title page with order details and the document index.

        The index is kept to this single page: entries that do not fit
        are summarised in a final "... and N more" line.
        """
        cfg = self.config
        page = merged.new_page(width=cfg.page_width, height=cfg.page_height)
        canvas = PageCanvas(page, fonts, cfg)

        canvas.text(150, 700, cfg.package_title, size=18, bold=True, color=cfg.company_color)
        canvas.text(50, 650, f"Order: {compliance.order_info.order_number}", size=12)
        canvas.text(50, 630, f"Customer: {compliance.customer_info.name}", size=12)
        canvas.text(50, 610, f"Generated: {now.strftime(cfg.timestamp_format)}", size=12)
        canvas.text(50, 550, "DOCUMENT INDEX:", size=14, bold=True)

        capacity = int((INDEX_TOP_Y - cfg.content_bottom) // INDEX_LINE_HEIGHT) + 1
        shown = documents if len(documents) <= capacity else documents[:capacity - 1]

        y = INDEX_TOP_Y
        for position, document in enumerate(shown, start=1):
            canvas.text(70, y, index_entry(position, document), size=10)
            y -= INDEX_LINE_HEIGHT

        hidden = len(documents) - len(shown)
        if hidden:
            canvas.text(70, y, f"... and {hidden} more document(s)", size=10)

        canvas.flush()
        return canvas

    def merge_documents(
        self,
        documents: Sequence[GeneratedDocument],
        compliance: ComplianceData,
        now: Optional[datetime] = None,
    ) -> bytes:
        """
        Title page followed by every document's pages, in order.

        Sets each document's start_page to where it lands in the package.
        """
        now = now or self.clock()
        assign_package_pages(documents)
        merged = fitz.open()
        try:
            fonts = DocumentFonts.load(self.config)
            self.build_title_page(merged, fonts, documents, compliance, now)

            for document in documents:
                source = open_pdf(document.data)
                try:
                    merged.insert_pdf(source)
                finally:
                    source.close()

            if self.config.stamp_package_page_numbers:
                self._stamp_package_pages(merged, fonts)

            merged.set_metadata({
                "title": f"Compliance Package {compliance.order_info.order_number}",
                "author": compliance.company_info.name,
                "subject": f"Customer: {compliance.customer_info.name}",
                "creator": self.config.pdf_creator,
                "producer": self.config.pdf_producer,
                "creationDate": fitz.get_pdf_now(),
            })
            return merged.tobytes(garbage=3, deflate=True)
        finally:
            merged.close()

    def _stamp_package_pages(self, merged: fitz.Document, fonts: DocumentFonts) -> None:
        """Centre "Package page i of n" at the bottom of every merged page."""
        cfg = self.config
        total = len(merged)
        for index in range(total):
            canvas = PageCanvas(merged[index], fonts, cfg)
            label = f"Package page {index + 1} of {total}"
            x = (canvas.width - canvas.text_width(label, cfg.small_size)) / 2
            canvas.text(x, cfg.package_stamp_y, label, size=cfg.small_size, color=cfg.footer_color)
            canvas.flush()

    def generate_complete_package(
        self,
        parts: Sequence[PartTraceabilityData],
        compliance: ComplianceData,
        options: CompliancePackageOptions,
    ) -> CompliancePackageResult:
        """
        Generate all selected documents and merge them into one package.

        Does not validate required fields; see generate_package().

        Returns:
            CompliancePackageResult; on any exception success=False with
            no documents and the exception message as error
        """
        try:
            logger.info(
                "Generating compliance package for order %s: %d part(s)",
                compliance.order_info.order_number, len(parts),
            )
            now = self.clock()
            documents = self.generate_documents(parts, compliance, options)
            merged = self.merge_documents(documents, compliance, now)
            total_pages = sum(doc.pages for doc in documents)
            logger.info(
                "Compliance package for order %s ready: %d document(s), %d page(s)",
                compliance.order_info.order_number, len(documents), total_pages,
            )
        except Exception as exc:
            logger.exception("Compliance package generation failed")
            return CompliancePackageResult.failure(
                str(exc) or "Unknown error generating compliance package"
            )

        return CompliancePackageResult(
            success=True,
            documents=documents,
            merged_package=merged,
            total_pages=total_pages,
        )

    def generate_package(
        self,
        parts: Sequence[PartTraceabilityData],
        compliance: ComplianceData,
        options: CompliancePackageOptions,
    ) -> CompliancePackageResult:
        """
        Validate required fields, then generate the package.

        When fields are missing nothing is rendered; the result lists
        every missing field.
        """
        missing = find_missing_fields(parts, compliance)
        if missing:
            return CompliancePackageResult.failure(format_missing_fields(missing), missing)
        return self.generate_complete_package(parts, compliance, options)


def generate_complete_package(
    parts: Sequence[PartTraceabilityData],
    compliance: ComplianceData,
    options: CompliancePackageOptions,
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
) -> CompliancePackageResult:
    """
    Convenience function: generate and merge without validation.

    Example:
        result = generate_complete_package(parts, compliance, options)
        print(result.total_pages)
    """
    return CompliancePackageGenerator(config, clock).generate_complete_package(parts, compliance, options)


def generate_package(
    parts: Sequence[PartTraceabilityData],
    compliance: ComplianceData,
    options: CompliancePackageOptions,
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
) -> CompliancePackageResult:
    """Convenience function: validate required fields, then generate."""
    return CompliancePackageGenerator(config, clock).generate_package(parts, compliance, options)
