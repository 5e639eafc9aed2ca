"""Result envelope returned by package generation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models.enums import DocumentType


@dataclass
class GeneratedDocument:
    """
    One rendered document (a self-contained PDF).

    start_page is the 1-based page in the merged package where the
    document begins; 0 until the package has been merged.
    """
    name: str
    type: DocumentType
    pages: int
    data: bytes = b""
    start_page: int = 0

    @property
    def end_page(self) -> int:
        return self.start_page + self.pages - 1 if self.start_page else 0

    def to_dict(self) -> Dict[str, Any]:
        """Metadata only; the PDF bytes are reported by size."""
        d: Dict[str, Any] = {
            "name": self.name,
            "type": self.type.value,
            "pages": self.pages,
            "bytes": len(self.data),
        }
        if self.start_page:
            d["pageRange"] = [self.start_page, self.end_page]
        return d


@dataclass
class CompliancePackageResult:
    """
    Output of one generation call.

    Attributes:
        success: Whether the whole package was generated
        documents: Generated documents in package order (empty on failure)
        merged_package: Title page + every document, as one PDF
        total_pages: Sum of document page counts (title page excluded)
        error: Failure message, if any
        missing_fields: Required fields that blocked generation
    """
    success: bool
    documents: List[GeneratedDocument] = field(default_factory=list)
    merged_package: Optional[bytes] = None
    total_pages: int = 0
    error: Optional[str] = None
    missing_fields: List[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, missing_fields: Optional[List[str]] = None) -> "CompliancePackageResult":
        return cls(
            success=False,
            documents=[],
            merged_package=None,
            total_pages=0,
            error=error,
            missing_fields=list(missing_fields or []),
        )

    @staticmethod
    def package_file_name(order_number: str) -> str:
        return f"Compliance_Package_{order_number}.pdf"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        d: Dict[str, Any] = {
            "success": self.success,
            "documents": [doc.to_dict() for doc in self.documents],
            "totalPages": self.total_pages,
            "mergedPackageBytes": len(self.merged_package) if self.merged_package else 0,
        }
        if self.error:
            d["error"] = self.error
        if self.missing_fields:
            d["missingFields"] = list(self.missing_fields)
        return d
