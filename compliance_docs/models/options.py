"""Package options: which document kinds a package includes."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .enums import CertificateTemplate, DocumentType, PER_PART_DOCUMENT_ORDER


@dataclass
class CustomCertificate:
    """A free-text certificate rendered as plain text pages."""
    name: str
    content: str = ""
    template: CertificateTemplate = CertificateTemplate.STANDARD

    def __post_init__(self):
        self.template = CertificateTemplate(self.template)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomCertificate":
        return cls(
            name=data.get("name", "") or "",
            content=data.get("content", "") or "",
            template=data.get("template", CertificateTemplate.STANDARD.value),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "template": self.template.value, "content": self.content}


# Option attribute -> document type for kinds that have a generator
_OPTION_DOCUMENT_TYPES = {
    "include_traceability_certificate": DocumentType.TRACEABILITY,
    "include_conformity_certificate": DocumentType.CONFORMITY,
    "include_material_test_report": DocumentType.MATERIAL_TEST,
    "include_packing_slip": DocumentType.PACKING_SLIP,
    "include_export_certificate": DocumentType.EXPORT_CERTIFICATE,
}

# Kinds the UI can toggle but which have no generator yet
UNSUPPORTED_OPTIONS = (
    "include_airworthiness_certificate",
    "include_functional_test_report",
    "include_quality_certificate",
)

_CAMEL_KEYS = {
    "include_traceability_certificate": "includeTraceabilityCertificate",
    "include_conformity_certificate": "includeConformityCertificate",
    "include_airworthiness_certificate": "includeAirworthinessCertificate",
    "include_material_test_report": "includeMaterialTestReport",
    "include_functional_test_report": "includeFunctionalTestReport",
    "include_quality_certificate": "includeQualityCertificate",
    "include_export_certificate": "includeExportCertificate",
    "include_packing_slip": "includePackingSlip",
}


@dataclass
class CompliancePackageOptions:
    """
    Toggles for each document kind.

    All toggles default to False so that an options object states
    exactly what it includes. default_package_options() returns the
    UI builder's preset instead.
    """
    include_traceability_certificate: bool = False
    include_conformity_certificate: bool = False
    include_airworthiness_certificate: bool = False
    include_material_test_report: bool = False
    include_functional_test_report: bool = False
    include_quality_certificate: bool = False
    include_export_certificate: bool = False
    include_packing_slip: bool = False
    custom_certificates: List[CustomCertificate] = field(default_factory=list)

    def is_selected(self, doc_type: DocumentType) -> bool:
        for attr, mapped in _OPTION_DOCUMENT_TYPES.items():
            if mapped is doc_type:
                return bool(getattr(self, attr))
        return doc_type is DocumentType.CUSTOM and bool(self.custom_certificates)

    def selected_per_part(self) -> List[DocumentType]:
        """Per-part document types, in generation order."""
        return [t for t in PER_PART_DOCUMENT_ORDER if self.is_selected(t)]

    def selected_package_level(self) -> List[DocumentType]:
        """Package-level document types (packing slip, then export certificate)."""
        return [
            t for t in (DocumentType.PACKING_SLIP, DocumentType.EXPORT_CERTIFICATE)
            if self.is_selected(t)
        ]

    def unsupported_selections(self) -> List[str]:
        """Toggled-on kinds that no generator produces."""
        return [attr for attr in UNSUPPORTED_OPTIONS if getattr(self, attr)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompliancePackageOptions":
        kwargs = {attr: bool(data.get(camel, False)) for attr, camel in _CAMEL_KEYS.items()}
        kwargs["custom_certificates"] = [
            CustomCertificate.from_dict(c) for c in data.get("customCertificates") or []
        ]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {camel: getattr(self, attr) for attr, camel in _CAMEL_KEYS.items()}
        d["customCertificates"] = [c.to_dict() for c in self.custom_certificates]
        return d
