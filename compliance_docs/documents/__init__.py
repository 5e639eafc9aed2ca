"""Document generators.

Per-part generators take (part, compliance); package-level generators
take (parts, compliance). All accept optional ``config`` and ``clock``
keyword arguments and return PDF bytes.
"""

from .base import DocumentBuilder, document_number
from .traceability import generate_traceability_certificate
from .conformity import generate_conformity_certificate
from .material_test import generate_material_test_report
from .packing_slip import generate_packing_slip
from .export_certificate import generate_export_certificate
from .custom import generate_custom_certificate, custom_document_name
from ..models.enums import DocumentType

# Per-part generators and the name prefix of their output files
PER_PART_GENERATORS = {
    DocumentType.TRACEABILITY: (generate_traceability_certificate, "Traceability_Certificate"),
    DocumentType.CONFORMITY: (generate_conformity_certificate, "Conformity_Certificate"),
    DocumentType.MATERIAL_TEST: (generate_material_test_report, "Material_Test_Report"),
}

# Package-level generators and their fixed output file names
PACKAGE_GENERATORS = {
    DocumentType.PACKING_SLIP: (generate_packing_slip, "Packing_Slip.pdf"),
    DocumentType.EXPORT_CERTIFICATE: (generate_export_certificate, "Export_Certificate.pdf"),
}


def per_part_document_name(doc_type: DocumentType, part_number: str) -> str:
    """``<DocumentType>_<PartNumber>.pdf``"""
    _, prefix = PER_PART_GENERATORS[doc_type]
    return f"{prefix}_{part_number}.pdf"


__all__ = [
    "DocumentBuilder",
    "document_number",
    "generate_traceability_certificate",
    "generate_conformity_certificate",
    "generate_material_test_report",
    "generate_packing_slip",
    "generate_export_certificate",
    "generate_custom_certificate",
    "custom_document_name",
    "per_part_document_name",
    "PER_PART_GENERATORS",
    "PACKAGE_GENERATORS",
]
