"""Closed enumerations used by the compliance data model."""

from enum import Enum


class _CaseInsensitiveEnum(Enum):
    """Enum that also accepts its values in any letter case."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class PartCondition(_CaseInsensitiveEnum):
    """Physical condition of a certified part."""

    NEW = "new"
    USED = "used"
    OVERHAULED = "overhauled"
    REPAIRED = "repaired"


class RegulatoryBasis(_CaseInsensitiveEnum):
    """Airworthiness authorities a release can be issued under."""

    EASA = "EASA"
    FAA = "FAA"
    TC = "TC"          # Transport Canada
    UK_CAA = "UK CAA"
    SHGM = "SHGM"      # Turkish DGCA
    CAAC = "CAAC"


class CertificateTemplate(_CaseInsensitiveEnum):
    """Layout template for free-text custom certificates."""

    STANDARD = "standard"
    AVIATION = "aviation"
    CUSTOM = "custom"


class DocumentType(_CaseInsensitiveEnum):
    """Type tag carried by every generated document."""

    TRACEABILITY = "traceability"
    CONFORMITY = "conformity"
    MATERIAL_TEST = "material_test"
    PACKING_SLIP = "packing_slip"
    EXPORT_CERTIFICATE = "export_certificate"
    CUSTOM = "custom"

    @property
    def is_per_part(self) -> bool:
        return self in PER_PART_DOCUMENT_ORDER


# Per-part documents are always generated in this order for each part
PER_PART_DOCUMENT_ORDER = (
    DocumentType.TRACEABILITY,
    DocumentType.CONFORMITY,
    DocumentType.MATERIAL_TEST,
)
