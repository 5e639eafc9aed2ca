"""Data models for the compliance document engine."""

from .enums import (
    PartCondition,
    RegulatoryBasis,
    CertificateTemplate,
    DocumentType,
    PER_PART_DOCUMENT_ORDER,
)
from .part import PartTraceabilityData, MaterialSpec, MaterialTestResult, parse_date
from .compliance import (
    CompanyInfo,
    CustomerInfo,
    OrderInfo,
    AviationCompliance,
    ComplianceData,
)
from .options import CompliancePackageOptions, CustomCertificate
from .defaults import (
    default_part,
    default_company_info,
    default_compliance_data,
    default_package_options,
    default_material_spec,
    DEFAULT_BATCH_LOT,
)

__all__ = [
    # Enumerations
    "PartCondition",
    "RegulatoryBasis",
    "CertificateTemplate",
    "DocumentType",
    "PER_PART_DOCUMENT_ORDER",
    # Records
    "PartTraceabilityData",
    "MaterialSpec",
    "MaterialTestResult",
    "parse_date",
    "CompanyInfo",
    "CustomerInfo",
    "OrderInfo",
    "AviationCompliance",
    "ComplianceData",
    "CompliancePackageOptions",
    "CustomCertificate",
    # Factories
    "default_part",
    "default_company_info",
    "default_compliance_data",
    "default_package_options",
    "default_material_spec",
    "DEFAULT_BATCH_LOT",
]
