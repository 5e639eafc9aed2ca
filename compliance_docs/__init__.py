"""
Compliance Document Generation Engine v1.0

Renders aviation part-traceability and compliance records into PDF
certificates and assembles them into one paginated package.

Documents:
- Traceability Certificate (EASA Form 1 / FAA 8130-3 style): per part
- Certificate of Conformity: per part
- Material Test Report: per part
- Packing Slip: per package
- Export Certificate: per package
- Custom certificates (free text): per package
"""

__version__ = "1.0.0"


def __getattr__(name):
    """Lazy imports so the data model can be used without loading PyMuPDF."""

    _model_names = {
        "PartTraceabilityData", "ComplianceData", "CompliancePackageOptions",
        "CompanyInfo", "CustomerInfo", "OrderInfo", "AviationCompliance",
        "CustomCertificate", "MaterialSpec", "MaterialTestResult",
        "PartCondition", "RegulatoryBasis", "CertificateTemplate", "DocumentType",
        "default_part", "default_compliance_data", "default_package_options",
    }
    _contract_names = {"GeneratedDocument", "CompliancePackageResult"}
    _validation_names = {"find_missing_fields", "require_fields", "MissingFieldsError"}
    _assembly_names = {
        "CompliancePackageGenerator", "generate_complete_package", "generate_package",
    }

    if name in _model_names:
        from . import models
        return getattr(models, name)
    elif name in _contract_names:
        from . import contracts
        return getattr(contracts, name)
    elif name in _validation_names:
        from . import validation
        return getattr(validation, name)
    elif name in _assembly_names:
        from . import assembly
        return getattr(assembly, name)

    raise AttributeError(f"module 'compliance_docs' has no attribute {name!r}")
