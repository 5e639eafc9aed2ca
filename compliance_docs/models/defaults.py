"""Factory functions for blank form records and test fixtures.

Every call builds fresh objects; date defaults are evaluated at call
time rather than at import time.
"""

from dataclasses import replace
from datetime import date
from typing import Optional

from .compliance import AviationCompliance, CompanyInfo, ComplianceData, CustomerInfo, OrderInfo
from .enums import PartCondition, RegulatoryBasis
from .options import CompliancePackageOptions
from .part import MaterialSpec, MaterialTestResult, PartTraceabilityData


def default_part(today: Optional[date] = None, **overrides) -> PartTraceabilityData:
    """Blank part as the builder form starts it (required fields empty)."""
    part = PartTraceabilityData(
        part_number="",
        serial_number="",
        description="",
        condition=PartCondition.NEW,
        quantity=1,
        release_date=today or date.today(),
    )
    return replace(part, **overrides) if overrides else part


def default_company_info() -> CompanyInfo:
    return CompanyInfo(
        name="TASAVIA",
        code="TAS",
        certifications=["AS9100", "AS9120", "EASA.145"],
    )


def default_compliance_data(today: Optional[date] = None, **overrides) -> ComplianceData:
    """
    Compliance context with the issuing company's standing defaults.

    Order number, customer name and end-use country are left empty;
    they must be filled in before a package passes validation.
    Keyword overrides replace whole sub-records (company_info, ...).
    """
    data = ComplianceData(
        company_info=default_company_info(),
        customer_info=CustomerInfo(name=""),
        order_info=OrderInfo(order_number="", date=(today or date.today()).isoformat()),
        aviation_compliance=AviationCompliance(
            regulatory_basis=[RegulatoryBasis.EASA, RegulatoryBasis.FAA],
            applicable_standards=["AS9100", "AS9120"],
            country_of_origin="Turkey",
        ),
    )
    return replace(data, **overrides) if overrides else data


def default_package_options(**overrides) -> CompliancePackageOptions:
    """Document selection preset used by the package builder."""
    options = CompliancePackageOptions(
        include_traceability_certificate=True,
        include_conformity_certificate=True,
        include_airworthiness_certificate=False,
        include_material_test_report=True,
        include_functional_test_report=False,
        include_quality_certificate=True,
        include_export_certificate=True,
        include_packing_slip=True,
    )
    return replace(options, **overrides) if overrides else options


def default_material_spec() -> MaterialSpec:
    """7075-T6 aluminium data used when a part carries no material record."""
    return MaterialSpec(
        material_type="Aerospace Grade Aluminum Alloy 7075-T6",
        heat_treatment="Solution Heat Treated and Aged",
        specification="AMS 4045, ASTM B209",
        test_results=[
            MaterialTestResult("Tensile Strength (MPa)", "≥ 570", "582"),
            MaterialTestResult("Yield Strength (MPa)", "≥ 505", "518"),
            MaterialTestResult("Elongation (%)", "≥ 8", "9.2"),
            MaterialTestResult("Hardness (HRB)", "87-95", "91"),
            MaterialTestResult("Chemical Composition (%)", "Per AMS 4045", "Conforms"),
        ],
    )


# Batch number printed when neither the part nor its material record has one
DEFAULT_BATCH_LOT = "B2024-001"
