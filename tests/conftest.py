from datetime import date, datetime

import pytest

from compliance_docs.models import (
    AviationCompliance,
    CompanyInfo,
    ComplianceData,
    CompliancePackageOptions,
    CustomerInfo,
    OrderInfo,
    PartTraceabilityData,
    RegulatoryBasis,
    default_compliance_data,
)

FROZEN_NOW = datetime(2024, 3, 15, 10, 30, 0)


@pytest.fixture
def frozen_clock():
    return lambda: FROZEN_NOW


@pytest.fixture
def hydraulic_fitting() -> PartTraceabilityData:
    return PartTraceabilityData(
        part_number="MS21919DG4",
        serial_number="SN1001",
        description="Hydraulic Fitting",
        manufacturer="Parker Aerospace",
        condition="overhauled",
        quantity=2,
        traceability_source="Lufthansa Technik",
        traceable_to="Lufthansa",
        last_certified_agency="EASA",
        part_status_certification="EASA Form 1",
        release_date=date(2024, 1, 10),
        batch_lot="LOT-77",
    )


@pytest.fixture
def actuator() -> PartTraceabilityData:
    return PartTraceabilityData(
        part_number="2-1597-3",
        serial_number="SN2002",
        description="Main Landing Gear Retract Actuator Assembly",
        manufacturer="Safran",
        condition="repaired",
        quantity=1,
    )


@pytest.fixture
def compliance() -> ComplianceData:
    return default_compliance_data(
        today=date(2024, 3, 15),
        company_info=CompanyInfo(
            name="Tasavia",
            code="TAS",
            address="Sabiha Gokcen Airport, Istanbul, Turkey",
            certifications=["AS9100", "AS9120", "EASA.145"],
        ),
        customer_info=CustomerInfo(name="Turkish Airlines", address="Yesilkoy, Istanbul"),
        order_info=OrderInfo(order_number="SO-2024-001", customer_po="PO-5531", date="2024-03-15"),
        aviation_compliance=AviationCompliance(
            regulatory_basis=[RegulatoryBasis.EASA, RegulatoryBasis.FAA],
            applicable_standards=["AS9100", "AS9120"],
            country_of_origin="Turkey",
            end_use_country="Germany",
        ),
    )


@pytest.fixture
def trace_and_conformity() -> CompliancePackageOptions:
    return CompliancePackageOptions(
        include_traceability_certificate=True,
        include_conformity_certificate=True,
    )


@pytest.fixture
def all_documents() -> CompliancePackageOptions:
    return CompliancePackageOptions(
        include_traceability_certificate=True,
        include_conformity_certificate=True,
        include_material_test_report=True,
        include_packing_slip=True,
        include_export_certificate=True,
    )
