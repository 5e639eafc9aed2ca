"""Tests for the individual document generators."""

from dataclasses import replace

import pytest

from compliance_docs.documents import (
    custom_document_name,
    document_number,
    generate_conformity_certificate,
    generate_custom_certificate,
    generate_export_certificate,
    generate_material_test_report,
    generate_packing_slip,
    generate_traceability_certificate,
)
from compliance_docs.documents.packing_slip import packing_slip_rows
from compliance_docs.models import (
    AviationCompliance,
    CustomCertificate,
    MaterialSpec,
    MaterialTestResult,
    PartTraceabilityData,
)
from compliance_docs.utils import extract_page_texts, extract_pdf_text, get_pdf_page_count, page_sizes

from conftest import FROZEN_NOW

EXPECTED_SUFFIX = str(int(FROZEN_NOW.timestamp() * 1000))[-6:]


def many_parts(count):
    return [
        PartTraceabilityData(
            part_number=f"PN-{i:03d}",
            serial_number=f"SN-{i:03d}",
            description="Bracket Assembly",
            quantity=1,
        )
        for i in range(1, count + 1)
    ]


class TestDocumentNumber:
    def test_uses_last_six_millisecond_digits(self):
        assert document_number("COC", "SO-1", FROZEN_NOW) == f"COC-SO-1-{EXPECTED_SUFFIX}"

    def test_digit_count_configurable(self):
        number = document_number("MTR", "PN", FROZEN_NOW, digits=4)
        assert number == f"MTR-PN-{EXPECTED_SUFFIX[-4:]}"


class TestTraceabilityCertificate:
    def test_single_letter_page(self, hydraulic_fitting, compliance, frozen_clock):
        data = generate_traceability_certificate(hydraulic_fitting, compliance, clock=frozen_clock)
        assert get_pdf_page_count(data) == 1
        assert page_sizes(data) == [(612, 792)]

    def test_content(self, hydraulic_fitting, compliance, frozen_clock):
        text = extract_pdf_text(
            generate_traceability_certificate(hydraulic_fitting, compliance, clock=frozen_clock)
        )
        for expected in [
            "AUTHORIZED RELEASE CERTIFICATE",
            "(Reference: EASA Form 1 / FAA 8130-3)",
            "1. PART IDENTIFICATION",
            "2. TRACEABILITY INFORMATION",
            "3. COMPLIANCE DECLARATION",
            "4. AUTHORIZED SIGNATURE",
            "MS21919DG4",
            "SN1001",
            "OVERHAULED",
            "Lufthansa",
            "Regulatory Basis: EASA, FAA",
            "Standards: AS9100, AS9120",
            "End Use Country: Germany",
            "03/15/2024",
            "Page 1 of 1",
        ]:
            assert expected in text

    def test_does_not_mutate_inputs(self, hydraulic_fitting, compliance, frozen_clock):
        part_before = replace(hydraulic_fitting)
        data_before = compliance.to_dict()
        generate_traceability_certificate(hydraulic_fitting, compliance, clock=frozen_clock)
        assert hydraulic_fitting == part_before
        assert compliance.to_dict() == data_before


class TestConformityCertificate:
    def test_certificate_number_and_statement(self, hydraulic_fitting, compliance, frozen_clock):
        data = generate_conformity_certificate(hydraulic_fitting, compliance, clock=frozen_clock)
        text = extract_pdf_text(data)
        assert get_pdf_page_count(data) == 1
        assert f"Certificate No: COC-SO-2024-001-{EXPECTED_SUFFIX}" in text
        assert "SUPPLIER INFORMATION" in text
        assert "Certifications: AS9100, AS9120, EASA.145" in text
        assert "Customer: Turkish Airlines" in text
        assert "issued under the authority of EASA & FAA regulations." in text
        assert "Title: Quality Manager" in text


class TestMaterialTestReport:
    def test_default_material(self, hydraulic_fitting, compliance, frozen_clock):
        data = generate_material_test_report(hydraulic_fitting, compliance, clock=frozen_clock)
        text = extract_pdf_text(data)
        assert get_pdf_page_count(data) == 1
        assert f"Report No: MTR-MS21919DG4-{EXPECTED_SUFFIX}" in text
        assert "Aerospace Grade Aluminum Alloy 7075-T6" in text
        assert "LOT-77" in text
        assert text.count("PASS") == 5
        assert "ACCEPTABLE for use in aerospace applications." in text
        assert "NOT ACCEPTABLE" not in text

    def test_default_batch_when_part_has_none(self, actuator, compliance, frozen_clock):
        text = extract_pdf_text(generate_material_test_report(actuator, compliance, clock=frozen_clock))
        assert "B2024-001" in text

    def test_failing_material_override(self, hydraulic_fitting, compliance, frozen_clock):
        material = MaterialSpec(
            material_type="Titanium Ti-6Al-4V",
            heat_treatment="Annealed",
            specification="AMS 4911",
            batch_lot="HT-9",
            test_results=[
                MaterialTestResult("Tensile Strength (MPa)", ">= 895", "880", passed=False),
                MaterialTestResult("Hardness (HRC)", "30-39", "34"),
            ],
        )
        part = replace(hydraulic_fitting, material=material)
        text = extract_pdf_text(generate_material_test_report(part, compliance, clock=frozen_clock))
        assert "Titanium Ti-6Al-4V" in text
        assert "HT-9" in text
        assert "FAIL" in text
        assert "NOT ACCEPTABLE for use in aerospace applications." in text

    def test_long_results_table_continues_on_new_page(self, hydraulic_fitting, compliance, frozen_clock):
        material = MaterialSpec(
            material_type="Inconel 718",
            heat_treatment="Solution Treated",
            specification="AMS 5662",
            test_results=[MaterialTestResult(f"Prop {i}", "spec", "ok") for i in range(40)],
        )
        part = replace(hydraulic_fitting, material=material)
        data = generate_material_test_report(part, compliance, clock=frozen_clock)
        pages = extract_page_texts(data)

        assert len(pages) > 1
        assert "TEST RESULTS (continued)" in pages[1]
        joined = "\n".join(pages)
        assert joined.count("Prop ") == 40
        assert "Prop 39" in joined
        assert "CONCLUSION" in pages[-1]
        assert "Tested by:" in pages[-1]
        assert f"Page {len(pages)} of {len(pages)}" in pages[-1]

    def test_default_report_stays_on_one_page(self, hydraulic_fitting, compliance, frozen_clock):
        data = generate_material_test_report(hydraulic_fitting, compliance, clock=frozen_clock)
        assert get_pdf_page_count(data) == 1


class TestPackingSlip:
    def test_rows(self, hydraulic_fitting, actuator):
        rows = packing_slip_rows([hydraulic_fitting, actuator])
        assert rows[0] == ["1", "MS21919DG4", "SN1001", "Hydraulic Fitting", "2", "OVERHAULED"]
        assert rows[1][3] == "Main Landing Gear Retract..."
        assert rows[1][5] == "REPAIRED"

    def test_content(self, hydraulic_fitting, actuator, compliance, frozen_clock):
        data = generate_packing_slip([hydraulic_fitting, actuator], compliance, clock=frozen_clock)
        text = extract_pdf_text(data)
        assert get_pdf_page_count(data) == 1
        assert "SO-2024-001" in text
        assert "PO-5531" in text
        assert "Main Landing Gear Retract..." in text

    def test_customer_po_placeholder(self, hydraulic_fitting, compliance, frozen_clock):
        data = replace(compliance, order_info=replace(compliance.order_info, customer_po=""))
        text = extract_pdf_text(generate_packing_slip([hydraulic_fitting], data, clock=frozen_clock))
        assert "N/A" in text

    def test_long_parts_list_continues_on_new_page(self, compliance, frozen_clock):
        data = generate_packing_slip(many_parts(80), compliance, clock=frozen_clock)
        pages = extract_page_texts(data)
        assert len(pages) > 1
        assert "PN-080" in pages[-1]
        assert "PARTS LIST (continued)" in pages[1]
        assert f"Page 1 of {len(pages)}" in pages[0]
        assert f"Page {len(pages)} of {len(pages)}" in pages[-1]
        # every part appears exactly once
        joined = "\n".join(pages)
        assert all(joined.count(f"SN-{i:03d}") == 1 for i in range(1, 81))


class TestExportCertificate:
    def test_content(self, hydraulic_fitting, actuator, compliance, frozen_clock):
        data = generate_export_certificate([hydraulic_fitting, actuator], compliance, clock=frozen_clock)
        text = extract_pdf_text(data)
        assert get_pdf_page_count(data) == 1
        assert "do not require" in text
        assert "Country of Origin: Turkey" in text
        assert "Destination Country: Germany" in text
        assert "Order Number: SO-2024-001" in text
        assert "1. MS21919DG4 - Hydraulic Fitting (Qty: 2)" in text
        assert "2. 2-1597-3 - Main Landing Gear Retract Actuator Assembly (Qty: 1)" in text

    def test_licensed_and_flagged_export(self, hydraulic_fitting, compliance, frozen_clock):
        aviation = AviationCompliance(
            regulatory_basis=["FAA"],
            country_of_origin="USA",
            end_use_country="Germany",
            export_license="D123456",
            dual_use_goods=True,
            restricted_parts=True,
        )
        data = replace(compliance, aviation_compliance=aviation)
        text = extract_pdf_text(generate_export_certificate([hydraulic_fitting], data, clock=frozen_clock))
        assert "Export License: D123456" in text
        assert "Dual-Use Goods: YES" in text
        assert "Restricted Parts: YES" in text
        assert "do not require" not in text

    def test_paginates(self, compliance, frozen_clock):
        data = generate_export_certificate(many_parts(120), compliance, clock=frozen_clock)
        assert get_pdf_page_count(data) > 1
        assert "120. PN-120" in extract_pdf_text(data)


class TestCustomCertificate:
    @pytest.mark.parametrize("template", ["standard", "aviation", "custom"])
    def test_renders_each_template(self, template, compliance, frozen_clock):
        certificate = CustomCertificate(name="Shelf Life Statement", template=template,
                                        content="Sealants are within shelf life.")
        data = generate_custom_certificate(certificate, compliance, clock=frozen_clock)
        text = extract_pdf_text(data)
        assert get_pdf_page_count(data) == 1
        assert "Sealants are within shelf life." in text

    def test_aviation_template_adds_signature(self, compliance, frozen_clock):
        certificate = CustomCertificate(name="Statement", template="aviation", content="Body")
        text = extract_pdf_text(generate_custom_certificate(certificate, compliance, clock=frozen_clock))
        assert "Regulatory Basis: EASA, FAA" in text
        assert "AUTHORIZED SIGNATURE" in text

    def test_long_content_paginates(self, compliance, frozen_clock):
        content = "\n".join(f"Line {i} of the statement." for i in range(120))
        certificate = CustomCertificate(name="Long", content=content)
        data = generate_custom_certificate(certificate, compliance, clock=frozen_clock)
        assert get_pdf_page_count(data) > 1

    def test_document_name(self):
        assert custom_document_name(CustomCertificate(name="RoHS / REACH")) == "Custom_RoHS_REACH.pdf"
        assert custom_document_name(CustomCertificate(name="  ")) == "Custom_Certificate.pdf"
