"""Tests for the command-line front end."""

import json
from dataclasses import replace

import pytest

from compliance_docs.cli import build_parser, main
from compliance_docs.models import CustomerInfo
from compliance_docs.utils import extract_page_texts, get_pdf_page_count, load_json_robust, parse_package_request


def write_request(path, parts, compliance, options):
    payload = {
        "parts": [part.to_dict() for part in parts],
        "complianceData": compliance.to_dict(),
        "options": options.to_dict(),
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestParseRequest:
    def test_round_trips_fixture_payload(self, tmp_path, hydraulic_fitting, compliance, all_documents):
        request = write_request(tmp_path / "request.json", [hydraulic_fitting], compliance, all_documents)
        payload, error = load_json_robust(request)
        assert error is None

        parts, data, options = parse_package_request(payload)
        assert parts == [hydraulic_fitting]
        assert data.order_info.order_number == "SO-2024-001"
        assert options.include_export_certificate

    def test_bom_prefixed_file(self, tmp_path):
        request = tmp_path / "bom.json"
        request.write_bytes(b"\xef\xbb\xbf" + json.dumps({"parts": []}).encode("utf-8"))
        payload, error = load_json_robust(request)
        assert error is None
        assert payload == {"parts": []}

    def test_missing_file(self, tmp_path):
        payload, error = load_json_robust(tmp_path / "nope.json")
        assert payload is None
        assert error.startswith("File not found")

    def test_top_level_must_be_object(self, tmp_path):
        request = tmp_path / "list.json"
        request.write_text("[1, 2]", encoding="utf-8")
        payload, error = load_json_robust(request)
        assert payload is None
        assert "JSON object" in error

    def test_latin1_file(self, tmp_path):
        request = tmp_path / "legacy.json"
        request.write_bytes('{"note": "Zürich"}'.encode("latin-1"))
        payload, error = load_json_robust(request)
        assert error is None
        assert payload == {"note": "Zürich"}

    def test_malformed_json(self, tmp_path):
        request = tmp_path / "bad.json"
        request.write_text("{not json", encoding="utf-8")
        payload, error = load_json_robust(request)
        assert payload is None
        assert error.startswith("JSON error")

    def test_invalid_condition_rejected(self):
        with pytest.raises(ValueError):
            parse_package_request({"parts": [{"partNumber": "PN", "condition": "scrap"}]})


class TestMain:
    def test_writes_package_and_metadata(self, tmp_path, hydraulic_fitting, compliance,
                                         trace_and_conformity, capsys):
        request = write_request(tmp_path / "request.json", [hydraulic_fitting], compliance,
                                trace_and_conformity)
        out = tmp_path / "out"

        assert main(["--input", str(request), "--out", str(out)]) == 0

        package = out / "Compliance_Package_SO-2024-001.pdf"
        assert package.exists()
        assert get_pdf_page_count(package.read_bytes()) == 3

        metadata = json.loads((out / "package.json").read_text())
        assert metadata["success"] is True
        assert metadata["totalPages"] == 2
        assert [d["name"] for d in metadata["documents"]] == [
            "Traceability_Certificate_MS21919DG4.pdf",
            "Conformity_Certificate_MS21919DG4.pdf",
        ]
        assert "Documents: 2" in capsys.readouterr().out

    def test_individual_documents(self, tmp_path, hydraulic_fitting, compliance, trace_and_conformity):
        request = write_request(tmp_path / "request.json", [hydraulic_fitting], compliance,
                                trace_and_conformity)
        out = tmp_path / "out"

        assert main(["--input", str(request), "--out", str(out), "--individual"]) == 0
        assert (out / "Traceability_Certificate_MS21919DG4.pdf").exists()
        assert (out / "Conformity_Certificate_MS21919DG4.pdf").exists()

    def test_no_stamp(self, tmp_path, hydraulic_fitting, compliance, trace_and_conformity):
        request = write_request(tmp_path / "request.json", [hydraulic_fitting], compliance,
                                trace_and_conformity)
        out = tmp_path / "out"

        assert main(["--input", str(request), "--out", str(out), "--no-stamp"]) == 0
        pages = extract_page_texts((out / "Compliance_Package_SO-2024-001.pdf").read_bytes())
        assert not any("Package page" in page for page in pages)

    def test_missing_fields_exit_code(self, tmp_path, hydraulic_fitting, compliance,
                                      trace_and_conformity, capsys):
        data = replace(compliance, customer_info=CustomerInfo(name=""))
        request = write_request(tmp_path / "request.json", [hydraulic_fitting], data,
                                trace_and_conformity)
        out = tmp_path / "out"

        assert main(["--input", str(request), "--out", str(out)]) == 1
        assert "- Customer Name" in capsys.readouterr().err
        assert not out.exists()

    def test_null_quantity_exit_code(self, tmp_path, hydraulic_fitting, compliance,
                                     trace_and_conformity, capsys):
        request = write_request(tmp_path / "request.json", [hydraulic_fitting], compliance,
                                trace_and_conformity)
        payload = json.loads(request.read_text())
        payload["parts"][0]["quantity"] = None
        request.write_text(json.dumps(payload), encoding="utf-8")

        assert main(["--input", str(request), "--out", str(tmp_path / "out")]) == 1
        assert "Invalid package request" in capsys.readouterr().err

    def test_non_object_request_exit_code(self, tmp_path, capsys):
        request = tmp_path / "request.json"
        request.write_text("[]", encoding="utf-8")
        assert main(["--input", str(request)]) == 1
        assert "JSON object" in capsys.readouterr().err

    def test_unreadable_input(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path / "missing.json")]) == 1
        assert "File not found" in capsys.readouterr().err


def test_parser_defaults():
    args = build_parser().parse_args(["--input", "request.json"])
    assert args.out == "compliance_output"
    assert not args.individual
    assert not args.no_stamp
    assert args.log_level == "WARNING"
