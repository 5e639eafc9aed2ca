"""File I/O utilities for the command-line front end."""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.compliance import ComplianceData
from ..models.options import CompliancePackageOptions
from ..models.part import PartTraceabilityData


# Request files exported from spreadsheet tools may carry a BOM or a legacy encoding
REQUEST_ENCODINGS = ("utf-8-sig", "latin-1")


def load_json_robust(filepath: Union[str, Path]) -> Tuple[Optional[Dict], Optional[str]]:
    """
    Load a package request JSON object from disk.

    The file is decoded with each of REQUEST_ENCODINGS in turn;
    utf-8-sig also accepts plain UTF-8. The top level must be a JSON
    object, since parse_package_request() reads named keys from it.

    Returns:
        Tuple of (data, error):
        - On success: (dict, None)
        - On failure: (None, error_message)
    """
    filepath = Path(filepath)
    if not filepath.is_file():
        return None, f"File not found: {filepath}"

    try:
        raw = filepath.read_bytes()
    except OSError as e:
        return None, f"Error: {str(e)[:100]}"

    for encoding in REQUEST_ENCODINGS:
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError:
            continue
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            return None, f"JSON error: {str(e)[:100]}"
        if not isinstance(data, dict):
            return None, f"Expected a JSON object at the top level, got {type(data).__name__}"
        return data, None

    return None, f"Failed all encodings for: {filepath}"


def parse_package_request(
    payload: Dict[str, Any],
) -> Tuple[List[PartTraceabilityData], ComplianceData, CompliancePackageOptions]:
    """
    Split a package request payload into model objects.

    Expected keys (camelCase, as the web form posts them):
        parts: list of part records
        complianceData: company/customer/order/aviation context
        options: document toggles and customCertificates

    Raises:
        ValueError: on invalid enum values or quantities
    """
    parts = [PartTraceabilityData.from_dict(p) for p in payload.get("parts") or []]
    compliance = ComplianceData.from_dict(payload.get("complianceData") or {})
    options = CompliancePackageOptions.from_dict(payload.get("options") or {})
    return parts, compliance, options


def safe_file_name(name: str) -> str:
    """Replace path separators and other unsafe characters with "_"."""
    return re.sub(r"[^\w.\-]+", "_", name)
