"""Required-field validation for compliance packages.

Rules:
- Order number, customer name and end-use country must be non-empty
- Every part needs a part number, serial number and description
- Whitespace-only values count as missing
- A package with no parts is reported as missing "Parts"

Every missing field is reported, not just the first one found, so the
user can fix the whole form in one pass. Validation runs before any
rendering; nothing is generated while fields are missing.
"""

import logging
from typing import List, Sequence

from ..models.compliance import ComplianceData
from ..models.part import PartTraceabilityData
from ..schemas.required_fields import (
    COMPLIANCE_REQUIRED_FIELDS,
    PART_REQUIRED_FIELDS,
    part_field_label,
    is_blank,
)

logger = logging.getLogger(__name__)


class MissingFieldsError(ValueError):
    """Raised when required package fields are empty."""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(format_missing_fields(self.missing_fields))


def format_missing_fields(missing_fields: Sequence[str]) -> str:
    return f"Missing required fields: {', '.join(missing_fields)}"


def find_missing_fields(
    parts: Sequence[PartTraceabilityData],
    compliance_data: ComplianceData,
) -> List[str]:
    """
    Collect every missing required field.

    Args:
        parts: Parts to certify, in package order
        compliance_data: Order-level compliance context

    Returns:
        Missing field labels, compliance-level first, then per part
        ("Part 2 - Serial Number"). Empty if the package may be generated.
    """
    missing: List[str] = []

    for name, getter in COMPLIANCE_REQUIRED_FIELDS:
        if is_blank(getter(compliance_data)):
            missing.append(name)

    if not parts:
        missing.append("Parts")

    for index, part in enumerate(parts):
        for name, getter in PART_REQUIRED_FIELDS:
            if is_blank(getter(part)):
                missing.append(part_field_label(index, name))

    if missing:
        logger.info("Package validation found %d missing field(s): %s", len(missing), missing)
    return missing


def require_fields(
    parts: Sequence[PartTraceabilityData],
    compliance_data: ComplianceData,
) -> None:
    """
    Raise if any required field is missing.

    Raises:
        MissingFieldsError: carrying the full list of missing fields
    """
    missing = find_missing_fields(parts, compliance_data)
    if missing:
        raise MissingFieldsError(missing)
