"""Required-field rules for package generation.

Each rule pairs the human-readable field name reported to the user with
a getter on the record it applies to. The validator walks these in
order so the reported list is stable.
"""

from typing import Callable, List, Tuple

from ..models.compliance import ComplianceData
from ..models.part import PartTraceabilityData

# (display name, getter) checked once per package
COMPLIANCE_REQUIRED_FIELDS: List[Tuple[str, Callable[[ComplianceData], str]]] = [
    ("Order Number", lambda d: d.order_info.order_number),
    ("Customer Name", lambda d: d.customer_info.name),
    ("End Use Country", lambda d: d.aviation_compliance.end_use_country),
]

# (display name, getter) checked for every part
PART_REQUIRED_FIELDS: List[Tuple[str, Callable[[PartTraceabilityData], str]]] = [
    ("Part Number", lambda p: p.part_number),
    ("Serial Number", lambda p: p.serial_number),
    ("Description", lambda p: p.description),
]


def part_field_label(index: int, field_name: str) -> str:
    """Label for a missing part field; index is 0-based."""
    return f"Part {index + 1} - {field_name}"


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
