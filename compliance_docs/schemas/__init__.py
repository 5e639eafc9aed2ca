"""Field rules used by the validator."""

from .required_fields import (
    COMPLIANCE_REQUIRED_FIELDS,
    PART_REQUIRED_FIELDS,
    part_field_label,
    is_blank,
)

__all__ = [
    "COMPLIANCE_REQUIRED_FIELDS",
    "PART_REQUIRED_FIELDS",
    "part_field_label",
    "is_blank",
]
