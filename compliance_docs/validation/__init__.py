"""Pre-generation validation."""

from .validator import (
    MissingFieldsError,
    find_missing_fields,
    require_fields,
    format_missing_fields,
)

__all__ = [
    "MissingFieldsError",
    "find_missing_fields",
    "require_fields",
    "format_missing_fields",
]
