"""Package assembly module."""

from .package import (
    CompliancePackageGenerator,
    generate_complete_package,
    generate_package,
    assign_package_pages,
    index_entry,
)

__all__ = [
    "CompliancePackageGenerator",
    "generate_complete_package",
    "generate_package",
    "assign_package_pages",
    "index_entry",
]
