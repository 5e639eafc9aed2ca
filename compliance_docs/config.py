"""
Configuration for the compliance document engine.

All settings centralized here. Override by creating a Config instance
with custom values.

Usage:
    from compliance_docs.config import Config, default_config

    # Use defaults
    print(default_config.page_width)  # 612.0

    # Override for a run
    my_config = Config(stamp_package_page_numbers=False)
"""

from dataclasses import dataclass, field
from typing import Tuple

RGB = Tuple[float, float, float]


@dataclass
class Config:
    """
    Central configuration for document layout and package assembly.

    Coordinates are PDF points measured from the bottom-left corner.
    Create a new instance to override any setting.
    """

    # === Page geometry (US Letter) ===
    page_width: float = 612.0
    page_height: float = 792.0
    margin_left: float = 50.0
    margin_right: float = 50.0

    # === Header / footer ===
    header_y: float = 750.0           # Baseline of company name and title
    header_rule_offset: float = 40.0  # Rule drawn this far below header_y
    header_gap: float = 60.0          # First usable y is header_y - header_gap
    header_title_width: float = 250.0 # Title starts this far from the right edge
    footer_y: float = 30.0
    package_stamp_y: float = 15.0
    content_bottom: float = 60.0      # Body content never goes below this

    # === Fonts ===
    regular_font: str = "helv"   # Helvetica
    bold_font: str = "hebo"      # Helvetica-Bold
    company_name_size: float = 16.0
    header_title_size: float = 14.0
    document_title_size: float = 16.0
    section_title_size: float = 12.0
    box_title_size: float = 10.0
    body_size: float = 9.0
    small_size: float = 8.0

    # === Colours ===
    text_color: RGB = (0.0, 0.0, 0.0)
    company_color: RGB = (0.0, 0.0, 0.8)
    title_color: RGB = (0.8, 0.0, 0.0)
    section_color: RGB = (0.0, 0.0, 0.8)
    muted_color: RGB = (0.6, 0.6, 0.6)
    footer_color: RGB = (0.5, 0.5, 0.5)
    rule_color: RGB = (0.7, 0.7, 0.7)
    pass_color: RGB = (0.0, 0.7, 0.0)
    fail_color: RGB = (0.8, 0.0, 0.0)

    # === Content rules ===
    description_max_chars: int = 25   # Packing slip description column
    number_suffix_digits: int = 6     # COC-/MTR- number suffix from timestamp
    date_format: str = "%m/%d/%Y"
    timestamp_format: str = "%m/%d/%Y, %I:%M:%S %p"

    # === Package assembly ===
    package_title: str = "COMPLETE COMPLIANCE PACKAGE"
    stamp_package_page_numbers: bool = True

    # === PDF metadata ===
    pdf_creator: str = "compliance_docs"
    pdf_producer: str = "compliance_docs (PyMuPDF)"

    # === Output files (CLI only) ===
    package_file_template: str = "Compliance_Package_{order_number}.pdf"
    metadata_output_file: str = "package.json"

    # Standard bullet lines reused by several certificates
    test_conditions: Tuple[str, ...] = field(
        default_factory=lambda: (
            "Test Temperature: 23°C ± 2°C",
            "Relative Humidity: 50% ± 5%",
            "Test Standards: ASTM E8/E8M, ASTM E18",
            "Equipment Calibration: Current and Valid",
            "Test Specimens: 3 samples tested per property",
        )
    )

    @property
    def content_width(self) -> float:
        """Usable width between the left and right margins."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def page_size(self) -> Tuple[float, float]:
        return (self.page_width, self.page_height)


# Default configuration instance
default_config = Config()
