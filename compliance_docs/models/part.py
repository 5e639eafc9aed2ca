"""Part traceability model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from .enums import PartCondition


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Accept a date, a datetime or an ISO ``YYYY-MM-DD`` string."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


@dataclass
class MaterialTestResult:
    """One row of a material test report."""
    property_name: str
    specification: str
    actual: str
    passed: bool = True

    @property
    def status(self) -> str:
        return "PASS" if self.passed else "FAIL"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MaterialTestResult":
        return cls(
            property_name=data.get("property", ""),
            specification=data.get("specification", ""),
            actual=data.get("actual", ""),
            passed=bool(data.get("passed", True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "property": self.property_name,
            "specification": self.specification,
            "actual": self.actual,
            "passed": self.passed,
        }


@dataclass
class MaterialSpec:
    """
    Material identification and test data for a material test report.

    When a part carries no MaterialSpec the report falls back to
    default_material_spec() (7075-T6 aluminium per AMS 4045).

    Attributes:
        material_type: Alloy / temper description
        heat_treatment: Heat treatment condition
        specification: Governing material specifications
        batch_lot: Overrides the part's batch/lot number when set
        test_results: Rows of the test results table
    """
    material_type: str
    heat_treatment: str
    specification: str
    batch_lot: str = ""
    test_results: List[MaterialTestResult] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.test_results)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MaterialSpec":
        return cls(
            material_type=data.get("materialType", ""),
            heat_treatment=data.get("heatTreatment", ""),
            specification=data.get("specification", ""),
            batch_lot=data.get("batchLot", "") or "",
            test_results=[MaterialTestResult.from_dict(r) for r in data.get("testResults", [])],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "materialType": self.material_type,
            "heatTreatment": self.heat_treatment,
            "specification": self.specification,
            "batchLot": self.batch_lot,
            "testResults": [r.to_dict() for r in self.test_results],
        }


@dataclass
class PartTraceabilityData:
    """
    One physical part or lot to certify.

    Constructed by the caller per certification request and never
    modified by the engine. Condition strings are coerced to
    PartCondition; an unknown condition or a quantity below 1 raises
    ValueError.

    Attributes:
        part_number: Manufacturer part number (required)
        serial_number: Serial number of the item (required)
        description: Short part description (required)
        manufacturer: Original manufacturer / supplier
        manufacturer_serial: Manufacturer's own serial, if different
        condition: new, used, overhauled or repaired
        quantity: Number of units, at least 1
        traceability_source: Where the trace documents came from
        traceable_to: Last operator / entity the part traces back to
        last_certified_agency: Agency that issued the last release
        part_status_certification: Release document type (e.g. 8130-3)
        tags: Free-form labels
        release_date: Date of last release certificate
        expiry_date: Shelf-life or certificate expiry
        batch_lot: Batch or lot number
        material: Optional material data for the material test report
    """

    part_number: str
    serial_number: str
    description: str
    manufacturer: str = ""
    manufacturer_serial: str = ""
    condition: PartCondition = PartCondition.NEW
    quantity: int = 1
    traceability_source: str = ""
    traceable_to: str = ""
    last_certified_agency: str = ""
    part_status_certification: str = ""
    tags: List[str] = field(default_factory=list)
    release_date: Optional[date] = None
    expiry_date: Optional[date] = None
    batch_lot: str = ""
    material: Optional[MaterialSpec] = None

    def __post_init__(self):
        self.condition = PartCondition(self.condition)
        if (isinstance(self.quantity, bool) or not isinstance(self.quantity, (int, float))
                or (isinstance(self.quantity, float) and not self.quantity.is_integer())):
            raise ValueError(f"quantity must be an integer, got {self.quantity!r}")
        self.quantity = int(self.quantity)
        if self.quantity < 1:
            raise ValueError(f"quantity must be at least 1, got {self.quantity}")
        self.release_date = parse_date(self.release_date)
        self.expiry_date = parse_date(self.expiry_date)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PartTraceabilityData":
        """Build from the camelCase payload the UI layer supplies."""
        material = data.get("material")
        return cls(
            part_number=data.get("partNumber", "") or "",
            serial_number=data.get("serialNumber", "") or "",
            description=data.get("description", "") or "",
            manufacturer=data.get("manufacturer", "") or "",
            manufacturer_serial=data.get("manufacturerSerial", "") or "",
            condition=data.get("condition", PartCondition.NEW.value),
            quantity=data.get("quantity", 1),
            traceability_source=data.get("traceabilitySource", "") or "",
            traceable_to=data.get("traceableTo", "") or "",
            last_certified_agency=data.get("lastCertifiedAgency", "") or "",
            part_status_certification=data.get("partStatusCertification", "") or "",
            tags=list(data.get("tags") or []),
            release_date=data.get("releaseDate"),
            expiry_date=data.get("expiryDate"),
            batch_lot=data.get("batchLot", "") or "",
            material=MaterialSpec.from_dict(material) if material else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        d = {
            "partNumber": self.part_number,
            "serialNumber": self.serial_number,
            "description": self.description,
            "manufacturer": self.manufacturer,
            "manufacturerSerial": self.manufacturer_serial,
            "condition": self.condition.value,
            "quantity": self.quantity,
            "traceabilitySource": self.traceability_source,
            "traceableTo": self.traceable_to,
            "lastCertifiedAgency": self.last_certified_agency,
            "partStatusCertification": self.part_status_certification,
            "tags": list(self.tags),
            "releaseDate": self.release_date.isoformat() if self.release_date else None,
            "expiryDate": self.expiry_date.isoformat() if self.expiry_date else None,
            "batchLot": self.batch_lot,
        }
        if self.material is not None:
            d["material"] = self.material.to_dict()
        return d
