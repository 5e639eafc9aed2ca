"""Order-level compliance context shared by every document in a package."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .enums import RegulatoryBasis


@dataclass
class CompanyInfo:
    """The issuing organization printed in every document header."""
    name: str
    code: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    certifications: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompanyInfo":
        return cls(
            name=data.get("name", "") or "",
            code=data.get("code", "") or "",
            address=data.get("address", "") or "",
            phone=data.get("phone", "") or "",
            email=data.get("email", "") or "",
            certifications=list(data.get("certifications") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "code": self.code,
            "address": self.address,
            "phone": self.phone,
            "email": self.email,
            "certifications": list(self.certifications),
        }


@dataclass
class CustomerInfo:
    name: str
    address: str = ""
    contact: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomerInfo":
        return cls(
            name=data.get("name", "") or "",
            address=data.get("address", "") or "",
            contact=data.get("contact", "") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "address": self.address, "contact": self.contact}


@dataclass
class OrderInfo:
    order_number: str
    customer_po: str = ""
    date: str = ""
    reference: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderInfo":
        return cls(
            order_number=data.get("orderNumber", "") or "",
            customer_po=data.get("customerPO", "") or "",
            date=data.get("date", "") or "",
            reference=data.get("reference", "") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "orderNumber": self.order_number,
            "customerPO": self.customer_po,
            "date": self.date,
            "reference": self.reference,
        }


@dataclass
class AviationCompliance:
    """
    Regulatory and export context of an order.

    Attributes:
        regulatory_basis: Authorities in the order they are cited
        applicable_standards: Quality standards (AS9100, AS9120, ...)
        export_license: License reference, empty if none required
        country_of_origin: Country the goods ship from
        end_use_country: Destination / end-use country (required)
        dual_use_goods: Goods fall under dual-use export control
        restricted_parts: Order contains restricted parts
    """
    regulatory_basis: List[RegulatoryBasis] = field(default_factory=list)
    applicable_standards: List[str] = field(default_factory=list)
    export_license: str = ""
    country_of_origin: str = ""
    end_use_country: str = ""
    dual_use_goods: bool = False
    restricted_parts: bool = False

    def __post_init__(self):
        self.regulatory_basis = [RegulatoryBasis(b) for b in self.regulatory_basis]

    def basis_labels(self) -> List[str]:
        return [b.value for b in self.regulatory_basis]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AviationCompliance":
        return cls(
            regulatory_basis=list(data.get("regulatoryBasis") or []),
            applicable_standards=list(data.get("applicableStandards") or []),
            export_license=data.get("exportLicense", "") or "",
            country_of_origin=data.get("countryOfOrigin", "") or "",
            end_use_country=data.get("endUseCountry", "") or "",
            dual_use_goods=bool(data.get("dualUseGoods", False)),
            restricted_parts=bool(data.get("restrictedParts", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "regulatoryBasis": self.basis_labels(),
            "applicableStandards": list(self.applicable_standards),
            "exportLicense": self.export_license,
            "countryOfOrigin": self.country_of_origin,
            "endUseCountry": self.end_use_country,
            "dualUseGoods": self.dual_use_goods,
            "restrictedParts": self.restricted_parts,
        }


@dataclass
class ComplianceData:
    """Exactly one per generation call; read-only across all parts and documents."""
    company_info: CompanyInfo
    customer_info: CustomerInfo
    order_info: OrderInfo
    aviation_compliance: AviationCompliance

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComplianceData":
        return cls(
            company_info=CompanyInfo.from_dict(data.get("companyInfo") or {}),
            customer_info=CustomerInfo.from_dict(data.get("customerInfo") or {}),
            order_info=OrderInfo.from_dict(data.get("orderInfo") or {}),
            aviation_compliance=AviationCompliance.from_dict(data.get("aviationCompliance") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "companyInfo": self.company_info.to_dict(),
            "customerInfo": self.customer_info.to_dict(),
            "orderInfo": self.order_info.to_dict(),
            "aviationCompliance": self.aviation_compliance.to_dict(),
        }
