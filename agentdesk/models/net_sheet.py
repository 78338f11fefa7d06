from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class GeographicCostProfile:
    """Seller-side closing costs for one jurisdiction.

    Percent fields are percent of sale price; flat fields are dollars.
    """
    code: str
    name: str
    transfer_tax_pct: Decimal
    title_insurance_pct: Decimal
    attorney_fees_flat: Decimal
    recording_fees_flat: Decimal
    escrow_fees_pct: Decimal
    property_tax_rate_pct: Decimal  # Annual


@dataclass(frozen=True)
class BreakdownItem:
    category: str
    description: str
    amount: Decimal
    pct_of_sale: Decimal


@dataclass
class NetSheetResult:
    gross_sale_price: Decimal = Decimal("0")
    total_deductions: Decimal = Decimal("0")
    net_proceeds: Decimal = Decimal("0")
    jurisdiction: str = "DEFAULT"
    jurisdiction_name: str = ""
    breakdown_items: list[BreakdownItem] = field(default_factory=list)

    @property
    def seller_owes_at_closing(self) -> bool:
        return self.net_proceeds < 0
