"""Rental property investment analysis data types."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from agentdesk.models.loan import LoanTerms


class RenovationCategory(Enum):
    LANDSCAPING = "landscaping"
    ROOF = "roof"
    PAINTING = "painting"  # Painting / pressure washing
    DOORS_WINDOWS = "doors_windows"
    LIGHTING_SECURITY = "lighting_security"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    FLOORING = "flooring"
    HVAC = "hvac"
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    OTHER = "other"


@dataclass(frozen=True)
class RenovationItem:
    category: RenovationCategory
    cost: Decimal


@dataclass(frozen=True)
class UnitFinancials:
    current_rent_monthly: Decimal = Decimal("0")
    potential_rent_monthly: Decimal = Decimal("0")
    repair_cost: Decimal = Decimal("0")
    market_value: Decimal = Decimal("0")
    bedrooms: int = 0
    bathrooms: Decimal = Decimal("0")


@dataclass(frozen=True)
class ExpenseProfile:
    """Monthly operating expenses. Management and vacancy are percentages."""
    insurance_monthly: Decimal = Decimal("0")
    property_tax_monthly: Decimal = Decimal("0")
    maintenance_monthly: Decimal = Decimal("0")
    management_pct: Decimal = Decimal("0")  # % of effective income
    vacancy_pct: Decimal = Decimal("0")
    other_monthly: Decimal = Decimal("0")

    @property
    def annual_fixed_expenses(self) -> Decimal:
        """Insurance + property tax + maintenance + other, annualized."""
        return (
            self.insurance_monthly
            + self.property_tax_monthly
            + self.maintenance_monthly
            + self.other_monthly
        ) * 12


@dataclass(frozen=True)
class InvestmentInputs:
    property_value: Decimal
    down_payment: Decimal
    loan: LoanTerms
    closing_costs: Decimal = Decimal("0")
    units: tuple[UnitFinancials, ...] = ()
    renovation_items: tuple[RenovationItem, ...] = ()
    other_monthly_income: Decimal = Decimal("0")
    current_expenses: ExpenseProfile = field(default_factory=ExpenseProfile)
    projected_expenses: ExpenseProfile = field(default_factory=ExpenseProfile)

    @property
    def total_repair_costs(self) -> Decimal:
        return sum((u.repair_cost for u in self.units), Decimal("0"))

    @property
    def renovation_cost(self) -> Decimal:
        """Per-unit repairs plus itemized renovation work.

        Derived, so the total always matches its line items.
        """
        items = sum((item.cost for item in self.renovation_items), Decimal("0"))
        return self.total_repair_costs + items

    @property
    def total_cash_invested(self) -> Decimal:
        return self.down_payment + self.closing_costs + self.renovation_cost


@dataclass
class YearProjection:
    year: int
    rent: Decimal = Decimal("0")
    property_value: Decimal = Decimal("0")
    noi: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")
    loan_balance: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")
    cap_rate: Decimal = Decimal("0")  # Percent
    roi: Decimal = Decimal("0")  # Percent of total cash invested


@dataclass
class InvestmentResult:
    unit_count: int = 0

    # Income
    current_annual_rent: Decimal = Decimal("0")
    potential_annual_rent: Decimal = Decimal("0")
    total_rent_increase: Decimal = Decimal("0")
    current_effective_income: Decimal = Decimal("0")
    projected_effective_income: Decimal = Decimal("0")

    # Expenses
    current_operating_expenses: Decimal = Decimal("0")
    projected_operating_expenses: Decimal = Decimal("0")

    # Operations
    current_noi: Decimal = Decimal("0")
    projected_noi: Decimal = Decimal("0")
    annual_debt_service: Decimal = Decimal("0")
    current_cash_flow: Decimal = Decimal("0")
    annual_cash_flow: Decimal = Decimal("0")  # Projected

    # Valuation (rates in percent)
    current_cap_rate: Decimal = Decimal("0")
    improved_cap_rate: Decimal = Decimal("0")
    total_repair_costs: Decimal = Decimal("0")
    value_gain: Decimal = Decimal("0")

    # Returns
    total_cash_invested: Decimal = Decimal("0")
    cash_on_cash_return: Decimal = Decimal("0")
    dscr: Decimal = Decimal("0")

    projections: dict[int, YearProjection] = field(default_factory=dict)

    @property
    def year3(self) -> YearProjection:
        return self.projections[3]

    @property
    def year5(self) -> YearProjection:
        return self.projections[5]


@dataclass
class TargetPriceResult:
    recommended_price: Decimal = Decimal("0")
    max_offer_price: Decimal = Decimal("0")
    cap_rate_based_price: Decimal = Decimal("0")
    cash_on_cash_based_price: Decimal = Decimal("0")
