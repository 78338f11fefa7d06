from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class QualificationProgram:
    """Lending program ratio caps, all in percent."""
    name: str
    max_housing_ratio_pct: Decimal
    max_total_debt_ratio_pct: Decimal
    min_down_payment_pct: Decimal
    description: str = ""


@dataclass(frozen=True)
class PrequalificationInputs:
    monthly_income: Decimal
    funds_available: Decimal  # Applied in full as down payment
    monthly_debts: Decimal = Decimal("0")
    annual_rate_pct: Decimal = Decimal("7.0")
    property_tax_rate_pct: Decimal = Decimal("1.25")  # Annual, % of price
    insurance_rate_pct: Decimal = Decimal("0.35")  # Annual, % of price
    hoa_monthly: Decimal = Decimal("0")
    closing_cost_pct: Decimal = Decimal("3.0")


@dataclass
class PaymentBreakdown:
    principal_and_interest: Decimal = Decimal("0")
    property_taxes: Decimal = Decimal("0")
    homeowners_insurance: Decimal = Decimal("0")
    mortgage_insurance: Decimal = Decimal("0")
    hoa_fees: Decimal = Decimal("0")
    total_monthly_payment: Decimal = Decimal("0")


@dataclass
class CashToCloseAnalysis:
    down_payment_required: Decimal = Decimal("0")
    down_payment_pct: Decimal = Decimal("0")  # Buyer's funds as % of price
    closing_costs: Decimal = Decimal("0")
    total_cash_needed: Decimal = Decimal("0")
    has_enough_cash: bool = False
    cash_shortfall: Decimal = Decimal("0")
    suggested_closing_cost_reduction: Decimal = Decimal("0")  # Seller concession
    remaining_deficiency: Decimal = Decimal("0")


@dataclass
class PrequalificationResult:
    program: QualificationProgram
    max_affordable_home_price: Decimal = Decimal("0")
    max_loan_amount: Decimal = Decimal("0")
    monthly_housing_payment: Decimal = Decimal("0")
    qualifies: bool = False
    housing_ratio_used: Decimal = Decimal("0")
    total_ratio_used: Decimal = Decimal("0")
    payment_breakdown: PaymentBreakdown = field(default_factory=PaymentBreakdown)
    cash_to_close: CashToCloseAnalysis = field(default_factory=CashToCloseAnalysis)
