"""Pydantic schemas for API request/response models.

Requests are validated here so the engine only ever sees well-formed numbers.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from agentdesk.models.investment import RenovationCategory


# ---- Request schemas ----

class MortgageRequest(BaseModel):
    """Mortgage calculator contract used by the SPA client (camelCase)."""
    loanAmount: Decimal = Field(..., ge=0, description="Home price before down payment")
    downPayment: Decimal = Field(Decimal("0"), ge=0)
    interestRate: Decimal = Field(..., ge=0, description="Annual rate in percent")
    loanTerm: int = Field(..., gt=0, description="Term in years")


class PrequalificationRequest(BaseModel):
    monthly_income: Decimal = Field(..., gt=0, description="Gross monthly income")
    monthly_debts: Decimal = Field(Decimal("0"), ge=0)
    funds_available: Decimal = Field(..., gt=0, description="Cash available for down payment")
    annual_rate_pct: Decimal = Field(Decimal("7.0"), ge=0)
    property_tax_rate_pct: Decimal = Field(Decimal("1.25"), ge=0)
    insurance_rate_pct: Decimal = Field(Decimal("0.35"), ge=0)
    hoa_monthly: Decimal = Field(Decimal("0"), ge=0)
    closing_cost_pct: Decimal = Field(Decimal("3.0"), ge=0)


class UnitRequest(BaseModel):
    current_rent_monthly: Decimal = Field(Decimal("0"), ge=0)
    potential_rent_monthly: Decimal = Field(Decimal("0"), ge=0)
    repair_cost: Decimal = Field(Decimal("0"), ge=0)
    market_value: Decimal = Field(Decimal("0"), ge=0)
    bedrooms: int = Field(0, ge=0)
    bathrooms: Decimal = Field(Decimal("0"), ge=0)


class RenovationItemRequest(BaseModel):
    category: RenovationCategory
    cost: Decimal = Field(..., ge=0)


class ExpenseProfileRequest(BaseModel):
    insurance_monthly: Decimal = Field(Decimal("0"), ge=0)
    property_tax_monthly: Decimal = Field(Decimal("0"), ge=0)
    maintenance_monthly: Decimal = Field(Decimal("0"), ge=0)
    management_pct: Decimal = Field(Decimal("0"), ge=0, le=100)
    vacancy_pct: Decimal = Field(Decimal("0"), ge=0, le=100)
    other_monthly: Decimal = Field(Decimal("0"), ge=0)


class InvestmentRequest(BaseModel):
    property_value: Decimal = Field(..., gt=0)
    down_payment: Decimal = Field(Decimal("0"), ge=0)
    closing_costs: Decimal | None = Field(None, ge=0, description="Defaults to 3% of value")
    units: list[UnitRequest] = Field(..., min_length=1, max_length=100)
    renovation_items: list[RenovationItemRequest] = []
    other_monthly_income: Decimal = Field(Decimal("0"), ge=0)
    current_expenses: ExpenseProfileRequest = ExpenseProfileRequest()
    projected_expenses: ExpenseProfileRequest = ExpenseProfileRequest()

    # Financing
    loan_amount: Decimal | None = Field(None, ge=0, description="Defaults to value - down payment")
    interest_rate_pct: Decimal = Field(Decimal("7.5"), ge=0)
    loan_term_years: int = Field(30, gt=0)


class TargetPriceRequest(BaseModel):
    noi: Decimal
    total_cash_invested: Decimal = Field(..., ge=0)
    debt_service: Decimal = Field(Decimal("0"), ge=0, description="Annual debt service")
    target_cap_rate_pct: Decimal = Field(Decimal("8"), gt=0)
    target_cash_on_cash_pct: Decimal = Field(Decimal("12"), gt=0)


class NetSheetRequest(BaseModel):
    sale_price: Decimal = Field(..., gt=0)
    jurisdiction: str | None = Field(None, description="State code, e.g. 'CA'")
    zip_code: str | None = Field(None, description="Used when jurisdiction is not given")
    mortgage_balance: Decimal = Field(Decimal("0"), ge=0)
    commission_rate_pct: Decimal = Field(Decimal("6.0"), ge=0, le=100)
    repair_costs: Decimal = Field(Decimal("0"), ge=0)
    home_warranty_cost: Decimal = Field(Decimal("0"), ge=0)


# ---- Response schemas ----

class MortgageResponse(BaseModel):
    monthlyPayment: float
    totalInterest: float
    totalAmount: float
    principal: float


class PaymentBreakdownResponse(BaseModel):
    principal_and_interest: Decimal
    property_taxes: Decimal
    homeowners_insurance: Decimal
    mortgage_insurance: Decimal
    hoa_fees: Decimal
    total_monthly_payment: Decimal


class CashToCloseResponse(BaseModel):
    down_payment_required: Decimal
    down_payment_pct: Decimal
    closing_costs: Decimal
    total_cash_needed: Decimal
    has_enough_cash: bool
    cash_shortfall: Decimal
    suggested_closing_cost_reduction: Decimal
    remaining_deficiency: Decimal


class LoanProgramResponse(BaseModel):
    name: str
    description: str
    max_housing_ratio_pct: Decimal
    max_total_debt_ratio_pct: Decimal
    min_down_payment_pct: Decimal


class PrequalificationResponse(BaseModel):
    program: LoanProgramResponse
    max_affordable_home_price: Decimal
    max_loan_amount: Decimal
    monthly_housing_payment: Decimal
    qualifies: bool
    housing_ratio_used: Decimal
    total_ratio_used: Decimal
    payment_breakdown: PaymentBreakdownResponse
    cash_to_close: CashToCloseResponse


class YearProjectionResponse(BaseModel):
    year: int
    rent: Decimal
    property_value: Decimal
    noi: Decimal
    cash_flow: Decimal
    loan_balance: Decimal
    equity: Decimal
    cap_rate: Decimal
    roi: Decimal


class InvestmentResponse(BaseModel):
    unit_count: int
    current_annual_rent: Decimal
    potential_annual_rent: Decimal
    total_rent_increase: Decimal
    current_effective_income: Decimal
    projected_effective_income: Decimal
    current_operating_expenses: Decimal
    projected_operating_expenses: Decimal
    current_noi: Decimal
    projected_noi: Decimal
    annual_debt_service: Decimal
    current_cash_flow: Decimal
    annual_cash_flow: Decimal
    current_cap_rate: Decimal
    improved_cap_rate: Decimal
    total_repair_costs: Decimal
    renovation_cost: Decimal
    value_gain: Decimal
    total_cash_invested: Decimal
    cash_on_cash_return: Decimal
    dscr: Decimal
    year3: YearProjectionResponse
    year5: YearProjectionResponse


class TargetPriceResponse(BaseModel):
    recommended_price: Decimal
    max_offer_price: Decimal
    cap_rate_based_price: Decimal
    cash_on_cash_based_price: Decimal


class BreakdownItemResponse(BaseModel):
    category: str
    description: str
    amount: Decimal
    pct_of_sale: Decimal


class NetSheetResponse(BaseModel):
    jurisdiction: str
    jurisdiction_name: str
    gross_sale_price: Decimal
    total_deductions: Decimal
    net_proceeds: Decimal
    seller_owes_at_closing: bool
    breakdown_items: list[BreakdownItemResponse]


class CostProfileResponse(BaseModel):
    code: str
    name: str
    transfer_tax_pct: Decimal
    title_insurance_pct: Decimal
    attorney_fees_flat: Decimal
    recording_fees_flat: Decimal
    escrow_fees_pct: Decimal
    property_tax_rate_pct: Decimal
