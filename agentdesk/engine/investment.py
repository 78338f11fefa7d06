"""Rental investment analysis: NOI, cap rate, CoC return, DSCR, projections.

Pure functions: Decimal in, Decimal out. No I/O. Rates are percents.

Two expense snapshots are compared: "current" (as-is rents and expenses)
and "projected" (potential rents after renovation, projected expenses).
"""

from decimal import Decimal, ROUND_HALF_UP

from agentdesk.engine.amortization import monthly_payment, remaining_balance
from agentdesk.models.investment import (
    ExpenseProfile,
    InvestmentInputs,
    InvestmentResult,
    UnitFinancials,
    YearProjection,
)

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")

# Fixed projection assumptions, not user-configurable
RENT_GROWTH_RATE = Decimal("0.05")
APPRECIATION_RATE = Decimal("0.03")
PROJECTION_YEARS = (3, 5)

DEFAULT_CLOSING_COST_PCT = Decimal("3")


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def _rate(amount: Decimal) -> Decimal:
    return amount.quantize(FOUR_PLACES, ROUND_HALF_UP)


def default_closing_costs(property_value: Decimal) -> Decimal:
    """Buyer closing cost estimate: 3% of value, whole dollars."""
    return (property_value * DEFAULT_CLOSING_COST_PCT / 100).quantize(Decimal("1"), ROUND_HALF_UP)


def default_loan_amount(property_value: Decimal, down_payment: Decimal) -> Decimal:
    """Finance whatever the down payment does not cover."""
    return max(Decimal("0"), property_value - down_payment)


def annual_rents(units: tuple[UnitFinancials, ...]) -> tuple[Decimal, Decimal]:
    """(current, potential) annual rent summed across all units."""
    current = sum((u.current_rent_monthly * 12 for u in units), Decimal("0"))
    potential = sum((u.potential_rent_monthly * 12 for u in units), Decimal("0"))
    return current, potential


def effective_income(gross_income: Decimal, vacancy_pct: Decimal) -> Decimal:
    """Gross income less vacancy loss."""
    return gross_income * (1 - vacancy_pct / 100)


def operating_expenses(profile: ExpenseProfile, effective: Decimal) -> Decimal:
    """Annual operating expenses; management is a share of effective income."""
    management = effective * profile.management_pct / 100
    return profile.annual_fixed_expenses + management


def cap_rate(noi: Decimal, value: Decimal) -> Decimal:
    """Cap rate in percent = NOI / value * 100."""
    if value == 0:
        return Decimal("0")
    return noi / value * 100


def cash_on_cash(cash_flow: Decimal, total_cash_invested: Decimal) -> Decimal:
    """Cash-on-cash return in percent."""
    if total_cash_invested == 0:
        return Decimal("0")
    return cash_flow / total_cash_invested * 100


def dscr(noi: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service."""
    if annual_debt_service == 0:
        return Decimal("0")
    return noi / annual_debt_service


def value_gain(current_noi: Decimal, projected_noi: Decimal, current_cap_rate: Decimal) -> Decimal:
    """NOI increase capitalized at the pre-improvement cap rate."""
    if current_cap_rate == 0:
        return Decimal("0")
    return (projected_noi - current_noi) / (current_cap_rate / 100)


def project_year(
    inputs: InvestmentInputs,
    years: int,
    potential_annual_rent: Decimal,
    projected_opex: Decimal,
    annual_debt_service: Decimal,
    payment: Decimal,
) -> YearProjection:
    """Compound rents and value forward `years` years.

    Operating expenses are held at the projected snapshot.
    """
    rent = potential_annual_rent * (1 + RENT_GROWTH_RATE) ** years
    gross = rent + inputs.other_monthly_income * 12
    future_noi = effective_income(gross, inputs.projected_expenses.vacancy_pct) - projected_opex
    cash_flow = future_noi - annual_debt_service

    value = inputs.property_value * (1 + APPRECIATION_RATE) ** years
    balance = remaining_balance(inputs.loan, years * 12, payment=payment)

    return YearProjection(
        year=years,
        rent=_money(rent),
        property_value=_money(value),
        noi=_money(future_noi),
        cash_flow=_money(cash_flow),
        loan_balance=balance,
        equity=_money(value - balance),
        cap_rate=_rate(cap_rate(future_noi, value)),
        roi=_rate(cash_on_cash(cash_flow, inputs.total_cash_invested)),
    )


def analyze(inputs: InvestmentInputs) -> InvestmentResult:
    """Run the current-vs-projected investment analysis.

    Returns InvestmentResult with NOI, cap rates, returns and 3/5-year
    projections.
    """
    current_rent, potential_rent = annual_rents(inputs.units)
    other_income = inputs.other_monthly_income * 12
    repairs = inputs.total_repair_costs

    current_effective = effective_income(
        current_rent + other_income, inputs.current_expenses.vacancy_pct
    )
    projected_effective = effective_income(
        potential_rent + other_income, inputs.projected_expenses.vacancy_pct
    )

    current_opex = operating_expenses(inputs.current_expenses, current_effective)
    projected_opex = operating_expenses(inputs.projected_expenses, projected_effective)

    current_noi = current_effective - current_opex
    projected_noi = projected_effective - projected_opex

    payment = monthly_payment(
        inputs.loan.principal, inputs.loan.annual_rate_pct, inputs.loan.term_years
    )
    annual_debt_service = payment * 12

    current_cash_flow = current_noi - annual_debt_service
    projected_cash_flow = projected_noi - annual_debt_service

    current_cap = cap_rate(current_noi, inputs.property_value)
    # Improved cap rate is measured against post-renovation value
    improved_cap = cap_rate(projected_noi, inputs.property_value + repairs)

    total_cash = inputs.total_cash_invested

    projections = {
        years: project_year(
            inputs, years, potential_rent, projected_opex, annual_debt_service, payment
        )
        for years in PROJECTION_YEARS
    }

    return InvestmentResult(
        unit_count=len(inputs.units),
        current_annual_rent=_money(current_rent),
        potential_annual_rent=_money(potential_rent),
        total_rent_increase=_money(potential_rent - current_rent),
        current_effective_income=_money(current_effective),
        projected_effective_income=_money(projected_effective),
        current_operating_expenses=_money(current_opex),
        projected_operating_expenses=_money(projected_opex),
        current_noi=_money(current_noi),
        projected_noi=_money(projected_noi),
        annual_debt_service=_money(annual_debt_service),
        current_cash_flow=_money(current_cash_flow),
        annual_cash_flow=_money(projected_cash_flow),
        current_cap_rate=_rate(current_cap),
        improved_cap_rate=_rate(improved_cap),
        total_repair_costs=_money(repairs),
        value_gain=_money(value_gain(current_noi, projected_noi, current_cap)),
        total_cash_invested=_money(total_cash),
        cash_on_cash_return=_rate(cash_on_cash(projected_cash_flow, total_cash)),
        dscr=_rate(dscr(projected_noi, annual_debt_service)),
        projections=projections,
    )
