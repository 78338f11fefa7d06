"""Buyer prequalification: maximum affordable home price per lending program.

For each program the housing payment is capped by both the housing ratio and
the total debt ratio. The affordability search walks candidate prices upward
in fixed steps and keeps the last price whose all-in monthly cost (P&I, tax,
insurance, PMI, HOA) fits under that cap. Monthly cost rises with price, so
the first price over the cap ends the search.

Non-qualifying scenarios are reported as results, never raised.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from agentdesk.data.loan_programs import LOAN_PROGRAMS
from agentdesk.engine.amortization import monthly_payment
from agentdesk.models.prequalification import (
    CashToCloseAnalysis,
    PaymentBreakdown,
    PrequalificationInputs,
    PrequalificationResult,
    QualificationProgram,
)

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")

SEARCH_MIN_PRICE = 100_000
SEARCH_MAX_PRICE = 3_000_000
SEARCH_STEP = 5_000

LOAN_TERM_YEARS = 30
PMI_ANNUAL_RATE = Decimal("0.005")  # Of loan amount, when down payment < 20%
PMI_DOWN_PAYMENT_THRESHOLD = Decimal("0.20")


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def monthly_housing_cost(
    home_price: Decimal,
    loan_amount: Decimal,
    inputs: PrequalificationInputs,
) -> PaymentBreakdown:
    """All-in monthly housing cost for a price/loan pair (unrounded)."""
    pi = monthly_payment(loan_amount, inputs.annual_rate_pct, LOAN_TERM_YEARS)
    property_tax = home_price * inputs.property_tax_rate_pct / 100 / 12
    insurance = home_price * inputs.insurance_rate_pct / 100 / 12

    down_fraction = inputs.funds_available / home_price
    if down_fraction < PMI_DOWN_PAYMENT_THRESHOLD:
        pmi = loan_amount * PMI_ANNUAL_RATE / 12
    else:
        pmi = Decimal("0")

    total = pi + property_tax + insurance + pmi + inputs.hoa_monthly
    return PaymentBreakdown(
        principal_and_interest=pi,
        property_taxes=property_tax,
        homeowners_insurance=insurance,
        mortgage_insurance=pmi,
        hoa_fees=inputs.hoa_monthly,
        total_monthly_payment=total,
    )


def max_housing_payment(
    inputs: PrequalificationInputs, program: QualificationProgram
) -> Decimal:
    """The more restrictive of the housing-ratio and total-ratio caps."""
    by_housing_ratio = inputs.monthly_income * program.max_housing_ratio_pct / 100
    by_total_ratio = (
        inputs.monthly_income * program.max_total_debt_ratio_pct / 100 - inputs.monthly_debts
    )
    return min(by_housing_ratio, by_total_ratio)


def find_max_home_price(
    inputs: PrequalificationInputs, payment_cap: Decimal
) -> tuple[Decimal, Decimal, PaymentBreakdown] | None:
    """Linear scan for the highest affordable price.

    Returns (price, loan_amount, breakdown), or None if no candidate fits.
    """
    best: tuple[Decimal, Decimal, PaymentBreakdown] | None = None
    for candidate in range(SEARCH_MIN_PRICE, SEARCH_MAX_PRICE + 1, SEARCH_STEP):
        price = Decimal(candidate)
        loan_amount = price - inputs.funds_available
        if loan_amount <= 0:
            continue

        breakdown = monthly_housing_cost(price, loan_amount, inputs)
        if breakdown.total_monthly_payment > payment_cap:
            break
        best = (price, loan_amount, breakdown)
    return best


def cash_to_close(
    purchase_price: Decimal,
    funds_available: Decimal,
    program: QualificationProgram,
    closing_cost_pct: Decimal,
) -> CashToCloseAnalysis:
    """Cash needed at closing and how much seller concessions could cover.

    Seller concessions are applied to closing costs first; anything beyond
    closing costs is a deficiency concessions cannot fix.
    """
    down_required = purchase_price * program.min_down_payment_pct / 100
    closing_costs = purchase_price * closing_cost_pct / 100
    total_needed = down_required + closing_costs

    shortfall = max(Decimal("0"), total_needed - funds_available)
    if purchase_price > 0:
        down_pct = funds_available / purchase_price * 100
    else:
        down_pct = Decimal("0")

    return CashToCloseAnalysis(
        down_payment_required=_money(down_required),
        down_payment_pct=down_pct.quantize(FOUR_PLACES, ROUND_HALF_UP),
        closing_costs=_money(closing_costs),
        total_cash_needed=_money(total_needed),
        has_enough_cash=funds_available >= total_needed,
        cash_shortfall=_money(shortfall),
        suggested_closing_cost_reduction=_money(min(shortfall, closing_costs)),
        remaining_deficiency=_money(max(Decimal("0"), shortfall - closing_costs)),
    )


def evaluate_program(
    inputs: PrequalificationInputs, program: QualificationProgram
) -> PrequalificationResult:
    """Prequalify the buyer under a single lending program."""
    payment_cap = max_housing_payment(inputs, program)
    if payment_cap <= 0:
        logger.info(
            "%s: debts leave no room for a housing payment (cap %s)", program.name, payment_cap
        )
        return PrequalificationResult(program=program)

    found = find_max_home_price(inputs, payment_cap)
    if found is None:
        home_price = Decimal("0")
        loan_amount = Decimal("0")
        breakdown = PaymentBreakdown()
    else:
        home_price, loan_amount, breakdown = found
    logger.debug(
        "%s: cap %s/mo, max price %s, loan %s", program.name, payment_cap, home_price, loan_amount
    )

    housing_payment = breakdown.total_monthly_payment
    housing_ratio = housing_payment / inputs.monthly_income * 100
    total_ratio = (housing_payment + inputs.monthly_debts) / inputs.monthly_income * 100
    qualifies = (
        housing_ratio <= program.max_housing_ratio_pct
        and total_ratio <= program.max_total_debt_ratio_pct
        and loan_amount > 0
    )

    return PrequalificationResult(
        program=program,
        max_affordable_home_price=home_price,
        max_loan_amount=loan_amount,
        monthly_housing_payment=_money(housing_payment),
        qualifies=qualifies,
        housing_ratio_used=housing_ratio.quantize(FOUR_PLACES, ROUND_HALF_UP),
        total_ratio_used=total_ratio.quantize(FOUR_PLACES, ROUND_HALF_UP),
        payment_breakdown=PaymentBreakdown(
            principal_and_interest=_money(breakdown.principal_and_interest),
            property_taxes=_money(breakdown.property_taxes),
            homeowners_insurance=_money(breakdown.homeowners_insurance),
            mortgage_insurance=_money(breakdown.mortgage_insurance),
            hoa_fees=_money(breakdown.hoa_fees),
            total_monthly_payment=_money(housing_payment),
        ),
        cash_to_close=cash_to_close(
            purchase_price=loan_amount + inputs.funds_available,
            funds_available=inputs.funds_available,
            program=program,
            closing_cost_pct=inputs.closing_cost_pct,
        ),
    )


def evaluate(
    inputs: PrequalificationInputs,
    programs: tuple[QualificationProgram, ...] = LOAN_PROGRAMS,
) -> list[PrequalificationResult]:
    """Prequalify against every program, independently, in program order."""
    return [evaluate_program(inputs, program) for program in programs]
