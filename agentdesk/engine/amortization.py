"""Fixed-rate amortization: monthly payment and remaining balance.

Pure functions: Decimal in, Decimal out. No I/O. Rates are annual percents.
"""

from decimal import Decimal, ROUND_HALF_UP

from agentdesk.models.loan import AmortizationResult, LoanTerms

TWO_PLACES = Decimal("0.01")


def _monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    return annual_rate_pct / 100 / 12


def monthly_payment(principal: Decimal, annual_rate_pct: Decimal, term_years: int) -> Decimal:
    """Calculate fixed monthly payment for a fully amortizing loan."""
    if principal <= 0:
        return Decimal("0")
    n = term_years * 12
    r = _monthly_rate(annual_rate_pct)
    if r == 0:
        return (principal / n).quantize(TWO_PLACES, ROUND_HALF_UP)

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def amortize(loan: LoanTerms) -> AmortizationResult:
    """Payment, total paid and total interest over the full term."""
    pmt = monthly_payment(loan.principal, loan.annual_rate_pct, loan.term_years)
    total_paid = pmt * loan.total_payments
    principal = max(loan.principal, Decimal("0"))
    return AmortizationResult(
        monthly_payment=pmt,
        total_interest=total_paid - principal,
        total_paid=total_paid,
    )


def remaining_balance(
    loan: LoanTerms,
    payments_made: int,
    payment: Decimal | None = None,
) -> Decimal:
    """Loan balance after `payments_made` monthly payments.

    Args:
        loan: Original loan terms.
        payments_made: Number of monthly payments already made.
        payment: Scheduled payment, if the caller already computed it.
            Defaults to `monthly_payment` for the loan.

    Returns:
        Outstanding balance, never negative. 0 once the term is complete.
    """
    if loan.principal <= 0:
        return Decimal("0")
    if payment is None:
        payment = monthly_payment(loan.principal, loan.annual_rate_pct, loan.term_years)

    remaining = loan.total_payments - payments_made
    if remaining <= 0:
        return Decimal("0")

    r = _monthly_rate(loan.annual_rate_pct)
    if r == 0:
        balance = loan.principal - payment * payments_made
    else:
        # Present value of the payments still owed
        factor = (1 + r) ** remaining
        balance = payment * (factor - 1) / (r * factor)
    return max(Decimal("0"), balance).quantize(TWO_PLACES, ROUND_HALF_UP)
