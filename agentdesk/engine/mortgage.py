"""Simple purchase mortgage: payment, interest and total cost."""

from decimal import Decimal

from agentdesk.engine.amortization import amortize
from agentdesk.models.loan import LoanTerms, MortgageResult


def calculate_mortgage(
    home_price: Decimal,
    down_payment: Decimal,
    annual_rate_pct: Decimal,
    term_years: int,
) -> MortgageResult:
    """Payment breakdown for financing `home_price` less `down_payment`.

    A down payment covering the whole price is a zero-payment loan, not an error.
    """
    principal = home_price - down_payment
    if principal <= 0:
        return MortgageResult(
            principal=principal,
            monthly_payment=Decimal("0"),
            total_interest=Decimal("0"),
            total_amount=Decimal("0"),
        )

    amort = amortize(LoanTerms(principal, annual_rate_pct, term_years))
    return MortgageResult(
        principal=principal,
        monthly_payment=amort.monthly_payment,
        total_interest=amort.total_interest,
        total_amount=principal + amort.total_interest,
    )
