"""Target price solver: maximum purchase price for a desired return.

Inverts cap rate (value = NOI / cap rate) to price a deal from the buyer's
target cap rate and target cash-on-cash return.
"""

from decimal import Decimal, ROUND_HALF_UP

from agentdesk.models.investment import InvestmentResult, TargetPriceResult

TWO_PLACES = Decimal("0.01")

OFFER_RATIO = Decimal("0.90")  # Leave 10% negotiation room below recommended


def solve_target_price(
    noi: Decimal,
    total_cash_invested: Decimal,
    debt_service: Decimal,
    target_cap_rate_pct: Decimal,
    target_cash_on_cash_pct: Decimal,
) -> TargetPriceResult:
    """Recommend a purchase price meeting both return targets.

    The cash-on-cash price is the NOI required to produce the desired cash
    flow over current debt service, capitalized at the target cap rate.
    Recommended price is the lower (more conservative) of the two.

    Raises:
        ValueError: if the target cap rate is zero.
    """
    if target_cap_rate_pct == 0:
        raise ValueError("target cap rate must be nonzero")
    cap = target_cap_rate_pct / 100

    cap_rate_price = (noi / cap).quantize(TWO_PLACES, ROUND_HALF_UP)

    desired_cash_flow = total_cash_invested * target_cash_on_cash_pct / 100
    required_noi = desired_cash_flow + debt_service
    # TODO: capitalize at a basis tied to the cash-on-cash target instead of the cap rate target
    coc_price = (required_noi / cap).quantize(TWO_PLACES, ROUND_HALF_UP)

    recommended = min(cap_rate_price, coc_price)
    return TargetPriceResult(
        recommended_price=recommended,
        max_offer_price=(recommended * OFFER_RATIO).quantize(TWO_PLACES, ROUND_HALF_UP),
        cap_rate_based_price=cap_rate_price,
        cash_on_cash_based_price=coc_price,
    )


def solve_for_analysis(
    result: InvestmentResult,
    target_cap_rate_pct: Decimal,
    target_cash_on_cash_pct: Decimal,
) -> TargetPriceResult:
    """Solve target prices from a finished investment analysis."""
    return solve_target_price(
        noi=result.projected_noi,
        total_cash_invested=result.total_cash_invested,
        debt_service=result.projected_noi - result.annual_cash_flow,
        target_cap_rate_pct=target_cap_rate_pct,
        target_cash_on_cash_pct=target_cash_on_cash_pct,
    )
