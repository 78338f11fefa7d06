"""Mortgage calculator route used by the client's quick calculator."""

import logging
from decimal import Decimal, ROUND_HALF_UP

from fastapi import APIRouter

from agentdesk.api.schemas import MortgageRequest, MortgageResponse
from agentdesk.engine.mortgage import calculate_mortgage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/mortgage", tags=["mortgage"])


def _round2(value: Decimal) -> float:
    return float(value.quantize(Decimal("0.01"), ROUND_HALF_UP))


@router.post("/calculate", response_model=MortgageResponse)
async def calculate(req: MortgageRequest):
    """Monthly payment, total interest and total cost for a purchase."""
    result = calculate_mortgage(
        home_price=req.loanAmount,
        down_payment=req.downPayment,
        annual_rate_pct=req.interestRate,
        term_years=req.loanTerm,
    )
    logger.info("Mortgage calculated: principal=%s payment=%s", result.principal, result.monthly_payment)
    return MortgageResponse(
        monthlyPayment=_round2(result.monthly_payment),
        totalInterest=_round2(result.total_interest),
        totalAmount=_round2(result.total_amount),
        principal=_round2(result.principal),
    )
