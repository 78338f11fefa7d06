"""Investment analysis routes."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from agentdesk.api.schemas import (
    InvestmentRequest,
    InvestmentResponse,
    TargetPriceRequest,
    TargetPriceResponse,
)
from agentdesk.engine.investment import analyze, default_closing_costs, default_loan_amount
from agentdesk.engine.target_price import solve_target_price
from agentdesk.models.investment import (
    ExpenseProfile,
    InvestmentInputs,
    RenovationItem,
    UnitFinancials,
)
from agentdesk.models.loan import LoanTerms

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/investment", tags=["investment"])


def _build_inputs(req: InvestmentRequest) -> InvestmentInputs:
    """Build engine inputs from request data, filling in derived defaults."""
    closing_costs = req.closing_costs
    if closing_costs is None:
        closing_costs = default_closing_costs(req.property_value)
    loan_amount = req.loan_amount
    if loan_amount is None:
        loan_amount = default_loan_amount(req.property_value, req.down_payment)

    return InvestmentInputs(
        property_value=req.property_value,
        down_payment=req.down_payment,
        closing_costs=closing_costs,
        loan=LoanTerms(
            principal=loan_amount,
            annual_rate_pct=req.interest_rate_pct,
            term_years=req.loan_term_years,
        ),
        units=tuple(UnitFinancials(**u.model_dump()) for u in req.units),
        renovation_items=tuple(
            RenovationItem(category=item.category, cost=item.cost)
            for item in req.renovation_items
        ),
        other_monthly_income=req.other_monthly_income,
        current_expenses=ExpenseProfile(**req.current_expenses.model_dump()),
        projected_expenses=ExpenseProfile(**req.projected_expenses.model_dump()),
    )


@router.post("/analyze", response_model=InvestmentResponse)
async def analyze_investment(req: InvestmentRequest):
    """Current vs. projected returns for a 1-100 unit rental property."""
    inputs = _build_inputs(req)
    result = analyze(inputs)
    logger.info(
        "Investment analyzed: %d units, cap %s%% -> %s%%, CoC %s%%",
        result.unit_count,
        result.current_cap_rate,
        result.improved_cap_rate,
        result.cash_on_cash_return,
    )

    fields = asdict(result)
    fields.pop("projections")
    return InvestmentResponse(
        **fields,
        renovation_cost=inputs.renovation_cost,
        year3=asdict(result.year3),
        year5=asdict(result.year5),
    )


@router.post("/target-price", response_model=TargetPriceResponse)
async def target_price(req: TargetPriceRequest):
    """Maximum purchase price meeting target cap rate and cash-on-cash return."""
    try:
        result = solve_target_price(
            noi=req.noi,
            total_cash_invested=req.total_cash_invested,
            debt_service=req.debt_service,
            target_cap_rate_pct=req.target_cap_rate_pct,
            target_cash_on_cash_pct=req.target_cash_on_cash_pct,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return TargetPriceResponse(**asdict(result))
