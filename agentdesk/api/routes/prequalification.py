"""Buyer prequalification routes."""

import logging
from dataclasses import asdict

from fastapi import APIRouter

from agentdesk.api.schemas import (
    LoanProgramResponse,
    PrequalificationRequest,
    PrequalificationResponse,
)
from agentdesk.data.loan_programs import LOAN_PROGRAMS
from agentdesk.engine.prequalification import evaluate
from agentdesk.models.prequalification import PrequalificationInputs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/prequalification", tags=["prequalification"])


@router.post("", response_model=list[PrequalificationResponse])
async def prequalify(req: PrequalificationRequest):
    """Maximum affordable price and cash-to-close for each loan program."""
    inputs = PrequalificationInputs(**req.model_dump())
    results = evaluate(inputs)
    logger.info(
        "Prequalification: %s",
        ", ".join(f"{r.program.name}={r.max_affordable_home_price}" for r in results),
    )
    return [PrequalificationResponse(**asdict(r)) for r in results]


@router.get("/programs", response_model=list[LoanProgramResponse])
async def list_programs():
    """Loan programs evaluated by the prequalification endpoint."""
    return [LoanProgramResponse(**asdict(p)) for p in LOAN_PROGRAMS]
