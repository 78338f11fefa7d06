"""Seller net sheet routes."""

import logging
from dataclasses import asdict

from fastapi import APIRouter

from agentdesk.api.schemas import CostProfileResponse, NetSheetRequest, NetSheetResponse
from agentdesk.data.closing_costs import GEOGRAPHIC_COSTS, jurisdiction_for_zip
from agentdesk.engine.net_sheet import compute_net_sheet

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/net-sheet", tags=["net-sheet"])


@router.post("", response_model=NetSheetResponse)
async def net_sheet(req: NetSheetRequest):
    """Itemized seller deductions and net proceeds for a sale."""
    jurisdiction = req.jurisdiction or jurisdiction_for_zip(req.zip_code)
    result = compute_net_sheet(
        sale_price=req.sale_price,
        jurisdiction=jurisdiction,
        mortgage_balance=req.mortgage_balance,
        commission_rate_pct=req.commission_rate_pct,
        repair_costs=req.repair_costs,
        home_warranty_cost=req.home_warranty_cost,
    )
    if result.seller_owes_at_closing:
        logger.info("Net sheet is negative: seller owes %s at closing", -result.net_proceeds)

    return NetSheetResponse(
        jurisdiction=result.jurisdiction,
        jurisdiction_name=result.jurisdiction_name,
        gross_sale_price=result.gross_sale_price,
        total_deductions=result.total_deductions,
        net_proceeds=result.net_proceeds,
        seller_owes_at_closing=result.seller_owes_at_closing,
        breakdown_items=[asdict(item) for item in result.breakdown_items],
    )


@router.get("/jurisdictions", response_model=list[CostProfileResponse])
async def list_jurisdictions():
    """All seller cost profiles, DEFAULT included."""
    return [CostProfileResponse(**asdict(p)) for p in GEOGRAPHIC_COSTS.values()]
