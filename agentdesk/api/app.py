"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentdesk.api.routes import investment, mortgage, net_sheet, prequalification
from agentdesk.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Mortgage, prequalification, investment and seller net sheet calculators",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(mortgage.router)
app.include_router(prequalification.router)
app.include_router(investment.router)
app.include_router(net_sheet.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
