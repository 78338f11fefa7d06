"""Canonical test fixtures used across engine and API tests.

Fixture: $500K fourplex, $100K down, $400K loan at 7.5% for 30 years.
Each unit rents for $1,000 today and $1,300 after a $5K repair.
"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from agentdesk.api.app import app
from agentdesk.models.investment import (
    ExpenseProfile,
    InvestmentInputs,
    RenovationCategory,
    RenovationItem,
    UnitFinancials,
)
from agentdesk.models.loan import LoanTerms
from agentdesk.models.prequalification import PrequalificationInputs


@pytest.fixture
def fourplex_unit() -> UnitFinancials:
    return UnitFinancials(
        current_rent_monthly=Decimal("1000"),
        potential_rent_monthly=Decimal("1300"),
        repair_cost=Decimal("5000"),
        market_value=Decimal("125000"),
        bedrooms=2,
        bathrooms=Decimal("1"),
    )


@pytest.fixture
def canonical_investment(fourplex_unit) -> InvestmentInputs:
    """$500K fourplex with a $10K kitchen on top of per-unit repairs."""
    return InvestmentInputs(
        property_value=Decimal("500000"),
        down_payment=Decimal("100000"),
        closing_costs=Decimal("15000"),
        loan=LoanTerms(Decimal("400000"), Decimal("7.5"), 30),
        units=(fourplex_unit,) * 4,
        renovation_items=(RenovationItem(RenovationCategory.KITCHEN, Decimal("10000")),),
        other_monthly_income=Decimal("0"),
        current_expenses=ExpenseProfile(
            insurance_monthly=Decimal("200"),
            property_tax_monthly=Decimal("400"),
            maintenance_monthly=Decimal("300"),
            management_pct=Decimal("8"),
            vacancy_pct=Decimal("5"),
            other_monthly=Decimal("100"),
        ),
        projected_expenses=ExpenseProfile(
            insurance_monthly=Decimal("250"),
            property_tax_monthly=Decimal("500"),
            maintenance_monthly=Decimal("400"),
            management_pct=Decimal("8"),
            vacancy_pct=Decimal("3"),
            other_monthly=Decimal("150"),
        ),
    )


@pytest.fixture
def canonical_buyer() -> PrequalificationInputs:
    """$5K/month income, no debts, $60K saved, 7% rate."""
    return PrequalificationInputs(
        monthly_income=Decimal("5000"),
        monthly_debts=Decimal("0"),
        funds_available=Decimal("60000"),
        annual_rate_pct=Decimal("7.0"),
        property_tax_rate_pct=Decimal("1.25"),
        insurance_rate_pct=Decimal("0.35"),
        hoa_monthly=Decimal("0"),
        closing_cost_pct=Decimal("3.0"),
    )


@pytest.fixture(scope="session")
def client():
    return TestClient(app)
