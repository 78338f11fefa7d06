"""Lending programs used for buyer prequalification.

Housing ratio = housing payment / gross monthly income.
Total ratio = (housing payment + other monthly debts) / gross monthly income.
"""

from decimal import Decimal

from agentdesk.models.prequalification import QualificationProgram

CONVENTIONAL = QualificationProgram(
    name="Conventional",
    max_housing_ratio_pct=Decimal("28"),
    max_total_debt_ratio_pct=Decimal("36"),
    min_down_payment_pct=Decimal("5.0"),  # 3% first-time buyer programs not modeled
    description="Standard conventional loan with competitive rates",
)

FHA = QualificationProgram(
    name="FHA",
    max_housing_ratio_pct=Decimal("31"),
    max_total_debt_ratio_pct=Decimal("43"),
    min_down_payment_pct=Decimal("3.5"),
    description="Government-backed loan with more flexible requirements",
)

LOAN_PROGRAMS: tuple[QualificationProgram, ...] = (CONVENTIONAL, FHA)
