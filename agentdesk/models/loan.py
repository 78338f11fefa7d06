from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LoanTerms:
    principal: Decimal
    annual_rate_pct: Decimal  # 6.5 means 6.5%
    term_years: int = 30

    @property
    def total_payments(self) -> int:
        return self.term_years * 12


@dataclass(frozen=True)
class AmortizationResult:
    monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal


@dataclass(frozen=True)
class MortgageResult:
    principal: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_amount: Decimal
