from decimal import Decimal, ROUND_HALF_UP

import pytest

from agentdesk.engine.investment import analyze
from agentdesk.engine.target_price import OFFER_RATIO, solve_for_analysis, solve_target_price


class TestSolveTargetPrice:
    def test_cap_rate_price_is_lower(self):
        result = solve_target_price(
            noi=Decimal("40000"),
            total_cash_invested=Decimal("145000"),
            debt_service=Decimal("33562.32"),
            target_cap_rate_pct=Decimal("8"),
            target_cash_on_cash_pct=Decimal("12"),
        )
        assert result.cap_rate_based_price == Decimal("500000.00")
        # (145000 * 12% + 33562.32) / 8%
        assert result.cash_on_cash_based_price == Decimal("637029.00")
        assert result.recommended_price == Decimal("500000.00")
        assert result.max_offer_price == Decimal("450000.00")

    def test_cash_on_cash_price_is_lower(self):
        result = solve_target_price(
            noi=Decimal("60000"),
            total_cash_invested=Decimal("100000"),
            debt_service=Decimal("20000"),
            target_cap_rate_pct=Decimal("10"),
            target_cash_on_cash_pct=Decimal("10"),
        )
        assert result.cap_rate_based_price == Decimal("600000.00")
        assert result.cash_on_cash_based_price == Decimal("300000.00")
        assert result.recommended_price == Decimal("300000.00")

    def test_recommended_is_min_and_offer_is_ninety_percent(self):
        for noi in (Decimal("12345.67"), Decimal("55000"), Decimal("98765.43")):
            result = solve_target_price(
                noi, Decimal("80000"), Decimal("24000"), Decimal("7.25"), Decimal("9.5")
            )
            assert result.recommended_price == min(
                result.cap_rate_based_price, result.cash_on_cash_based_price
            )
            assert result.max_offer_price == (result.recommended_price * OFFER_RATIO).quantize(
                Decimal("0.01"), ROUND_HALF_UP
            )

    def test_zero_target_cap_rate(self):
        with pytest.raises(ValueError):
            solve_target_price(
                Decimal("40000"), Decimal("145000"), Decimal("0"), Decimal("0"), Decimal("12")
            )


class TestSolveForAnalysis:
    def test_matches_direct_solve(self, canonical_investment):
        analysis = analyze(canonical_investment)
        result = solve_for_analysis(analysis, Decimal("8"), Decimal("12"))
        direct = solve_target_price(
            analysis.projected_noi,
            analysis.total_cash_invested,
            analysis.annual_debt_service,
            Decimal("8"),
            Decimal("12"),
        )
        assert result == direct
