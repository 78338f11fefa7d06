from decimal import Decimal

import pytest

from agentdesk.data.closing_costs import (
    DEFAULT_JURISDICTION,
    GEOGRAPHIC_COSTS,
    cost_profile,
    jurisdiction_for_zip,
)


class TestCostProfile:
    def test_known_state(self):
        assert cost_profile("NY").transfer_tax_pct == Decimal("4.0")

    def test_case_insensitive(self):
        assert cost_profile("ca") is GEOGRAPHIC_COSTS["CA"]

    @pytest.mark.parametrize("code", ["ZZ", "", None])
    def test_falls_back_to_default(self, code):
        assert cost_profile(code) is GEOGRAPHIC_COSTS[DEFAULT_JURISDICTION]

    def test_codes_match_keys(self):
        for code, profile in GEOGRAPHIC_COSTS.items():
            assert profile.code == code


class TestJurisdictionForZip:
    @pytest.mark.parametrize(
        "zip_code, expected",
        [
            ("90210", "CA"),
            ("10001", "NY"),
            ("07030", "NJ"),
            ("33101", "FL"),
            ("77001", "TX"),
            ("98101", "WA"),
            ("60601", "IL"),
            ("19103", "PA"),
            ("43215", "OH"),
            ("30301", "GA"),
            ("27601", "NC"),
            ("94105-1234", "CA"),
            ("59001", "DEFAULT"),
            ("1234", "DEFAULT"),
            ("abcde", "DEFAULT"),
            ("", "DEFAULT"),
            (None, "DEFAULT"),
        ],
    )
    def test_lookup(self, zip_code, expected):
        assert jurisdiction_for_zip(zip_code) == expected
