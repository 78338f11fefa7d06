from decimal import Decimal

from agentdesk.engine.net_sheet import compute_net_sheet


def _by_category(result):
    return {item.category: item for item in result.breakdown_items}


class TestNetSheet:
    def test_default_jurisdiction_scenario(self):
        result = compute_net_sheet(
            sale_price=Decimal("500000"),
            jurisdiction="DEFAULT",
            mortgage_balance=Decimal("250000"),
            commission_rate_pct=Decimal("6"),
            repair_costs=Decimal("0"),
            home_warranty_cost=Decimal("500"),
        )
        items = _by_category(result)
        assert items["Loan Payoff"].amount == Decimal("250000.00")
        assert items["Real Estate Commission"].amount == Decimal("30000.00")
        assert items["Transfer Tax"].amount == Decimal("2500.00")
        assert items["Title Insurance"].amount == Decimal("3500.00")
        assert items["Attorney Fees"].amount == Decimal("800.00")
        assert items["Recording Fees"].amount == Decimal("100.00")
        assert items["Escrow/Settlement Fees"].amount == Decimal("1000.00")
        assert items["Prorated Property Taxes"].amount == Decimal("2675.00")
        assert items["Home Warranty"].amount == Decimal("500.00")
        assert "Repairs/Concessions" not in items

        assert result.total_deductions == Decimal("291075.00")
        assert result.net_proceeds == Decimal("208925.00")
        assert result.net_proceeds + result.total_deductions == Decimal("500000")
        assert not result.seller_owes_at_closing

    def test_sorted_largest_first(self):
        result = compute_net_sheet(
            Decimal("500000"), "DEFAULT", Decimal("250000"), Decimal("6"), Decimal("0"),
            Decimal("500"),
        )
        categories = [item.category for item in result.breakdown_items]
        assert categories == [
            "Loan Payoff",
            "Real Estate Commission",
            "Title Insurance",
            "Prorated Property Taxes",
            "Transfer Tax",
            "Escrow/Settlement Fees",
            "Attorney Fees",
            "Home Warranty",
            "Recording Fees",
        ]

    def test_total_is_sum_of_items(self):
        result = compute_net_sheet(
            Decimal("733333.33"), "NY", Decimal("123456.78"), Decimal("5.5"), Decimal("4321.09"),
            Decimal("650"),
        )
        assert result.total_deductions == sum(item.amount for item in result.breakdown_items)
        assert result.net_proceeds + result.total_deductions == result.gross_sale_price

    def test_percent_of_sale(self):
        result = compute_net_sheet(Decimal("500000"), "DEFAULT", commission_rate_pct=Decimal("6"))
        items = _by_category(result)
        assert items["Real Estate Commission"].pct_of_sale == Decimal("6")
        assert items["Attorney Fees"].pct_of_sale == Decimal("0.1600")

    def test_texas_omits_transfer_tax_and_attorney(self):
        result = compute_net_sheet(Decimal("400000"), "TX")
        items = _by_category(result)
        assert "Transfer Tax" not in items
        assert "Attorney Fees" not in items
        assert "Loan Payoff" not in items
        assert result.jurisdiction == "TX"
        assert result.jurisdiction_name == "Texas"

    def test_unknown_jurisdiction_uses_default(self):
        unknown = compute_net_sheet(Decimal("400000"), "ZZ")
        default = compute_net_sheet(Decimal("400000"), "DEFAULT")
        assert unknown.jurisdiction == "DEFAULT"
        assert unknown.net_proceeds == default.net_proceeds

    def test_underwater_sale(self):
        """Deductions exceeding the price are a result, not an error."""
        result = compute_net_sheet(
            Decimal("200000"), "FL", mortgage_balance=Decimal("210000")
        )
        assert result.net_proceeds < 0
        assert result.seller_owes_at_closing
        assert result.net_proceeds + result.total_deductions == Decimal("200000")

    def test_repairs_included(self):
        result = compute_net_sheet(Decimal("400000"), "CA", repair_costs=Decimal("7500"))
        items = _by_category(result)
        assert items["Repairs/Concessions"].amount == Decimal("7500.00")
