"""Seller net sheet: itemized closing deductions and net proceeds.

Pure functions: Decimal in, NetSheetResult out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from agentdesk.data.closing_costs import cost_profile
from agentdesk.models.net_sheet import BreakdownItem, NetSheetResult

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")

# Property tax is prorated assuming closing falls mid-year on average
TAX_PRORATION_FRACTION = Decimal("0.5")


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def _pct_of(amount: Decimal, sale_price: Decimal) -> Decimal:
    if sale_price <= 0:
        return Decimal("0")
    return (amount / sale_price * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)


def compute_net_sheet(
    sale_price: Decimal,
    jurisdiction: str | None = None,
    mortgage_balance: Decimal = Decimal("0"),
    commission_rate_pct: Decimal = Decimal("6.0"),
    repair_costs: Decimal = Decimal("0"),
    home_warranty_cost: Decimal = Decimal("0"),
) -> NetSheetResult:
    """Estimate what the seller walks away with at closing.

    Deductions are added in closing-statement order, then sorted largest
    first. Net proceeds may be negative (seller brings cash to closing).
    """
    costs = cost_profile(jurisdiction)
    items: list[BreakdownItem] = []

    def add(category: str, description: str, amount: Decimal, pct: Decimal | None = None) -> None:
        amount = _money(amount)
        if pct is None:
            pct = _pct_of(amount, sale_price)
        items.append(BreakdownItem(category, description, amount, pct))

    if mortgage_balance > 0:
        add("Loan Payoff", "Existing mortgage balance", mortgage_balance)

    add(
        "Real Estate Commission",
        f"{commission_rate_pct}% total commission",
        sale_price * commission_rate_pct / 100,
        commission_rate_pct,
    )

    transfer_tax = sale_price * costs.transfer_tax_pct / 100
    if transfer_tax > 0:
        add("Transfer Tax", f"{costs.name} transfer tax", transfer_tax, costs.transfer_tax_pct)

    add(
        "Title Insurance",
        "Owner's title insurance policy",
        sale_price * costs.title_insurance_pct / 100,
        costs.title_insurance_pct,
    )

    if costs.attorney_fees_flat > 0:
        add("Attorney Fees", "Legal representation at closing", costs.attorney_fees_flat)

    add("Recording Fees", "Document recording with county", costs.recording_fees_flat)

    add(
        "Escrow/Settlement Fees",
        "Third-party transaction management",
        sale_price * costs.escrow_fees_pct / 100,
        costs.escrow_fees_pct,
    )

    add(
        "Prorated Property Taxes",
        "Property taxes through closing date",
        sale_price * costs.property_tax_rate_pct / 100 * TAX_PRORATION_FRACTION,
    )

    if repair_costs > 0:
        add("Repairs/Concessions", "Negotiated repairs or buyer concessions", repair_costs)

    if home_warranty_cost > 0:
        add("Home Warranty", "One-year home warranty for buyer", home_warranty_cost)

    total = sum((item.amount for item in items), Decimal("0"))

    return NetSheetResult(
        gross_sale_price=sale_price,
        total_deductions=total,
        net_proceeds=sale_price - total,
        jurisdiction=costs.code,
        jurisdiction_name=costs.name,
        breakdown_items=sorted(items, key=lambda item: abs(item.amount), reverse=True),
    )
