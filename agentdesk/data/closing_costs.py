"""State-level seller closing cost profiles.

Seller costs include: transfer tax, owner's title insurance, attorney fees,
recording fees, escrow/settlement fees and prorated property tax.
Percent fields are percent of sale price.
"""

import logging
from decimal import Decimal

from agentdesk.models.net_sheet import GeographicCostProfile

logger = logging.getLogger(__name__)

DEFAULT_JURISDICTION = "DEFAULT"


def _profile(code: str, name: str, transfer: str, title: str, attorney: str,
             recording: str, escrow: str, prop_tax: str) -> GeographicCostProfile:
    return GeographicCostProfile(
        code=code,
        name=name,
        transfer_tax_pct=Decimal(transfer),
        title_insurance_pct=Decimal(title),
        attorney_fees_flat=Decimal(attorney),
        recording_fees_flat=Decimal(recording),
        escrow_fees_pct=Decimal(escrow),
        property_tax_rate_pct=Decimal(prop_tax),
    )


GEOGRAPHIC_COSTS: dict[str, GeographicCostProfile] = {
    # High-cost states
    "CA": _profile("CA", "California", "0.55", "0.8", "0", "150", "0.2", "0.75"),  # Varies by county
    "NY": _profile("NY", "New York", "4.0", "0.6", "1500", "200", "0.1", "1.68"),  # Incl. mansion tax
    "NJ": _profile("NJ", "New Jersey", "1.0", "0.7", "1200", "100", "0.15", "1.79"),
    "FL": _profile("FL", "Florida", "0.7", "0.5", "800", "75", "0.25", "0.83"),
    "TX": _profile("TX", "Texas", "0", "0.9", "0", "50", "0.2", "1.60"),  # No transfer tax
    "WA": _profile("WA", "Washington", "1.28", "0.8", "0", "100", "0.3", "0.94"),  # Excise tax
    "IL": _profile("IL", "Illinois", "1.5", "0.7", "1000", "150", "0.2", "2.16"),
    "PA": _profile("PA", "Pennsylvania", "1.0", "0.5", "1200", "100", "0.1", "1.58"),  # Often split
    "OH": _profile("OH", "Ohio", "0.4", "0.6", "800", "75", "0.15", "1.52"),
    "GA": _profile("GA", "Georgia", "0.1", "0.7", "800", "50", "0.2", "0.83"),
    "NC": _profile("NC", "North Carolina", "0.2", "0.6", "1000", "75", "0.15", "0.84"),

    # National average for everything else
    DEFAULT_JURISDICTION: _profile(
        DEFAULT_JURISDICTION, "Other Location", "0.5", "0.7", "800", "100", "0.2", "1.07"
    ),
}

# Inclusive 5-digit ZIP ranges per jurisdiction
ZIP_RANGES: tuple[tuple[int, int, str], ...] = (
    (90000, 96699, "CA"),
    (10000, 14999, "NY"),
    (7000, 8999, "NJ"),
    (32000, 34999, "FL"),
    (75000, 79999, "TX"),
    (98000, 99499, "WA"),
    (60000, 62999, "IL"),
    (15000, 19699, "PA"),
    (43000, 45999, "OH"),
    (30000, 31999, "GA"),
    (27000, 28999, "NC"),
)


def cost_profile(jurisdiction: str | None) -> GeographicCostProfile:
    """Look up the cost profile for a jurisdiction code.

    Unknown or missing codes resolve to the DEFAULT profile.
    """
    code = (jurisdiction or DEFAULT_JURISDICTION).strip().upper()
    profile = GEOGRAPHIC_COSTS.get(code)
    if profile is None:
        logger.debug("No cost profile for %r, using %s", jurisdiction, DEFAULT_JURISDICTION)
        return GEOGRAPHIC_COSTS[DEFAULT_JURISDICTION]
    return profile


def jurisdiction_for_zip(zip_code: str | None) -> str:
    """Map a US ZIP code to a jurisdiction code by its first five digits."""
    prefix = (zip_code or "").strip()[:5]
    if len(prefix) < 5 or not prefix.isdigit():
        return DEFAULT_JURISDICTION

    zip_num = int(prefix)
    for low, high, code in ZIP_RANGES:
        if low <= zip_num <= high:
            return code
    return DEFAULT_JURISDICTION
