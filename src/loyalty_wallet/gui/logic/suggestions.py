"""Store name suggestions for the add-card form."""

from typing import List

CANADIAN_LOYALTY_CARDS = [
    "Costco Membership",
    "Walmart Rewards",
    "Scene+",
    "PC Optimum",
    "Air Miles",
    "Canadian Tire Triangle Rewards",
    "Metro Moi",
    "SAQ Inspire",
    "IKEA Family",
    "H&M Membership",
    "Sephora Beauty Insider",
    "MyMcDonald’s Rewards",
    "Starbucks Rewards",
    "Rakuten Points",
    "Nike Membership",
    "Lululemon Membership",
    "Pet’s Rewards",
]


def filtered_suggestions(query: str) -> List[str]:
    """Return the programs whose name contains ``query``, ignoring case."""
    if not query:
        return []
    needle = query.lower()
    return [name for name in CANADIAN_LOYALTY_CARDS if needle in name.lower()]
