"""
Loyalty Wallet

A desktop application that keeps loyalty card numbers in one place and
shows each one as a scannable barcode.
"""

__version__ = "1.0.0"

from .core.card import CodeType, LoyaltyCard
from .core.card_store import CardStore
from .core.card_collection import CardCollection
from .core.barcode_renderer import BarcodeRenderer

__all__ = [
    "CodeType",
    "LoyaltyCard",
    "CardStore",
    "CardCollection",
    "BarcodeRenderer"
]
