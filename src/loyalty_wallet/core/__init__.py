"""Core functionality for Loyalty Wallet."""

from .card import CardDecodeError, CodeType, LoyaltyCard
from .card_store import CardStore
from .card_collection import CardCollection
from .barcode_renderer import BarcodeRenderer

__all__ = [
    "CardDecodeError",
    "CodeType",
    "LoyaltyCard",
    "CardStore",
    "CardCollection",
    "BarcodeRenderer"
]
