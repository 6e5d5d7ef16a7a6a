"""
Persistence of the card list in the application's settings storage.
"""

from typing import Callable, List, Optional, Sequence

from PyQt5.QtCore import QByteArray, QSettings

from ..utils.config import AppConfig
from .card import LoyaltyCard, decode_cards, encode_cards


class CardStore:
    """
    Saves and loads the full card list under a single settings key.

    Failures never reach the caller: a failed save leaves the previously
    stored value in place, and a failed load returns an empty list.
    """

    def __init__(self, settings: Optional[QSettings] = None, key: str = AppConfig.CARDS_KEY,
                 log_callback: Optional[Callable[[str], None]] = None) -> None:
        self.settings = settings if settings is not None else AppConfig.create_settings()
        self.key = key
        self.log_callback = log_callback

    def log(self, message: str) -> None:
        """Log a message to the callback, or the console without one."""
        if self.log_callback:
            self.log_callback(message)
        else:
            print(message)

    def save_loyalty_cards(self, cards: Sequence[LoyaltyCard]) -> None:
        """Overwrite the stored card list with ``cards``."""
        try:
            blob = encode_cards(cards)
        except (TypeError, ValueError, AttributeError) as e:
            self.log(f"Failed to save loyalty cards: {e}")
            return

        self.settings.setValue(self.key, QByteArray(blob))
        self.settings.sync()
        if self.settings.status() != QSettings.NoError:
            self.log(f"Failed to save loyalty cards: settings status {self.settings.status()}")

    def load_loyalty_cards(self) -> List[LoyaltyCard]:
        """
        Read the stored card list.

        Returns:
            List of cards, or an empty list if nothing is stored or the
            stored value cannot be decoded
        """
        raw = self.settings.value(self.key)
        if raw is None:
            return []

        if isinstance(raw, (QByteArray, bytearray)):
            raw = bytes(raw)

        try:
            return decode_cards(raw)
        except (ValueError, TypeError, RecursionError) as e:
            self.log(f"Failed to load cards: {e}")
            return []

    def clear(self) -> None:
        """Remove the stored card list."""
        self.settings.remove(self.key)
        self.settings.sync()
