"""
In-memory card list that writes through to the card store.
"""

from typing import Iterator, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from .card import LoyaltyCard
from .card_store import CardStore


class CardCollection(QObject):
    """Ordered list of cards owned by the running session."""

    # Emitted with a snapshot of the list after it changes
    cards_changed = pyqtSignal(list)

    def __init__(self, store: CardStore, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.store = store
        self._cards: List[LoyaltyCard] = []

    @property
    def cards(self) -> List[LoyaltyCard]:
        """Snapshot of the current cards in display order."""
        return list(self._cards)

    def load_loyalty_cards(self) -> List[LoyaltyCard]:
        """Replace the in-memory list with the stored one."""
        self._cards = self.store.load_loyalty_cards()
        self.cards_changed.emit(self.cards)
        return self.cards

    def add_new_card(self, card: LoyaltyCard) -> None:
        """Append a card and persist the whole list."""
        self._cards.append(card)
        self._commit()

    def delete_card(self, card: LoyaltyCard) -> None:
        """Remove every card sharing ``card``'s identifier. Unknown cards are ignored."""
        remaining = [c for c in self._cards if c.id != card.id]
        if len(remaining) == len(self._cards):
            return
        self._cards = remaining
        self._commit()

    def find_card(self, card_id: str) -> Optional[LoyaltyCard]:
        for card in self._cards:
            if card.id == card_id:
                return card
        return None

    def _commit(self) -> None:
        snapshot = self.cards
        self.store.save_loyalty_cards(snapshot)
        self.cards_changed.emit(self.cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[LoyaltyCard]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        if not isinstance(card, LoyaltyCard):
            return False
        return self.find_card(card.id) is not None
