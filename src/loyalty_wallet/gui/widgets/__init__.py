"""GUI widgets module."""

from .card_tile import CardTile
from .add_card_dialog import AddCardDialog
from .card_detail_dialog import CardDetailDialog

__all__ = ['CardTile', 'AddCardDialog', 'CardDetailDialog']
