"""Main application window for Loyalty Wallet."""

from typing import Optional

from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                            QGridLayout, QScrollArea, QLabel, QToolButton)
from PyQt5.QtGui import QFont
from PyQt5.QtCore import Qt

from ..core.barcode_renderer import BarcodeRenderer
from ..core.card_collection import CardCollection
from ..core.card_store import CardStore
from ..utils.config import AppConfig
from .logic.brightness import BrightnessGuard, DisplayBrightness
from .widgets.add_card_dialog import AddCardDialog
from .widgets.card_detail_dialog import CardDetailDialog
from .widgets.card_tile import CardTile


class WalletApp(QMainWindow):
    """Main window: a grid of cards with add and detail dialogs."""

    def __init__(self, store: Optional[CardStore] = None):
        super().__init__()

        # Initialize state
        self.collection = CardCollection(store or CardStore(), self)
        self.renderer = BarcodeRenderer()
        self.display = DisplayBrightness(parent=self)
        self.brightness_guard = BrightnessGuard(self.display, AppConfig.DETAIL_BRIGHTNESS)
        self.tiles = []
        self.add_dialog = None
        self.detail_dialog = None

        # Set up the UI
        self.init_ui()

        # Rebuild the grid whenever the list changes, then hydrate it
        self.collection.cards_changed.connect(self.refresh_grid)
        self.collection.load_loyalty_cards()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(AppConfig.APP_NAME)
        self.setMinimumSize(AppConfig.MIN_WINDOW_WIDTH, AppConfig.MIN_WINDOW_HEIGHT)

        central = QWidget()
        layout = QVBoxLayout()

        # Header
        header_layout = QHBoxLayout()
        title = QLabel(AppConfig.WINDOW_TITLE)
        title_font = QFont()
        title_font.setPointSize(20)
        title_font.setBold(True)
        title.setFont(title_font)
        header_layout.addWidget(title)
        header_layout.addStretch()

        self.add_button = QToolButton()
        self.add_button.setText("+")
        self.add_button.setToolTip("Add card")
        self.add_button.setStyleSheet("QToolButton { font-size: 20px; padding: 2px 10px; }")
        self.add_button.clicked.connect(self.show_add_card)
        header_layout.addWidget(self.add_button)
        layout.addLayout(header_layout)

        # Card grid
        self.grid_container = QWidget()
        self.grid_layout = QGridLayout()
        self.grid_layout.setSpacing(16)
        self.grid_layout.setAlignment(Qt.AlignTop)
        self.grid_container.setLayout(self.grid_layout)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        scroll.setWidget(self.grid_container)
        layout.addWidget(scroll)

        central.setLayout(layout)
        self.setCentralWidget(central)

    def refresh_grid(self, cards):
        """Rebuild the grid from a snapshot of the collection."""
        for tile in self.tiles:
            self.grid_layout.removeWidget(tile)
            tile.deleteLater()
        self.tiles = []

        for index, card in enumerate(cards):
            tile = CardTile(card)
            tile.clicked.connect(self.show_card_details)
            row, col = divmod(index, AppConfig.GRID_COLUMNS)
            self.grid_layout.addWidget(tile, row, col)
            self.tiles.append(tile)

    def show_add_card(self):
        """Open the add card form."""
        self.add_dialog = AddCardDialog(self)
        self.add_dialog.setAttribute(Qt.WA_DeleteOnClose)
        self.add_dialog.card_added.connect(self.collection.add_new_card)
        self.add_dialog.open()

    def show_card_details(self, card):
        """Open the detail view for a card."""
        self.detail_dialog = CardDetailDialog(
            card,
            renderer=self.renderer,
            brightness_guard=self.brightness_guard,
            parent=self,
        )
        self.detail_dialog.setAttribute(Qt.WA_DeleteOnClose)
        self.detail_dialog.delete_requested.connect(self.collection.delete_card)
        self.detail_dialog.open()
