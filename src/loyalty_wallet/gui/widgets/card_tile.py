"""Grid tile for a single loyalty card."""

from PyQt5.QtWidgets import QFrame, QVBoxLayout, QLabel
from PyQt5.QtGui import QFont
from PyQt5.QtCore import Qt, pyqtSignal

from ...core.card import LoyaltyCard


class CardTile(QFrame):
    """Clickable tile showing a card's store name and code."""

    # Signals
    clicked = pyqtSignal(object)  # LoyaltyCard

    def __init__(self, card: LoyaltyCard, parent=None):
        super().__init__(parent)
        self.card = card
        self.setup_ui()

    def setup_ui(self):
        """Set up the tile UI."""
        layout = QVBoxLayout()

        self.name_label = QLabel(self.card.store_name)
        name_font = QFont()
        name_font.setBold(True)
        self.name_label.setFont(name_font)
        self.name_label.setAlignment(Qt.AlignCenter)
        self.name_label.setWordWrap(True)
        layout.addWidget(self.name_label)

        self.code_label = QLabel(self.card.code_data)
        self.code_label.setAlignment(Qt.AlignCenter)
        self.code_label.setStyleSheet("QLabel { color: gray; font-size: 11px; }")
        layout.addWidget(self.code_label)

        self.setLayout(layout)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(
            "CardTile { background-color: #f2f2f7; border: 1px solid #d0d0d0; "
            "border-radius: 12px; padding: 12px; }"
        )

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.card)
        super().mouseReleaseEvent(event)
