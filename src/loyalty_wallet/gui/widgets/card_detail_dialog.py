"""Dialog showing a card's barcode for scanning."""

from typing import Optional

from PyQt5.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton
from PyQt5.QtGui import QFont, QPixmap
from PyQt5.QtCore import Qt, pyqtSignal

from ...core.barcode_renderer import BarcodeRenderer
from ...core.card import LoyaltyCard
from ...utils.config import AppConfig
from ..logic.brightness import BrightnessGuard


class CardDetailDialog(QDialog):
    """
    Detail view for one card: store name, rendered code and a delete button.

    While the dialog is visible the display brightness is raised through
    the optional guard. ``done`` releases it, which covers closing,
    rejecting and the delete button alike.
    """

    # Signals
    delete_requested = pyqtSignal(object)  # LoyaltyCard

    def __init__(self, card: LoyaltyCard, renderer: Optional[BarcodeRenderer] = None,
                 brightness_guard: Optional[BrightnessGuard] = None, parent=None):
        super().__init__(parent)
        self.card = card
        self.renderer = renderer or BarcodeRenderer()
        self.brightness_guard = brightness_guard
        self.barcode_rendered = False
        self.setup_ui()

    def setup_ui(self):
        """Set up the detail view UI."""
        self.setWindowTitle("Card Details")
        self.setMinimumWidth(400)
        layout = QVBoxLayout()

        self.name_label = QLabel(self.card.store_name)
        name_font = QFont()
        name_font.setPointSize(16)
        name_font.setBold(True)
        self.name_label.setFont(name_font)
        self.name_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.name_label)

        self.barcode_label = QLabel()
        self.barcode_label.setAlignment(Qt.AlignCenter)
        self._show_barcode()
        layout.addWidget(self.barcode_label)

        self.code_label = QLabel(self.card.code_data)
        self.code_label.setAlignment(Qt.AlignCenter)
        self.code_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.code_label.setStyleSheet("QLabel { color: gray; font-size: 11px; }")
        layout.addWidget(self.code_label)

        layout.addStretch()

        self.delete_button = QPushButton("Delete")
        self.delete_button.setStyleSheet("QPushButton { color: #ff3b30; padding: 8px; }")
        self.delete_button.clicked.connect(self._handle_delete)
        layout.addWidget(self.delete_button)

        self.setLayout(layout)

    def _show_barcode(self):
        """Render the card's code, or show the failure text in its place."""
        png = self.renderer.render(self.card.code_data, self.card.code_type)
        pixmap = QPixmap()
        if png is not None and pixmap.loadFromData(png):
            self.barcode_label.setPixmap(pixmap.scaledToWidth(360, Qt.FastTransformation))
            self.barcode_label.setStyleSheet(
                "QLabel { background-color: white; border-radius: 12px; padding: 8px; }"
            )
            self.barcode_rendered = True
        else:
            self.barcode_label.setText(AppConfig.RENDER_FAILURE_MESSAGE)
            self.barcode_label.setStyleSheet("QLabel { color: red; }")
            self.barcode_rendered = False

    def _handle_delete(self):
        self.delete_requested.emit(self.card)
        self.accept()

    def showEvent(self, event):
        if self.brightness_guard is not None:
            self.brightness_guard.acquire()
        super().showEvent(event)

    def done(self, result):
        if self.brightness_guard is not None:
            self.brightness_guard.release()
        super().done(result)
