"""Dialog for adding a new loyalty card."""

from PyQt5.QtWidgets import (QDialog, QVBoxLayout, QLabel, QLineEdit,
                            QListWidget, QPushButton)
from PyQt5.QtGui import QFont
from PyQt5.QtCore import pyqtSignal

from ...core.card import CodeType, LoyaltyCard
from ...utils.validators import CardValidator
from ..logic.suggestions import filtered_suggestions


class AddCardDialog(QDialog):
    """Form with a card name, its barcode text and name suggestions."""

    # Signals
    card_added = pyqtSignal(object)  # LoyaltyCard

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setup_ui()

    def setup_ui(self):
        """Set up the add card form."""
        self.setWindowTitle("Add Card")
        self.setMinimumWidth(360)
        layout = QVBoxLayout()

        title = QLabel("Add your card")
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Card Name")
        self.name_input.textChanged.connect(self._update_suggestions)
        layout.addWidget(self.name_input)

        # Hidden until the name field matches something
        self.suggestion_list = QListWidget()
        self.suggestion_list.setMaximumHeight(120)
        self.suggestion_list.itemClicked.connect(self._apply_suggestion)
        self.suggestion_list.hide()
        layout.addWidget(self.suggestion_list)

        self.code_input = QLineEdit()
        self.code_input.setPlaceholderText("Barcode Text")
        self.code_input.returnPressed.connect(self.handle_submit)
        layout.addWidget(self.code_input)

        self.submit_button = QPushButton("Submit")
        self.submit_button.setStyleSheet(
            "QPushButton { background-color: #007aff; color: white; "
            "font-weight: bold; padding: 10px; border-radius: 12px; }"
        )
        self.submit_button.clicked.connect(self.handle_submit)
        layout.addWidget(self.submit_button)

        layout.addStretch()
        self.setLayout(layout)

    def _update_suggestions(self, text):
        """Refill the suggestion list from the current name."""
        suggestions = filtered_suggestions(text)
        self.suggestion_list.clear()
        self.suggestion_list.addItems(suggestions)
        self.suggestion_list.setVisible(bool(suggestions))

    def _apply_suggestion(self, item):
        """Use a clicked suggestion as the card name."""
        self.name_input.setText(item.text())
        self.suggestion_list.hide()
        self.code_input.setFocus()

    def handle_submit(self):
        """Emit a new card if both fields are filled in; otherwise stay open."""
        store_name = self.name_input.text()
        code_data = self.code_input.text()
        if not CardValidator.is_valid_submission(store_name, code_data):
            return

        card = LoyaltyCard(store_name=store_name, code_data=code_data, code_type=CodeType.BARCODE)
        self.card_added.emit(card)
        self.accept()
