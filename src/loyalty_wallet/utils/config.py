"""
Configuration constants for Loyalty Wallet.
"""

from PyQt5.QtCore import QSettings


class AppConfig:
    """Configuration for the Loyalty Wallet application."""

    # Application constants
    APP_NAME = "Loyalty Wallet"
    APP_VERSION = "1.0.0"
    ORGANIZATION = "LoyaltyWallet"
    APP_IDENTIFIER = "LoyaltyWallet"

    # Settings key holding the serialized card list
    CARDS_KEY = "loyaltyCards"

    # Main window
    WINDOW_TITLE = "Wallet"
    GRID_COLUMNS = 2
    MIN_WINDOW_WIDTH = 420
    MIN_WINDOW_HEIGHT = 560

    # Detail view
    DETAIL_BRIGHTNESS = 1.0
    RENDER_FAILURE_MESSAGE = "Failed to generate barcode"

    # Code 128 output (python-barcode ImageWriter options)
    BARCODE_WRITER_OPTIONS = {
        "module_width": 0.3,
        "module_height": 18.0,
        "quiet_zone": 4.0,
        "write_text": False,
        "background": "white",
        "foreground": "black",
    }

    # QR output
    QR_BOX_SIZE = 10
    QR_BORDER = 4

    @classmethod
    def create_settings(cls) -> QSettings:
        """Create the native settings store for this application."""
        return QSettings(cls.ORGANIZATION, cls.APP_IDENTIFIER)
