"""
Main entry point for the Loyalty Wallet package.
"""

import sys
from PyQt5.QtWidgets import QApplication

from .gui.app import WalletApp
from .utils.config import AppConfig


def main():
    """Main function to start the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName(AppConfig.APP_NAME)
    app.setOrganizationName(AppConfig.ORGANIZATION)

    window = WalletApp()
    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
