"""
Validation utilities for Loyalty Wallet.
"""


class CardValidator:
    """Utilities for validating card input."""

    @staticmethod
    def is_valid_submission(store_name: str, code_data: str) -> bool:
        """
        Check whether the add-card form may be submitted.

        Args:
            store_name: Text of the card name field
            code_data: Text of the barcode field

        Returns:
            bool: True if both fields contain something besides whitespace
        """
        if not store_name or not code_data:
            return False
        return bool(store_name.strip()) and bool(code_data.strip())

    @staticmethod
    def is_ascii(text: str) -> bool:
        """Return True if ``text`` can be encoded as ASCII."""
        try:
            text.encode("ascii")
        except UnicodeEncodeError:
            return False
        return True
