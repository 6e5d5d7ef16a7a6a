"""Utility functions for Loyalty Wallet."""

from .config import AppConfig
from .validators import CardValidator

__all__ = [
    "AppConfig",
    "CardValidator"
]
