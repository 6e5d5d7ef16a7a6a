"""Business logic module."""

from .brightness import BrightnessGuard, DisplayBrightness
from .suggestions import CANADIAN_LOYALTY_CARDS, filtered_suggestions

__all__ = ['BrightnessGuard', 'DisplayBrightness', 'CANADIAN_LOYALTY_CARDS', 'filtered_suggestions']
