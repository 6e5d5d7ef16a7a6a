"""Display brightness handling while a card is shown for scanning."""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal


class DisplayBrightness(QObject):
    """Process-wide display brightness level, from 0.0 to 1.0."""

    brightness_changed = pyqtSignal(float)

    def __init__(self, level: float = 0.5, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._level = self._clamp(level)

    def brightness(self) -> float:
        return self._level

    def set_brightness(self, level: float) -> None:
        level = self._clamp(level)
        if level == self._level:
            return
        self._level = level
        self.brightness_changed.emit(level)

    @staticmethod
    def _clamp(level: float) -> float:
        return max(0.0, min(1.0, float(level)))


class BrightnessGuard:
    """
    Raises the display brightness and restores the previous level.

    ``release`` restores at most once per ``acquire``, so it is safe to call
    from every path that hides the view.
    """

    def __init__(self, display: DisplayBrightness, level: float = 1.0) -> None:
        self.display = display
        self.level = level
        self._saved_level: Optional[float] = None

    @property
    def active(self) -> bool:
        return self._saved_level is not None

    def acquire(self) -> None:
        if self._saved_level is None:
            self._saved_level = self.display.brightness()
        self.display.set_brightness(self.level)

    def release(self) -> None:
        if self._saved_level is None:
            return
        self.display.set_brightness(self._saved_level)
        self._saved_level = None

    def __enter__(self) -> "BrightnessGuard":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()
