"""Display preference types."""
from enum import Enum


class ThemeMode(str, Enum):
    """Light/dark display preference. Light is the default."""
    LIGHT = "light"
    DARK = "dark"

    @property
    def is_dark(self) -> bool:
        return self is ThemeMode.DARK

    def toggled(self) -> "ThemeMode":
        return ThemeMode.LIGHT if self.is_dark else ThemeMode.DARK
