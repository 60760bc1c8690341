"""
ThemeController - Applies the light/dark preference to the window chrome.

Card styling is not touched here: cards read their style from the theme
mode at render time (see RenderEngine), so a theme switch never needs a
restyle pass over already painted cards.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict
from loguru import logger

from user_directory.core.events import Signal
from user_directory.core.models import ThemeMode
from user_directory.core.preferences import ThemePreferenceStore
from user_directory.ui.cardview.models.render_tree import CardStyle


class ThemeChrome(BaseModel):
    """Visible state of everything outside the card grid for one mode."""
    model_config = ConfigDict(frozen=True)

    mode: ThemeMode
    root_dark: bool
    toggle_icon: str
    toggle_label: str
    toggle_classes: str
    window_background: str
    text_color: str
    input_background: str
    input_border: str
    toggle_background: str
    toggle_color: str


_CHROME = {
    ThemeMode.LIGHT: ThemeChrome(
        mode=ThemeMode.LIGHT,
        root_dark=False,
        toggle_icon="moon",
        toggle_label="Dark Mode",
        toggle_classes="bg-gray-200 text-gray-800 hover:bg-gray-300",
        window_background="#f3f4f6",
        text_color="#1f2937",
        input_background="#ffffff",
        input_border="#d1d5db",
        toggle_background="#e5e7eb",
        toggle_color="#1f2937",
    ),
    ThemeMode.DARK: ThemeChrome(
        mode=ThemeMode.DARK,
        root_dark=True,
        toggle_icon="sun",
        toggle_label="Light Mode",
        toggle_classes="bg-gray-700 text-white hover:bg-gray-600",
        window_background="#111827",
        text_color="#f9fafb",
        input_background="#1f2937",
        input_border="#4b5563",
        toggle_background="#374151",
        toggle_color="#ffffff",
    ),
}

_CARD_STYLES = {
    ThemeMode.LIGHT: CardStyle(
        classes="bg-white rounded-lg shadow-md overflow-hidden hover:shadow-lg transition",
        background="#ffffff",
        border="#e5e7eb",
        title_color="#1f2937",
        text_color="#374151",
        muted_color="#4b5563",
        avatar_background="#dbeafe",
        avatar_color="#1e40af",
        button_background="#dbeafe",
        button_color="#2563eb",
    ),
    ThemeMode.DARK: CardStyle(
        classes="bg-gray-800 rounded-lg shadow-md overflow-hidden hover:shadow-lg transition",
        background="#1f2937",
        border="#374151",
        title_color="#f9fafb",
        text_color="#d1d5db",
        muted_color="#9ca3af",
        avatar_background="#1e3a8a",
        avatar_color="#dbeafe",
        button_background="#1e3a8a",
        button_color="#bfdbfe",
    ),
}


def chrome_for(mode: ThemeMode) -> ThemeChrome:
    """Chrome state for a mode."""
    return _CHROME[mode]


def card_style_for(mode: ThemeMode) -> CardStyle:
    """Card style for a mode."""
    return _CARD_STYLES[mode]


class ThemeController:
    """
    Applies and persists the theme mode.

    apply() is idempotent: applying the mode that is already active yields
    the same chrome and does not notify again.

    Example:
        controller = ThemeController(ThemePreferenceStore(store))
        controller.restore()      # apply the persisted mode
        controller.toggle()       # flip, persist, apply
    """

    def __init__(self, preferences: ThemePreferenceStore):
        self._preferences = preferences
        self._mode: Optional[ThemeMode] = None
        self.on_changed = Signal("ThemeChanged")

    @property
    def mode(self) -> ThemeMode:
        """Active mode (light until something is applied)."""
        return self._mode or ThemeMode.LIGHT

    @property
    def chrome(self) -> ThemeChrome:
        return chrome_for(self.mode)

    def restore(self) -> ThemeMode:
        """Apply the persisted mode without rewriting it."""
        mode = self._preferences.load()
        self.apply(mode)
        return mode

    def apply(self, mode: ThemeMode) -> ThemeChrome:
        """
        Apply a mode.

        Args:
            mode: Mode to show

        Returns:
            Chrome for the mode
        """
        chrome = chrome_for(mode)
        if mode != self._mode:
            self._mode = mode
            logger.info(f"Theme applied: {mode.value}")
            self.on_changed.emit(chrome)
        return chrome

    def toggle(self) -> ThemeMode:
        """Flip the mode, persist it, and apply it."""
        mode = self.mode.toggled()
        self._preferences.save(mode)
        self.apply(mode)
        return mode
