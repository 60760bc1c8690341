from loguru import logger
from typing import Callable, List


class Signal:
    """
    Synchronous notification for plain Python objects.

    ConfigManager and ThemeController publish through it so they stay
    usable without a QApplication. A failing subscriber is logged and the
    remaining subscribers still run.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._callbacks: List[Callable] = []

    def connect(self, callback: Callable):
        """Subscribe; connecting the same callback twice is a no-op."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def disconnect(self, callback: Callable):
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, *args, **kwargs):
        """Call every subscriber in connection order."""
        # Copy: a subscriber may disconnect itself while being notified
        for callback in list(self._callbacks):
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"{self.name}: subscriber {callback!r} failed: {e}")
