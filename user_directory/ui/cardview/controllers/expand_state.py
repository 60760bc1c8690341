"""
ExpandState - Per-card expand/collapse tracking.

Each card is either Collapsed (initial) or Expanded; toggle flips it.
"""
from typing import Dict, Mapping, Optional
from loguru import logger


class ExpandState:
    """
    Immutable mapping from user id to expanded flag.

    Ids that were never toggled read as collapsed. A new rendered
    collection starts from an empty state, so every card is collapsed
    after a refilter.

    Example:
        state = ExpandState()
        state = state.toggled(3)
        state.is_expanded(3)  # True
    """

    def __init__(self, expanded: Optional[Mapping[int, bool]] = None):
        self._expanded: Dict[int, bool] = {
            user_id: True for user_id, flag in (expanded or {}).items() if flag
        }

    def is_expanded(self, user_id: int) -> bool:
        """Check if card is expanded."""
        return self._expanded.get(user_id, False)

    def toggled(self, user_id: int) -> "ExpandState":
        """Return a copy with the card's state flipped."""
        expanded = dict(self._expanded)
        if expanded.pop(user_id, False):
            logger.debug(f"Card {user_id} collapsed")
        else:
            expanded[user_id] = True
            logger.debug(f"Card {user_id} expanded")
        return ExpandState(expanded)

    @property
    def expanded_ids(self) -> list[int]:
        """Ids of expanded cards."""
        return sorted(self._expanded)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpandState):
            return NotImplemented
        return self._expanded == other._expanded

    def __hash__(self) -> int:
        return hash(frozenset(self._expanded))

    def __repr__(self) -> str:
        return f"ExpandState(expanded={self.expanded_ids})"
