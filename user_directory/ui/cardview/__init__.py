"""
CardView Module - User card grid.

Pure-Python pieces (no widgets):
- FilterEngine / FilterIndexBuilder / ExpandState controllers
- Render tree models (CardNode, PlaceholderNode, RenderTree)
- RenderEngine (user_directory.ui.cardview.render_engine)

Widgets (PySide6):
- FlowLayout, UserCardWidget, CardGridWidget

Usage:
    from user_directory.ui.cardview import FilterEngine, FilterCriteria
    from user_directory.ui.cardview.render_engine import RenderEngine
"""
from user_directory.ui.cardview.models import (
    FilterCriteria,
    FilterOptionSet,
    CardNode,
    PlaceholderNode,
    RenderTree,
)
from user_directory.ui.cardview.controllers import (
    FilterEngine,
    FilterIndexBuilder,
    ExpandState,
)

__all__ = [
    "FilterCriteria",
    "FilterOptionSet",
    "CardNode",
    "PlaceholderNode",
    "RenderTree",
    "FilterEngine",
    "FilterIndexBuilder",
    "ExpandState",
]
