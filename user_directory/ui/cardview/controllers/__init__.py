"""
CardView Controllers Package.
"""
from user_directory.ui.cardview.controllers.filter_engine import FilterEngine
from user_directory.ui.cardview.controllers.option_index import FilterIndexBuilder
from user_directory.ui.cardview.controllers.expand_state import ExpandState

__all__ = ["FilterEngine", "FilterIndexBuilder", "ExpandState"]
