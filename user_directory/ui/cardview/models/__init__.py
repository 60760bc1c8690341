from user_directory.ui.cardview.models.criteria import (
    ALL_CITIES_LABEL,
    ALL_COMPANIES_LABEL,
    FilterCriteria,
    FilterOptionSet,
)
from user_directory.ui.cardview.models.render_tree import (
    EMPTY_STATE_MESSAGE,
    CardNode,
    CardStyle,
    DetailRegionNode,
    ExpandIcon,
    PlaceholderNode,
    RenderTree,
    ToggleButtonNode,
)

__all__ = [
    "ALL_CITIES_LABEL",
    "ALL_COMPANIES_LABEL",
    "FilterCriteria",
    "FilterOptionSet",
    "EMPTY_STATE_MESSAGE",
    "CardNode",
    "CardStyle",
    "DetailRegionNode",
    "ExpandIcon",
    "PlaceholderNode",
    "RenderTree",
    "ToggleButtonNode",
]
