"""
RenderEngine - Maps filtered users to a render tree.

Pure functions of (filtered collection, expand state, theme mode).
"""
from typing import Sequence, TYPE_CHECKING
from loguru import logger

from user_directory.core.models import ThemeMode
from user_directory.ui.cardview.controllers.expand_state import ExpandState
from user_directory.ui.cardview.models.render_tree import (
    CardNode,
    DetailRegionNode,
    ExpandIcon,
    PlaceholderNode,
    RenderTree,
    ToggleButtonNode,
)
from user_directory.ui.theme import card_style_for

if TYPE_CHECKING:
    from user_directory.core.models import UserRecord


VIEW_MORE_LABEL = "View More"
VIEW_LESS_LABEL = "View Less"


def toggle_button_for(expanded: bool) -> ToggleButtonNode:
    """Button label/icon for a card state."""
    if expanded:
        return ToggleButtonNode(label=VIEW_LESS_LABEL, icon=ExpandIcon.UP)
    return ToggleButtonNode(label=VIEW_MORE_LABEL, icon=ExpandIcon.DOWN)


class RenderEngine:
    """
    Builds render trees for the card grid.

    Example:
        engine = RenderEngine()
        tree = engine.render(visible_users, ExpandState(), ThemeMode.LIGHT)
        card = engine.render_card(user, expanded=True, theme=ThemeMode.LIGHT)
    """

    def render(
        self,
        users: Sequence['UserRecord'],
        expand_state: ExpandState,
        theme: ThemeMode,
    ) -> RenderTree:
        """
        Render the whole grid.

        Args:
            users: Filtered users, in collection order
            expand_state: Per-card expand flags
            theme: Active theme mode

        Returns:
            RenderTree with one card per user, or a single placeholder
        """
        if not users:
            logger.debug("Render: empty state")
            return RenderTree(theme=theme, nodes=(PlaceholderNode(),))

        nodes = tuple(
            self.render_card(user, expand_state.is_expanded(user.id), theme)
            for user in users
        )
        logger.debug(f"Render: {len(nodes)} cards ({theme.value})")
        return RenderTree(theme=theme, nodes=nodes)

    def render_card(self, user: 'UserRecord', expanded: bool, theme: ThemeMode) -> CardNode:
        """Render a single card; used for the detail-only repaint on toggle."""
        return CardNode(
            user_id=user.id,
            initial=user.initial,
            name=user.name,
            handle=user.handle,
            email=user.email,
            company=user.company.name,
            city=user.address.city,
            details=DetailRegionNode(
                visible=expanded,
                phone=user.phone,
                website=user.website,
                address=f"{user.address.street}, {user.address.suite}",
            ),
            toggle=toggle_button_for(expanded),
            style=card_style_for(theme),
        )
