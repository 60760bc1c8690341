"""
Render tree nodes.

Plain data describing what the card grid must show. Every visual property
is computed here, so painters never read widget state back.
"""
from enum import Enum
from typing import Literal, Union
from pydantic import BaseModel, ConfigDict

from user_directory.core.models import ThemeMode


EMPTY_STATE_MESSAGE = "No users found matching your criteria."


class ExpandIcon(str, Enum):
    """Chevron shown next to the toggle label."""
    DOWN = "chevron-down"
    UP = "chevron-up"


class ToggleButtonNode(BaseModel):
    """View More / View Less button."""
    model_config = ConfigDict(frozen=True)

    label: str
    icon: ExpandIcon


class DetailRegionNode(BaseModel):
    """Collapsible region with the secondary contact fields."""
    model_config = ConfigDict(frozen=True)

    visible: bool
    phone: str
    website: str
    address: str


class CardStyle(BaseModel):
    """Colors and class list for one card, derived from the theme mode."""
    model_config = ConfigDict(frozen=True)

    classes: str
    background: str
    border: str
    title_color: str
    text_color: str
    muted_color: str
    avatar_background: str
    avatar_color: str
    button_background: str
    button_color: str


class CardNode(BaseModel):
    """One user card."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["card"] = "card"
    user_id: int
    initial: str
    name: str
    handle: str
    email: str
    company: str
    city: str
    details: DetailRegionNode
    toggle: ToggleButtonNode
    style: CardStyle

    @property
    def expanded(self) -> bool:
        return self.details.visible


class PlaceholderNode(BaseModel):
    """Empty-state message shown in place of cards."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["placeholder"] = "placeholder"
    message: str = EMPTY_STATE_MESSAGE
    color: str = "#6b7280"


RenderNode = Union[CardNode, PlaceholderNode]


class RenderTree(BaseModel):
    """Full card grid for one render pass."""
    model_config = ConfigDict(frozen=True)

    theme: ThemeMode
    nodes: tuple[RenderNode, ...] = ()

    @property
    def cards(self) -> list[CardNode]:
        return [node for node in self.nodes if isinstance(node, CardNode)]

    @property
    def placeholders(self) -> list[PlaceholderNode]:
        return [node for node in self.nodes if isinstance(node, PlaceholderNode)]

    def card(self, user_id: int) -> CardNode | None:
        for node in self.cards:
            if node.user_id == user_id:
                return node
        return None
