"""
CardGridWidget - Scrollable grid that paints a RenderTree.
"""
from typing import Dict
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QLabel, QScrollArea, QWidget
from loguru import logger

from user_directory.ui.cardview.flow_layout import FlowLayout
from user_directory.ui.cardview.models.render_tree import CardNode, PlaceholderNode, RenderTree
from user_directory.ui.cardview.user_card_widget import UserCardWidget


class CardGridWidget(QScrollArea):
    """
    Card grid.

    set_tree() recreates every card; update_card() repaints one card in place.

    Signals:
        toggle_requested(user_id: int)
    """

    toggle_requested = Signal(int)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFrameShape(QFrame.Shape.NoFrame)

        self.container = QWidget()
        self.container.setObjectName("gridContainer")
        self.flow_layout = FlowLayout(
            self.container,
            card_width=UserCardWidget.CARD_WIDTH,
            margin=8,
            h_spacing=24,
            v_spacing=24,
        )
        self.setWidget(self.container)

        self._cards: Dict[int, UserCardWidget] = {}
        self.placeholder_label: QLabel | None = None

    @property
    def card_widgets(self) -> list[UserCardWidget]:
        return list(self._cards.values())

    def card_widget(self, user_id: int) -> UserCardWidget | None:
        return self._cards.get(user_id)

    def set_tree(self, tree: RenderTree):
        """Replace the whole grid."""
        self.flow_layout.clear()
        self._cards.clear()
        self.placeholder_label = None

        for node in tree.nodes:
            if isinstance(node, CardNode):
                widget = UserCardWidget(node, self.container)
                widget.toggle_requested.connect(self.toggle_requested.emit)
                self._cards[node.user_id] = widget
                self.flow_layout.addWidget(widget)
            elif isinstance(node, PlaceholderNode):
                widget = QLabel(node.message, self.container)
                widget.setObjectName("placeholder")
                widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
                widget.setStyleSheet(f"color: {node.color}; padding: 32px;")
                self.placeholder_label = widget
                self.flow_layout.add_row_widget(widget)

        self.container.adjustSize()
        logger.debug(f"Grid painted: {len(self._cards)} cards")

    def update_card(self, node: CardNode):
        """Repaint a single card's detail region."""
        widget = self._cards.get(node.user_id)
        if widget is None:
            logger.warning(f"No card widget for user {node.user_id}")
            return
        widget.apply_node(node)
        self.flow_layout.invalidate()
