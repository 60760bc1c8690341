"""
UserCardWidget - Paints one CardNode.

The widget never decides what to show: every label, color and the
detail-region visibility come from the node it is given.
"""
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QHBoxLayout, QWidget, QSizePolicy

from user_directory.ui.cardview.models.render_tree import CardNode, ExpandIcon


_ICON_GLYPHS = {
    ExpandIcon.DOWN: "▾",
    ExpandIcon.UP: "▴",
}


class UserCardWidget(QFrame):
    """
    Card widget for a single user.

    Signals:
        toggle_requested(user_id: int)
    """

    toggle_requested = Signal(int)

    CARD_WIDTH = 300

    def __init__(self, node: CardNode, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("userCard")
        self.setFixedWidth(self.CARD_WIDTH)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Preferred)
        self._node = node
        self._setup_ui()
        self.apply_node(node)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(8)

        # --- Header ---
        header = QHBoxLayout()
        header.setSpacing(12)
        self.avatar_label = QLabel()
        self.avatar_label.setObjectName("avatar")
        self.avatar_label.setFixedSize(48, 48)
        self.avatar_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        names = QVBoxLayout()
        names.setSpacing(2)
        self.name_label = QLabel()
        self.name_label.setObjectName("name")
        self.name_label.setWordWrap(True)
        self.handle_label = QLabel()
        self.handle_label.setObjectName("muted")
        names.addWidget(self.name_label)
        names.addWidget(self.handle_label)

        header.addWidget(self.avatar_label)
        header.addLayout(names, 1)
        layout.addLayout(header)

        # --- Summary ---
        self.email_label = QLabel()
        self.company_label = QLabel()
        self.city_label = QLabel()
        for label in (self.email_label, self.company_label, self.city_label):
            label.setObjectName("text")
            layout.addWidget(label)

        # --- Detail region ---
        self.detail_widget = QWidget()
        self.detail_widget.setObjectName("details")
        details = QVBoxLayout(self.detail_widget)
        details.setContentsMargins(0, 8, 0, 0)
        details.setSpacing(6)
        self.phone_label = QLabel()
        self.website_label = QLabel()
        self.address_label = QLabel()
        for label in (self.phone_label, self.website_label, self.address_label):
            label.setObjectName("text")
            details.addWidget(label)
        layout.addWidget(self.detail_widget)

        # --- Toggle ---
        self.toggle_button = QPushButton()
        self.toggle_button.setObjectName("toggle")
        self.toggle_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.toggle_button.clicked.connect(self._on_toggle_clicked)
        layout.addWidget(self.toggle_button, 0, Qt.AlignmentFlag.AlignLeft)

    @property
    def node(self) -> CardNode:
        return self._node

    @property
    def user_id(self) -> int:
        return self._node.user_id

    def apply_node(self, node: CardNode):
        """Paint node; only the parts that differ from the current node change."""
        previous = self._node
        self._node = node
        first_paint = previous is node

        if first_paint or previous.style != node.style:
            self._apply_style()
        if first_paint:
            self.avatar_label.setText(node.initial)
            self.name_label.setText(node.name)
            self.handle_label.setText(node.handle)
            self.email_label.setText(f"✉  {node.email}")
            self.company_label.setText(f"🏢  {node.company}")
            self.city_label.setText(f"📍  {node.city}")
            self.phone_label.setText(f"☎  {node.details.phone}")
            self.website_label.setText(f"🌐  {node.details.website}")
            self.address_label.setText(f"🏠  {node.details.address}")

        self.detail_widget.setVisible(node.details.visible)
        self.toggle_button.setText(f"{node.toggle.label} {_ICON_GLYPHS[node.toggle.icon]}")

    def _apply_style(self):
        style = self._node.style
        self.setStyleSheet(f"""
            QFrame#userCard {{
                background-color: {style.background};
                border: 1px solid {style.border};
                border-radius: 8px;
            }}
            QLabel#avatar {{
                background-color: {style.avatar_background};
                color: {style.avatar_color};
                border-radius: 24px;
                font-weight: bold;
                font-size: 18px;
            }}
            QLabel#name {{
                color: {style.title_color};
                font-size: 17px;
                font-weight: 600;
            }}
            QLabel#muted {{
                color: {style.muted_color};
            }}
            QLabel#text {{
                color: {style.text_color};
            }}
            QWidget#details {{
                border-top: 1px solid {style.border};
            }}
            QPushButton#toggle {{
                background-color: {style.button_background};
                color: {style.button_color};
                border: none;
                border-radius: 8px;
                padding: 6px 14px;
            }}
        """)

    def _on_toggle_clicked(self):
        self.toggle_requested.emit(self._node.user_id)
