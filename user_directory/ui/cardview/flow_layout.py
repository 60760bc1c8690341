"""
FlowLayout - Column grid for fixed-width user cards.

Cards fill as many equal columns as the width allows and wrap row by row.
Row widgets (the empty-state message) take a whole row of their own.
"""
from dataclasses import dataclass

from PySide6.QtCore import QPoint, QRect, QSize, Qt
from PySide6.QtWidgets import QLayout, QLayoutItem, QWidget, QWidgetItem


@dataclass
class _Entry:
    item: QLayoutItem
    full_row: bool = False


class FlowLayout(QLayout):
    """
    Grid layout that places cards in columns and wraps when a row is full.

    Features:
    - Column count follows the available width (at least one column)
    - Every card gets the same width, so columns line up across rows
    - Row widgets span the full width and close the current row
    - Hidden widgets take no space

    Example:
        layout = FlowLayout(container, card_width=300, margin=8, h_spacing=24)
        for card in cards:
            layout.addWidget(card)
        layout.add_row_widget(QLabel("No users found matching your criteria."))
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        card_width: int = 300,
        margin: int = 0,
        h_spacing: int = 8,
        v_spacing: int = 8
    ):
        """
        Initialize FlowLayout.

        Args:
            parent: Parent widget
            card_width: Width of every column
            margin: Margin around content
            h_spacing: Horizontal spacing between columns
            v_spacing: Vertical spacing between rows
        """
        super().__init__(parent)
        self._entries: list[_Entry] = []
        self._card_width = card_width
        self._h_spacing = h_spacing
        self._v_spacing = v_spacing
        self.setContentsMargins(margin, margin, margin, margin)

    @property
    def card_width(self) -> int:
        return self._card_width

    def add_row_widget(self, widget: QWidget):
        """Add a widget that occupies a full row."""
        self.addChildWidget(widget)
        self._entries.append(_Entry(QWidgetItem(widget), full_row=True))
        self.invalidate()

    def columns_for(self, width: int) -> int:
        """
        Number of card columns that fit in a width.

        Args:
            width: Total width including margins

        Returns:
            Column count, never less than 1
        """
        margins = self.contentsMargins()
        available = width - margins.left() - margins.right()
        return max(1, (available + self._h_spacing) // (self._card_width + self._h_spacing))

    # --- QLayout interface ---

    def addItem(self, item: QLayoutItem):
        self._entries.append(_Entry(item))

    def count(self) -> int:
        return len(self._entries)

    def itemAt(self, index: int) -> QLayoutItem | None:
        if 0 <= index < len(self._entries):
            return self._entries[index].item
        return None

    def takeAt(self, index: int) -> QLayoutItem | None:
        if 0 <= index < len(self._entries):
            return self._entries.pop(index).item
        return None

    def expandingDirections(self) -> Qt.Orientation:
        return Qt.Orientation(0)

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return self._do_layout(QRect(0, 0, width, 0), test_only=True)

    def setGeometry(self, rect: QRect):
        super().setGeometry(rect)
        self._do_layout(rect, test_only=False)

    def sizeHint(self) -> QSize:
        return self.minimumSize()

    def minimumSize(self) -> QSize:
        """One column wide, as tall as the tallest single item."""
        size = QSize(self._card_width, 0)
        for entry in self._entries:
            size = size.expandedTo(QSize(0, entry.item.minimumSize().height()))
        margins = self.contentsMargins()
        size += QSize(
            margins.left() + margins.right(),
            margins.top() + margins.bottom()
        )
        return size

    @staticmethod
    def _height_at(item: QLayoutItem, width: int) -> int:
        if item.hasHeightForWidth():
            return item.heightForWidth(width)
        return item.sizeHint().height()

    def _do_layout(self, rect: QRect, test_only: bool) -> int:
        """
        Perform layout calculation.

        Args:
            rect: Available rectangle
            test_only: If True, only calculate without moving widgets

        Returns:
            Total height used
        """
        margins = self.contentsMargins()
        area = rect.adjusted(
            margins.left(), margins.top(),
            -margins.right(), -margins.bottom()
        )
        columns = self.columns_for(rect.width())

        y = area.y()
        column = 0
        row_height = 0

        for entry in self._entries:
            widget = entry.item.widget()
            if widget is not None and widget.isHidden():
                continue

            # Close the open row before a row widget or when it is full
            if column and (entry.full_row or column >= columns):
                y += row_height + self._v_spacing
                column = 0
                row_height = 0

            if entry.full_row:
                width = max(area.width(), 0)
                height = self._height_at(entry.item, width)
                if not test_only:
                    entry.item.setGeometry(QRect(area.x(), y, width, height))
                row_height = height
                column = columns
                continue

            height = self._height_at(entry.item, self._card_width)
            if not test_only:
                x = area.x() + column * (self._card_width + self._h_spacing)
                entry.item.setGeometry(QRect(QPoint(x, y), QSize(self._card_width, height)))
            row_height = max(row_height, height)
            column += 1

        return y + row_height - rect.y() + margins.bottom()

    def clear(self):
        """Remove all items from layout."""
        while self.count():
            item = self.takeAt(0)
            if item:
                widget = item.widget()
                if widget:
                    widget.setParent(None)
                    widget.deleteLater()
