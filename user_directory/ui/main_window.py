"""
MainWindow - User directory window.

Paints DirectoryViewModel state: filter bar, theme toggle, loading and
error panels, and the card grid.
"""
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from loguru import logger
from qasync import asyncSlot

from user_directory.ui.cardview.card_grid_widget import CardGridWidget
from user_directory.ui.cardview.models.criteria import (
    ALL_CITIES_LABEL,
    ALL_COMPANIES_LABEL,
    FilterCriteria,
    FilterOptionSet,
)
from user_directory.ui.state.directory_state import LoadStatus
from user_directory.ui.theme import ThemeChrome
from user_directory.ui.viewmodels.directory_viewmodel import DirectoryViewModel


_TOGGLE_GLYPHS = {"moon": "☾", "sun": "☀"}

LOADING_MESSAGE = "Loading users..."
ERROR_MESSAGE = "Failed to load users. Please try again."


class MainWindow(QMainWindow):
    """Directory window bound to a DirectoryViewModel."""

    def __init__(self, viewmodel: DirectoryViewModel, title: str = "User Directory"):
        super().__init__()
        self.viewmodel = viewmodel
        self.setWindowTitle(title)
        self.resize(1100, 760)

        self._setup_ui(title)
        self._bind_viewmodel()

        self._on_chrome_changed(viewmodel.chrome)
        self._on_options_changed(viewmodel.options)
        self._on_status_changed(viewmodel.status)
        self.grid.set_tree(viewmodel.render_tree)

    def _setup_ui(self, title: str):
        # --- Header ---
        self.title_label = QLabel(title)
        self.title_label.setObjectName("title")

        self.theme_button = QPushButton()
        self.theme_button.setObjectName("themeToggle")
        self.theme_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.theme_button.clicked.connect(self.viewmodel.toggle_theme)

        header = QHBoxLayout()
        header.addWidget(self.title_label)
        header.addStretch(1)
        header.addWidget(self.theme_button)

        # --- Filters ---
        self.search_box = QLineEdit(placeholderText="Search by name or username...")
        self.search_box.textChanged.connect(self.viewmodel.set_search_term)

        self.city_combo = QComboBox()
        self.city_combo.currentIndexChanged.connect(self._on_city_selected)

        self.company_combo = QComboBox()
        self.company_combo.currentIndexChanged.connect(self._on_company_selected)

        filters = QHBoxLayout()
        filters.addWidget(self.search_box, 2)
        filters.addWidget(self.city_combo, 1)
        filters.addWidget(self.company_combo, 1)

        # --- Status panels ---
        self.loading_label = QLabel(LOADING_MESSAGE)
        self.loading_label.setObjectName("loading")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.error_panel = QFrame()
        self.error_panel.setObjectName("errorPanel")
        error_layout = QVBoxLayout(self.error_panel)
        self.error_label = QLabel(ERROR_MESSAGE)
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.retry_button = QPushButton("Retry")
        self.retry_button.setObjectName("retry")
        self.retry_button.clicked.connect(self._on_retry_clicked)
        error_layout.addWidget(self.error_label)
        error_layout.addWidget(self.retry_button, 0, Qt.AlignmentFlag.AlignCenter)

        # --- Grid ---
        self.grid = CardGridWidget()
        self.grid.toggle_requested.connect(self.viewmodel.toggle_expand)

        layout = QVBoxLayout()
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.addLayout(header)
        layout.addLayout(filters)
        layout.addWidget(self.loading_label)
        layout.addWidget(self.error_panel)
        layout.addWidget(self.grid, 1)

        container = QWidget()
        container.setObjectName("root")
        container.setLayout(layout)
        self.setCentralWidget(container)

    def _bind_viewmodel(self):
        vm = self.viewmodel
        vm.statusChanged.connect(self._on_status_changed)
        vm.optionsChanged.connect(self._on_options_changed)
        vm.criteriaChanged.connect(self._on_criteria_changed)
        vm.errorChanged.connect(self._on_error_changed)
        vm.gridChanged.connect(self.grid.set_tree)
        vm.cardChanged.connect(self.grid.update_card)
        vm.chromeChanged.connect(self._on_chrome_changed)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def _on_city_selected(self, index: int):
        if index >= 0:
            self.viewmodel.select_city(self.city_combo.itemData(index))

    def _on_company_selected(self, index: int):
        if index >= 0:
            self.viewmodel.select_company(self.company_combo.itemData(index))

    @asyncSlot()
    async def _on_retry_clicked(self):
        await self.viewmodel.retry()

    # ------------------------------------------------------------------
    # ViewModel -> View
    # ------------------------------------------------------------------
    def _on_status_changed(self, status: LoadStatus):
        self.loading_label.setVisible(status is LoadStatus.LOADING)
        self.error_panel.setVisible(status is LoadStatus.ERROR)
        self.grid.setVisible(status is LoadStatus.READY)

    def _on_options_changed(self, options: FilterOptionSet):
        criteria = self.viewmodel.criteria
        self._fill_combo(self.city_combo, ALL_CITIES_LABEL, options.cities, criteria.city)
        self._fill_combo(self.company_combo, ALL_COMPANIES_LABEL, options.companies, criteria.company)
        logger.debug(
            f"Filters populated: {len(options.cities)} cities, {len(options.companies)} companies"
        )

    def _on_criteria_changed(self, criteria: FilterCriteria):
        # Keep inputs in step when criteria change from outside (e.g. retry)
        if self.search_box.text() != criteria.search_term:
            self.search_box.blockSignals(True)
            self.search_box.setText(criteria.search_term)
            self.search_box.blockSignals(False)
        self._select_data(self.city_combo, criteria.city)
        self._select_data(self.company_combo, criteria.company)

    def _on_error_changed(self, error: Optional[str]):
        # Fixed message in the panel; the cause goes in the tooltip
        self.error_label.setToolTip(error or "")

    def _on_chrome_changed(self, chrome: ThemeChrome):
        glyph = _TOGGLE_GLYPHS.get(chrome.toggle_icon, "")
        self.theme_button.setText(f"{glyph}  {chrome.toggle_label}")
        self.setProperty("dark", chrome.root_dark)
        self.centralWidget().setStyleSheet(f"""
            QWidget#root {{
                background-color: {chrome.window_background};
            }}
            QLabel#title, QLabel#loading {{
                color: {chrome.text_color};
            }}
            QLabel#title {{
                font-size: 26px;
                font-weight: bold;
            }}
            QLineEdit, QComboBox {{
                background-color: {chrome.input_background};
                color: {chrome.text_color};
                border: 1px solid {chrome.input_border};
                border-radius: 8px;
                padding: 6px 10px;
            }}
            QPushButton#themeToggle {{
                background-color: {chrome.toggle_background};
                color: {chrome.toggle_color};
                border: none;
                border-radius: 8px;
                padding: 6px 14px;
            }}
            QFrame#errorPanel {{
                background-color: #fee2e2;
                border: 1px solid #f87171;
                border-radius: 8px;
            }}
            QFrame#errorPanel QLabel {{
                color: #b91c1c;
            }}
            QWidget#gridContainer {{
                background-color: {chrome.window_background};
            }}
        """)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _fill_combo(combo: QComboBox, all_label: str, values, selected):
        combo.blockSignals(True)
        combo.clear()
        combo.addItem(all_label, None)
        for value in values:
            combo.addItem(value, value)
        index = combo.findData(selected) if selected is not None else 0
        combo.setCurrentIndex(max(0, index))
        combo.blockSignals(False)

    @staticmethod
    def _select_data(combo: QComboBox, value):
        index = combo.findData(value) if value is not None else 0
        if index >= 0 and combo.currentIndex() != index:
            combo.blockSignals(True)
            combo.setCurrentIndex(index)
            combo.blockSignals(False)
