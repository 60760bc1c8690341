"""
DirectoryViewModel - MVVM ViewModel for the user directory window.

Owns the single DirectoryState and turns user input and fetch completions
into reactions. Widgets only listen to its signals.
"""
from typing import Optional, Protocol

from PySide6.QtCore import QObject, Signal
from loguru import logger

from user_directory.core.errors import DirectoryError
from user_directory.core.models import UserRecord
from user_directory.ui.cardview.models.criteria import FilterCriteria, FilterOptionSet
from user_directory.ui.cardview.models.render_tree import RenderTree
from user_directory.ui.cardview.render_engine import RenderEngine
from user_directory.ui.mvvm import BindableBase, BindableProperty
from user_directory.ui.state import directory_state as reactions
from user_directory.ui.state.directory_state import DirectoryState, LoadStatus
from user_directory.ui.theme import ThemeChrome, ThemeController


class UserSource(Protocol):
    async def fetch_all(self) -> list[UserRecord]:
        ...


class DirectoryViewModel(BindableBase):
    """
    ViewModel for the directory window.

    Properties (Bindable):
        status: LoadStatus (idle/loading/ready/error)
        options: FilterOptionSet for the two dropdowns
        criteria: Active FilterCriteria
        error: Last error message, None when not in the error state

    Signals:
        gridChanged(RenderTree): full grid repaint
        cardChanged(CardNode): repaint of one card's detail region
        chromeChanged(ThemeChrome): theme applied to window chrome

    Example:
        vm = DirectoryViewModel(client, theme_controller)
        vm.initialize()
        await vm.load()
        vm.set_search_term("ant")
    """

    statusChanged = Signal(object)
    optionsChanged = Signal(object)
    criteriaChanged = Signal(object)
    errorChanged = Signal(object)
    gridChanged = Signal(object)
    cardChanged = Signal(object)
    chromeChanged = Signal(object)

    status = BindableProperty(default=LoadStatus.IDLE)
    options = BindableProperty(default=FilterOptionSet())
    criteria = BindableProperty(default=FilterCriteria())
    error = BindableProperty(default=None)

    def __init__(
        self,
        client: UserSource,
        theme_controller: ThemeController,
        render_engine: Optional[RenderEngine] = None,
        parent: Optional[QObject] = None,
    ):
        """
        Initialize DirectoryViewModel.

        Args:
            client: Source of the user collection
            theme_controller: Applies/persists the theme mode
            render_engine: Render tree builder
        """
        super().__init__(parent)
        self._client = client
        self._theme = theme_controller
        self._render_engine = render_engine or RenderEngine()
        self._state = DirectoryState(theme=theme_controller.mode)
        self._tree: RenderTree = self._render_engine.render((), self._state.expanded, self._state.theme)

        self._theme.on_changed.connect(self._on_theme_applied)

    # --- State ---

    @property
    def state(self) -> DirectoryState:
        return self._state

    @property
    def render_tree(self) -> RenderTree:
        """Last rendered grid."""
        return self._tree

    @property
    def chrome(self) -> ThemeChrome:
        return self._theme.chrome

    def initialize(self):
        """Apply the persisted theme before the first paint."""
        self._theme.restore()
        self.chromeChanged.emit(self._theme.chrome)

    def _commit(self, state: DirectoryState, repaint: bool = False):
        """Publish a new state; repaint the whole grid when asked."""
        if state is self._state:
            return
        self._state = state
        self.status = state.status
        self.options = state.options
        self.criteria = state.criteria
        self.error = state.error
        if repaint:
            self._repaint()

    def _repaint(self):
        self._tree = self._render_engine.render(
            self._state.visible, self._state.expanded, self._state.theme
        )
        self.gridChanged.emit(self._tree)

    # --- Fetch ---

    async def load(self):
        """Fetch the directory and render it."""
        await self._run_fetch(reactions.begin_fetch(self._state))

    async def retry(self):
        """Clear the filters and fetch again."""
        await self._run_fetch(reactions.retry(self._state))

    async def _run_fetch(self, started: DirectoryState):
        self._commit(started)
        request_id = started.request_id
        try:
            users = await self._client.fetch_all()
        except DirectoryError as e:
            logger.error(f"Error fetching users: {e}")
            self._commit(reactions.fetch_failed(self._state, request_id, e), repaint=True)
            return
        self._commit(reactions.fetch_succeeded(self._state, request_id, users), repaint=True)

    # --- Criteria ---

    def set_search_term(self, term: str):
        self._commit(reactions.set_search_term(self._state, term), repaint=True)

    def select_city(self, city: Optional[str]):
        """Select a city; None means all cities."""
        self._commit(reactions.select_city(self._state, city), repaint=True)

    def select_company(self, company: Optional[str]):
        """Select a company; None means all companies."""
        self._commit(reactions.select_company(self._state, company), repaint=True)

    # --- Cards ---

    def toggle_expand(self, user_id: int):
        """Flip one card and repaint only that card."""
        user = next((u for u in self._state.visible if u.id == user_id), None)
        if user is None:
            logger.warning(f"Toggle ignored: user {user_id} is not rendered")
            return

        self._commit(reactions.toggle_expand(self._state, user_id))
        node = self._render_engine.render_card(
            user, self._state.expanded.is_expanded(user_id), self._state.theme
        )
        self._tree = self._tree.model_copy(update={
            "nodes": tuple(node if getattr(n, "user_id", None) == user_id else n
                           for n in self._tree.nodes)
        })
        self.cardChanged.emit(node)

    # --- Theme ---

    def toggle_theme(self):
        self._theme.toggle()

    def _on_theme_applied(self, chrome: ThemeChrome):
        self._commit(reactions.set_theme(self._state, chrome.mode), repaint=True)
        self.chromeChanged.emit(chrome)
