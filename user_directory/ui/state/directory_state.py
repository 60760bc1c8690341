"""
Directory State - Explicit application state and its reactions.

Every reaction is a pure function taking the current DirectoryState and
returning the next one. The view model owns the only live instance.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence

from loguru import logger

from user_directory.core.models import ThemeMode, UserRecord
from user_directory.ui.cardview.controllers.expand_state import ExpandState
from user_directory.ui.cardview.controllers.filter_engine import FilterEngine
from user_directory.ui.cardview.controllers.option_index import FilterIndexBuilder
from user_directory.ui.cardview.models.criteria import FilterCriteria, FilterOptionSet


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


_filter_engine = FilterEngine()
_index_builder = FilterIndexBuilder()


@dataclass(frozen=True)
class DirectoryState:
    """
    Snapshot of everything the window shows.

    Invariants:
    - visible == FilterEngine.apply(users, criteria)
    - options is derived from users, never from criteria
    - expanded is reset whenever visible is recomputed
    """
    status: LoadStatus = LoadStatus.IDLE
    users: tuple[UserRecord, ...] = ()
    options: FilterOptionSet = field(default_factory=FilterOptionSet)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    visible: tuple[UserRecord, ...] = ()
    expanded: ExpandState = field(default_factory=ExpandState)
    theme: ThemeMode = ThemeMode.LIGHT
    request_id: int = 0
    error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def grid_visible(self) -> bool:
        """Card grid is hidden while loading and in the error state."""
        return self.status is LoadStatus.READY


def _refilter(state: DirectoryState, criteria: FilterCriteria) -> DirectoryState:
    visible = tuple(_filter_engine.apply(state.users, criteria))
    return replace(state, criteria=criteria, visible=visible, expanded=ExpandState())


# --- Fetch ---

def begin_fetch(state: DirectoryState) -> DirectoryState:
    """Issue a new request id and show the loading state."""
    request_id = state.request_id + 1
    logger.debug(f"Fetch #{request_id} started")
    return replace(state, status=LoadStatus.LOADING, request_id=request_id, error=None)


def is_current(state: DirectoryState, request_id: int) -> bool:
    """Check that a completing request is the latest one issued."""
    return request_id == state.request_id


def fetch_succeeded(
    state: DirectoryState,
    request_id: int,
    users: Sequence[UserRecord],
) -> DirectoryState:
    """
    Replace the collection wholesale and recompute options and view.

    Stale completions (an older request id) leave the state untouched.
    """
    if not is_current(state, request_id):
        logger.warning(f"Discarding stale response for fetch #{request_id}")
        return state

    options = _index_builder.build_options(users)
    loaded = replace(
        state,
        status=LoadStatus.READY,
        users=tuple(users),
        options=options,
        error=None,
    )
    return _refilter(loaded, _criteria_within(state.criteria, options))


def _criteria_within(criteria: FilterCriteria, options: FilterOptionSet) -> FilterCriteria:
    """Drop a city/company selection the new options no longer offer."""
    update = {}
    if criteria.city is not None and criteria.city not in options.cities:
        update["city"] = None
    if criteria.company is not None and criteria.company not in options.companies:
        update["company"] = None
    if update:
        logger.info(f"Selection no longer offered, reset to all: {sorted(update)}")
        return criteria.model_copy(update=update)
    return criteria


def fetch_failed(state: DirectoryState, request_id: int, error: Exception) -> DirectoryState:
    """
    Move to the error state; no partial data is kept.

    Stale failures leave the state untouched.
    """
    if not is_current(state, request_id):
        logger.warning(f"Discarding stale failure for fetch #{request_id}: {error}")
        return state

    return replace(
        state,
        status=LoadStatus.ERROR,
        users=(),
        options=FilterOptionSet(),
        visible=(),
        expanded=ExpandState(),
        error=str(error),
    )


def retry(state: DirectoryState) -> DirectoryState:
    """Reset criteria to defaults and begin a new fetch."""
    return begin_fetch(replace(state, criteria=FilterCriteria()))


# --- Criteria ---

def set_search_term(state: DirectoryState, term: str) -> DirectoryState:
    return _refilter(state, state.criteria.model_copy(update={"search_term": term}))


def select_city(state: DirectoryState, city: Optional[str]) -> DirectoryState:
    """Select a city; None selects all cities."""
    return _refilter(state, state.criteria.model_copy(update={"city": city}))


def select_company(state: DirectoryState, company: Optional[str]) -> DirectoryState:
    """Select a company; None selects all companies."""
    return _refilter(state, state.criteria.model_copy(update={"company": company}))


# --- Cards / Theme ---

def toggle_expand(state: DirectoryState, user_id: int) -> DirectoryState:
    return replace(state, expanded=state.expanded.toggled(user_id))


def set_theme(state: DirectoryState, mode: ThemeMode) -> DirectoryState:
    """Change theme; the visible set and expand state are kept."""
    return replace(state, theme=mode)
