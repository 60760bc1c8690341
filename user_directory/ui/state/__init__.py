from user_directory.ui.state.directory_state import (
    DirectoryState,
    LoadStatus,
    begin_fetch,
    fetch_failed,
    fetch_succeeded,
    is_current,
    retry,
    select_city,
    select_company,
    set_search_term,
    set_theme,
    toggle_expand,
)

__all__ = [
    "DirectoryState",
    "LoadStatus",
    "begin_fetch",
    "fetch_failed",
    "fetch_succeeded",
    "is_current",
    "retry",
    "select_city",
    "select_company",
    "set_search_term",
    "set_theme",
    "toggle_expand",
]
