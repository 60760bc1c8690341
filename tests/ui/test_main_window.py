"""
Tests for MainWindow wiring against a live DirectoryViewModel.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from user_directory.core.errors import TransportError
from user_directory.core.preferences import MemoryStore, ThemePreferenceStore
from user_directory.ui.cardview.models.render_tree import EMPTY_STATE_MESSAGE
from user_directory.ui.main_window import MainWindow
from user_directory.ui.theme import ThemeController
from user_directory.ui.viewmodels.directory_viewmodel import DirectoryViewModel


def make_window(client, store=None):
    theme = ThemeController(ThemePreferenceStore(store or MemoryStore()))
    vm = DirectoryViewModel(client, theme)
    vm.initialize()
    return MainWindow(vm, "Test Directory")


@pytest.fixture
def client(users):
    client = MagicMock()
    client.fetch_all = AsyncMock(return_value=users)
    return client


@pytest.mark.asyncio
async def test_initial_load_paints_cards_and_filters(qapp, client, users):
    window = make_window(client)

    await window.viewmodel.load()

    assert len(window.grid.card_widgets) == len(users)
    assert window.loading_label.isHidden()
    assert window.error_panel.isHidden()
    assert not window.grid.isHidden()

    cities = [window.city_combo.itemText(i) for i in range(window.city_combo.count())]
    assert cities == ["All Cities", "Gwenborough", "McKenziehaven", "South Elvis", "Wisokyburgh"]
    assert window.company_combo.itemText(0) == "All Companies"
    assert window.company_combo.count() == 5


@pytest.mark.asyncio
async def test_search_box_filters_cards(qapp, client):
    window = make_window(client)
    await window.viewmodel.load()

    window.search_box.setText("ant")

    assert [w.user_id for w in window.grid.card_widgets] == [2, 3]


@pytest.mark.asyncio
async def test_combo_selection_filters_cards(qapp, client):
    window = make_window(client)
    await window.viewmodel.load()

    window.city_combo.setCurrentIndex(window.city_combo.findData("Gwenborough"))
    assert [w.user_id for w in window.grid.card_widgets] == [1, 5]

    window.company_combo.setCurrentIndex(window.company_combo.findData("Deckow-Crist"))
    assert window.grid.card_widgets == []
    assert window.grid.placeholder_label is not None
    assert window.grid.placeholder_label.text() == EMPTY_STATE_MESSAGE

    window.city_combo.setCurrentIndex(0)
    assert [w.user_id for w in window.grid.card_widgets] == [2]


@pytest.mark.asyncio
async def test_card_toggle_repaints_in_place(qapp, client):
    window = make_window(client)
    await window.viewmodel.load()
    card = window.grid.card_widget(3)
    assert card.detail_widget.isHidden()
    assert card.toggle_button.text().startswith("View More")

    card.toggle_button.click()

    assert window.grid.card_widget(3) is card
    assert not card.detail_widget.isHidden()
    assert card.toggle_button.text().startswith("View Less")
    assert window.grid.card_widget(1).detail_widget.isHidden()


@pytest.mark.asyncio
async def test_theme_button_switches_chrome_and_cards(qapp, client):
    store = MemoryStore()
    window = make_window(client, store)
    await window.viewmodel.load()
    assert "Dark Mode" in window.theme_button.text()

    window.theme_button.click()

    assert "Light Mode" in window.theme_button.text()
    assert window.property("dark") is True
    assert store.get("darkMode") == "enabled"
    assert all(w.node.style.classes.startswith("bg-gray-800") for w in window.grid.card_widgets)


def test_persisted_dark_mode_applies_before_load(qapp, client):
    window = make_window(client, MemoryStore({"darkMode": "enabled"}))

    assert "Light Mode" in window.theme_button.text()
    client.fetch_all.assert_not_called()


@pytest.mark.asyncio
async def test_error_state_then_retry(qapp, users):
    client = MagicMock()
    client.fetch_all = AsyncMock(side_effect=[TransportError("offline"), users])
    window = make_window(client)

    await window.viewmodel.load()

    assert not window.error_panel.isHidden()
    assert window.grid.isHidden()
    assert window.loading_label.isHidden()

    window.search_box.setText("zzz")
    await window.viewmodel.retry()

    assert window.error_panel.isHidden()
    assert window.search_box.text() == ""
    assert len(window.grid.card_widgets) == len(users)


@pytest.mark.asyncio
async def test_refresh_resets_combo_when_city_disappears(qapp, users):
    remaining = [u for u in users if u.address.city != "Wisokyburgh"]
    client = MagicMock()
    client.fetch_all = AsyncMock(side_effect=[users, remaining])
    window = make_window(client)
    await window.viewmodel.load()
    window.city_combo.setCurrentIndex(window.city_combo.findData("Wisokyburgh"))

    await window.viewmodel.load()

    assert window.city_combo.currentIndex() == 0
    assert window.viewmodel.criteria.city is None
    assert [w.user_id for w in window.grid.card_widgets] == [u.id for u in remaining]


@pytest.mark.asyncio
async def test_error_cause_shown_as_tooltip(qapp, users):
    client = MagicMock()
    client.fetch_all = AsyncMock(side_effect=[TransportError("HTTP 503"), users])
    window = make_window(client)

    await window.viewmodel.load()
    assert window.error_label.text() == "Failed to load users. Please try again."
    assert window.error_label.toolTip() == "HTTP 503"

    await window.viewmodel.retry()
    assert window.error_label.toolTip() == ""
