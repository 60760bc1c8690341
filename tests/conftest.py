import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from user_directory.core.models import UserCollectionAdapter


def _user(id, name, username, city, company, street="Kulas Light", suite="Apt. 556"):
    return {
        "id": id,
        "name": name,
        "username": username,
        "email": f"{username.lower()}@example.com",
        "phone": f"1-770-736-80{id:02d}",
        "website": f"{username.lower()}.org",
        "address": {
            "street": street,
            "suite": suite,
            "city": city,
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "company": {
            "name": company,
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    }


@pytest.fixture
def sample_payload():
    """Directory payload shaped like the remote endpoint's response."""
    return [
        _user(1, "Leanne Graham", "Bret", "Gwenborough", "Romaguera-Crona"),
        _user(2, "Ervin Howell", "Antonette", "Wisokyburgh", "Deckow-Crist",
              street="Victor Plains", suite="Suite 879"),
        _user(3, "Clementine Bauch", "Samantha", "McKenziehaven", "Romaguera-Jacobson"),
        _user(4, "Patricia Lebsack", "Karianne", "South Elvis", "Robel-Corkery"),
        _user(5, "Chelsey Dietrich", "Kamren", "Gwenborough", "Romaguera-Crona"),
    ]


@pytest.fixture
def users(sample_payload):
    return UserCollectionAdapter.validate_python(sample_payload)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app
