import pytest
from pydantic import ValidationError

from user_directory.core.models import Address, Company, ThemeMode, UserRecord


class TestUserRecord:
    """Tests for UserRecord data model."""

    def test_parse_payload_record(self, sample_payload):
        user = UserRecord.model_validate(sample_payload[1])

        assert user.id == 2
        assert user.name == "Ervin Howell"
        assert user.username == "Antonette"
        assert user.address.city == "Wisokyburgh"
        assert user.address.street == "Victor Plains"
        assert user.address.suite == "Suite 879"
        assert user.company.name == "Deckow-Crist"
        assert user.company.catch_phrase == "Multi-layered client-server neural-net"

    def test_display_helpers(self, users):
        assert users[0].initial == "L"
        assert users[0].handle == "@Bret"

    def test_records_are_immutable(self, users):
        with pytest.raises(ValidationError):
            users[0].name = "Changed"

    def test_missing_required_field_rejected(self, sample_payload):
        del sample_payload[0]["address"]
        with pytest.raises(ValidationError):
            UserRecord.model_validate(sample_payload[0])

    def test_build_directly(self):
        user = UserRecord(
            id=9,
            name="Ada",
            username="ada",
            address=Address(street="S", suite="1", city="C"),
            company=Company(name="Co"),
        )
        assert user.email == ""
        assert user.address.zipcode is None


class TestThemeMode:
    def test_values(self):
        assert ThemeMode.LIGHT.value == "light"
        assert ThemeMode.DARK.value == "dark"

    def test_toggled(self):
        assert ThemeMode.LIGHT.toggled() is ThemeMode.DARK
        assert ThemeMode.DARK.toggled() is ThemeMode.LIGHT
        assert ThemeMode.DARK.is_dark
        assert not ThemeMode.LIGHT.is_dark
