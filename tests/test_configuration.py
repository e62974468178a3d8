"""Mini README: Tests for tracker settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fintracker.configuration import DEFAULT_CATEGORIES, TrackerSettings


def test_defaults() -> None:
    settings = TrackerSettings()

    assert settings.categories == DEFAULT_CATEGORIES
    assert settings.export_filename == "transactions.json"
    assert settings.strict_remove is False


def test_categories_accept_comma_separated_string() -> None:
    settings = TrackerSettings(categories="Rent, Food ,Rent")

    assert settings.categories == ("Rent", "Food")


def test_categories_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FINTRACKER_CATEGORIES", '["Travel", "Fuel"]')

    assert TrackerSettings().categories == ("Travel", "Fuel")


@pytest.mark.parametrize("categories", [["Food", " "], []])
def test_invalid_categories_rejected(categories: list[str]) -> None:
    with pytest.raises(ValidationError):
        TrackerSettings(categories=categories)


def test_port_range_validated() -> None:
    with pytest.raises(ValidationError):
        TrackerSettings(interface_port=70000)
