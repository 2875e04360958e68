"""Tests for :mod:`navbarplus.models`."""

from __future__ import annotations

from pathlib import Path

import pytest

from navbarplus.models.item import ConfigLine, NavbarItem
from navbarplus.models.settings import AppSettings, NavbarPlusSettings, TourDefinition


def test_config_line_trims_line_and_fields() -> None:
    """Given padded fields When parsed Then every field is trimmed."""

    line = ConfigLine.parse("  fa-star | https://example.com |Star  | en ", number=4)

    assert line.number == 4
    assert line.raw_fields == ("fa-star", "https://example.com", "Star", "en")
    assert line.field_count == 4
    assert line.has_valid_field_count
    assert line.has_mandatory_fields


def test_config_line_blank_is_none() -> None:
    """Given a whitespace only line When parsed Then no line is returned."""

    assert ConfigLine.parse("  \t ") is None


@pytest.mark.parametrize(
    "text, valid_count, mandatory",
    [
        ("a|b", False, False),
        ("a|b|c", True, True),
        ("a|b|c|d|e|f|g", True, True),
        ("a|b|c|d|e|f|g|h", False, True),
        ("a| |c", True, False),
    ],
)
def test_config_line_checks(text: str, valid_count: bool, mandatory: bool) -> None:
    """Given lines of different shapes When checked Then count and mandatory checks agree."""

    line = ConfigLine.parse(text)

    assert line.has_valid_field_count is valid_count
    assert line.has_mandatory_fields is mandatory


def test_navbar_item_defaults_are_hidden() -> None:
    """Given a fresh item When inspected Then it is not renderable and uses the base classes."""

    item = NavbarItem()

    assert item.visible is False
    assert item.renderable is False
    assert item.css_classes == "localnavbarplus nav-link"
    assert item.dom_id is None


def test_navbar_item_visible_without_url_is_not_renderable() -> None:
    """Given a visible item without url When inspected Then it is not renderable."""

    assert NavbarItem(visible=True, title="x").renderable is False


def test_settings_accept_aliases_and_string_flags() -> None:
    """Given descriptive keys and a string flag When validated Then the stored names are filled."""

    settings = NavbarPlusSettings.model_validate({"link_items_text": "a|b|c", "reset_user_tours_enabled": "yes"})

    assert settings.inserticonswithlinks == "a|b|c"
    assert settings.link_items_text == "a|b|c"
    assert settings.resetusertours is True
    assert settings.reset_user_tours_enabled is True


def test_settings_join_list_of_lines() -> None:
    """Given the items as a YAML list When validated Then they become one line each."""

    settings = NavbarPlusSettings.model_validate({"inserticonswithlinks": ["a|b|c", "d|e|f"], "resetusertours": "0"})

    assert settings.inserticonswithlinks == "a|b|c\nd|e|f"
    assert settings.resetusertours is False


def test_tour_definition_enabled_by_default() -> None:
    """Given a tour without enabled key When validated Then it is enabled."""

    assert TourDefinition(name="t", pathmatch="/").enabled is True


def test_app_settings_from_env(tmp_path: Path) -> None:
    """Given NAVBARPLUS_ variables When loaded Then values are parsed and the site root is normalised."""

    environ = {
        "NAVBARPLUS_SITE_ROOT": "https://lms.example.org/",
        "NAVBARPLUS_LOG_DEBUG": "true",
        "NAVBARPLUS_TOURS_PATH": str(tmp_path / "tours.yaml"),
        "OTHER": "ignored",
    }

    settings = AppSettings.from_env(environ)

    assert settings.site_root == "https://lms.example.org"
    assert settings.log_debug is True
    assert settings.tours_path == tmp_path / "tours.yaml"


def test_installed_languages_lists_language_packs() -> None:
    """Given the bundled language packs When listed Then English and German are available."""

    assert {"en", "de"} <= set(AppSettings().installed_languages())
