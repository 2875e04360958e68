"""Shared pytest fixtures for the Navbar Plus test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from navbarplus.app import create_app
from navbarplus.models.settings import AppSettings, PACKAGE_DIR
from navbarplus.services.host import StaticHostContext

STRINGS = {
    ("resettouronpage", "tool_usertours"): "Reset user tour on this page",
    ("resetusertours_hint", "local_navbarplus"): "(hint)",
}

SITE_SETTINGS = """\
local_navbarplus:
  inserticonswithlinks: |
    fa-question-circle|/help|Help
    fa-envelope|mailto:support@example.com|Contact us|en
    fa-envelope|mailto:support@example.com|Kontakt|de
    fa-github|https://github.com|GitHub|en,de|true|external|github
  resetusertours: true
"""

SITE_TOURS = """\
tours:
  - name: Welcome tour
    pathmatch: /
"""


def _lookup(key: str, component: str) -> str:
    return STRINGS.get((key, component), f"[[{key}]]")


@pytest.fixture
def host() -> StaticHostContext:
    return StaticHostContext(language="en", root="https://lms.example.org", strings=_lookup)


@pytest.fixture
def tour_host() -> StaticHostContext:
    """A logged in user on a page that has a tour."""
    return StaticHostContext(
        language="en",
        logged_in=True,
        guest=False,
        tours=["Welcome tour"],
        root="https://lms.example.org",
        strings=_lookup,
    )


@pytest.fixture
def app_settings(tmp_path: Path) -> AppSettings:
    settings_path = tmp_path / "navbarplus.yaml"
    settings_path.write_text(SITE_SETTINGS, encoding="utf-8")
    tours_path = tmp_path / "tours.yaml"
    tours_path.write_text(SITE_TOURS, encoding="utf-8")
    return AppSettings(
        site_root="https://lms.example.org",
        secret_key="test-secret",
        session_cookie_secure=False,
        settings_path=settings_path,
        tours_path=tours_path,
        lang_dir=PACKAGE_DIR / "lang",
    )


@pytest.fixture
def app(app_settings: AppSettings):
    return create_app(app_settings, {"TESTING": True, "WTF_CSRF_ENABLED": False})


@pytest.fixture
def client(app):
    return app.test_client()
