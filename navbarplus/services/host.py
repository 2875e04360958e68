"""
Host context: the facts the navbar renderer asks the surrounding site for.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from typing import Callable, List, Optional, Protocol, Sequence

from flask import current_app, request, session
from flask_login import current_user

from navbarplus.models.settings import AppSettings, TourDefinition
from navbarplus.services.strings import get_string

LANG_SESSION_KEY = "lang"


class HostContext(Protocol):
    def current_language(self) -> str: ...

    def is_logged_in(self) -> bool: ...

    def is_guest_user(self) -> bool: ...

    def current_page_tours(self) -> Sequence: ...

    def translate(self, key: str, component: str) -> str: ...

    def site_root(self) -> str: ...


@dataclass
class StaticHostContext:
    """Fixed answers, for previews, scripts and tests."""

    language: str = "en"
    logged_in: bool = False
    guest: bool = True
    tours: Sequence = ()
    root: str = "http://localhost:8080"
    strings: Optional[Callable[[str, str], str]] = field(default=None, repr=False)

    def current_language(self) -> str:
        return self.language

    def is_logged_in(self) -> bool:
        return self.logged_in

    def is_guest_user(self) -> bool:
        return self.guest

    def current_page_tours(self) -> Sequence:
        return list(self.tours)

    def translate(self, key: str, component: str) -> str:
        if self.strings is not None:
            return self.strings(key, component)
        return get_string(key, component, self.language)

    def site_root(self) -> str:
        return self.root


def tours_for_path(tours: Sequence[TourDefinition], path: str) -> List[TourDefinition]:
    return [tour for tour in tours if tour.enabled and fnmatchcase(path, tour.pathmatch)]


class FlaskHostContext:
    """Host context bound to the current Flask request and flask-login user."""

    def __init__(self, settings: AppSettings, tours: Sequence[TourDefinition] = ()):
        self.settings = settings
        self.tours = list(tours)

    @classmethod
    def from_app(cls) -> "FlaskHostContext":
        return cls(current_app.extensions["navbarplus.settings"], current_app.extensions["navbarplus.tours"])

    def current_language(self) -> str:
        installed = self.settings.installed_languages()

        lang = request.args.get("lang")
        if lang in installed:
            session[LANG_SESSION_KEY] = lang
            return lang

        lang = session.get(LANG_SESSION_KEY)
        if lang in installed:
            return lang

        user_lang = getattr(current_user, "lang", None)
        if user_lang in installed:
            return user_lang

        return request.accept_languages.best_match(installed) or self.settings.default_language

    def is_logged_in(self) -> bool:
        return bool(current_user and current_user.is_authenticated)

    def is_guest_user(self) -> bool:
        if not current_user or current_user.is_anonymous:
            return True
        return bool(getattr(current_user, "is_guest", False))

    def current_page_tours(self) -> List[TourDefinition]:
        return tours_for_path(self.tours, request.path)

    def translate(self, key: str, component: str) -> str:
        return get_string(key, component, self.current_language(), self.settings.lang_dir)

    def site_root(self) -> str:
        return self.settings.site_root
