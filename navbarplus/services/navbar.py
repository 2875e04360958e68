"""
Navbar Plus renderer.

Turns the ``inserticonswithlinks`` setting into icon links for the navbar and
optionally appends the "reset user tour on this page" link. A broken line only
removes its own item, rendering never fails.
"""
from __future__ import annotations

import re
from typing import Callable, List, Mapping, Optional, Tuple, Union

from markupsafe import Markup

from navbarplus.models.item import BASE_CLASSES, ID_PREFIX, ConfigLine, NavbarItem
from navbarplus.models.settings import NavbarPlusSettings
from navbarplus.services.host import HostContext
from navbarplus.utilities import LOGGER
from navbarplus.utilities import html_writer
from navbarplus.utilities.urls import InvalidUrlError, SiteUrl

FA_ICON_PATTERN = re.compile(r"^fa-[\w\d-]+$", re.ASCII)

RESET_TOUR_DOM_ID = ID_PREFIX + "resetusertour"
# the host's tour JS binds its click handler to this id
RESET_TOUR_LINK_ID = "resetpagetour"
RESET_TOUR_ICON = "fa-map"

SKIP_FIELD_COUNT = "field_count"
SKIP_MANDATORY_EMPTY = "mandatory_field_empty"
SKIP_INVALID_URL = "invalid_url"
SKIP_LANGUAGE = "language_mismatch"
SKIP_ERROR = "error"

FieldStep = Callable[[NavbarItem, str, HostContext], NavbarItem]
SettingsLike = Union[NavbarPlusSettings, Mapping, None]


# ---------- field steps, one per position ----------

def _icon(item: NavbarItem, value: str, host: HostContext) -> NavbarItem:
    if FA_ICON_PATTERN.match(value):
        return item.model_copy(update={"icon_fa_name": value, "visible": True})
    return item


def _url(item: NavbarItem, value: str, host: HostContext) -> NavbarItem:
    try:
        url = SiteUrl(value, host.site_root())
    except InvalidUrlError as exc:
        LOGGER.debug("navbarplus.invalid_url", url=value, reason=exc.reason)
        return item.model_copy(update={"url": None, "visible": False, "skip_reason": SKIP_INVALID_URL})
    return item.model_copy(update={"url": url, "visible": True})


def _title(item: NavbarItem, value: str, host: HostContext) -> NavbarItem:
    return item.model_copy(update={"title": value, "visible": True})


def _languages(item: NavbarItem, value: str, host: HostContext) -> NavbarItem:
    languages = [lang.strip() for lang in value.split(",")]
    if host.current_language() in languages:
        return item
    update = {"visible": False}
    if item.visible:
        update["skip_reason"] = SKIP_LANGUAGE
    return item.model_copy(update=update)


def _new_window(item: NavbarItem, value: str, host: HostContext) -> NavbarItem:
    # only for items still visible, so a language miss is not undone here
    if value == "true" and item.visible:
        return item.model_copy(update={"open_in_new_window": True})
    return item


def _additional_classes(item: NavbarItem, value: str, host: HostContext) -> NavbarItem:
    return item.model_copy(update={"additional_classes": value})


def _element_id(item: NavbarItem, value: str, host: HostContext) -> NavbarItem:
    return item.model_copy(update={"element_id": value})


FIELD_STEPS: Tuple[FieldStep, ...] = (
    _icon,
    _url,
    _title,
    _languages,
    _new_window,
    _additional_classes,
    _element_id,
)


# ---------- parsing ----------

def parse_item(line: ConfigLine, host: HostContext) -> Tuple[Optional[NavbarItem], Optional[str]]:
    """
    Run the field steps over one line.

    Returns:
        ``(item, None)`` when the item should be shown, otherwise ``(item_or_None, reason)``.
    """
    if not line.has_valid_field_count:
        return None, SKIP_FIELD_COUNT
    if not line.has_mandatory_fields:
        return None, SKIP_MANDATORY_EMPTY

    item = NavbarItem()
    for step, value in zip(FIELD_STEPS, line.raw_fields):
        if value:
            item = step(item, value, host)

    if item.renderable:
        return item, None
    return item, item.skip_reason or SKIP_INVALID_URL


def iter_lines(text: Optional[str]):
    for number, raw in enumerate((text or "").split("\n"), start=1):
        line = ConfigLine.parse(raw, number)
        if line is not None:
            yield line


def parse_items(text: Optional[str], host: HostContext) -> List[NavbarItem]:
    """Visible items of the setting, in configuration order."""
    items = []
    for line in iter_lines(text):
        try:
            item, reason = parse_item(line, host)
        except Exception:
            LOGGER.warning("navbarplus.line_failed", line=line.number, exc_info=True)
            continue
        if reason is not None:
            LOGGER.debug("navbarplus.line_skipped", line=line.number, reason=reason)
            continue
        items.append(item)
    return items


# ---------- rendering ----------

def render_item(item: NavbarItem) -> Markup:
    # defined here because the title is needed for the aria label
    icon = html_writer.icon(item.icon_fa_name, item.title)

    link_attributes = {"title": item.title}
    if item.open_in_new_window:
        link_attributes["target"] = "_blank"
        link_attributes["rel"] = "noopener noreferrer"

    div_attributes = {"class": item.css_classes}
    if item.dom_id:
        div_attributes["id"] = item.dom_id

    return (
        html_writer.start_tag("div", div_attributes)
        + html_writer.link(item.url, icon, link_attributes)
        + html_writer.end_tag("div")
    )


def _has_current_tour(host: HostContext) -> bool:
    # "logged in at all, or not the guest": kept exactly as the site checks it
    if not (host.is_logged_in() or not host.is_guest_user()):
        return False
    return bool(host.current_page_tours())


def render_reset_tour_link(host: HostContext) -> Markup:
    reset_string = host.translate("resettouronpage", "tool_usertours")
    reset_hint = host.translate("resetusertours_hint", "local_navbarplus")
    attributes = {
        "alt": reset_string,
        "title": f"{reset_string} {reset_hint}",
        "id": RESET_TOUR_LINK_ID,
    }
    return (
        html_writer.start_tag("div", {"class": BASE_CLASSES, "id": RESET_TOUR_DOM_ID})
        + html_writer.link("#", html_writer.icon(RESET_TOUR_ICON), attributes)
        + html_writer.end_tag("div")
    )


def _coerce_settings(settings: SettingsLike) -> NavbarPlusSettings:
    if isinstance(settings, NavbarPlusSettings):
        return settings
    return NavbarPlusSettings.model_validate(dict(settings or {}))


def render_fragments(settings: SettingsLike, host: HostContext) -> List[Markup]:
    """One HTML fragment per visible item, then the reset tour link if it applies."""
    try:
        settings = _coerce_settings(settings)
    except ValueError:
        LOGGER.warning("navbarplus.invalid_settings", exc_info=True)
        return []

    fragments = []
    for item in parse_items(settings.inserticonswithlinks, host):
        fragments.append(render_item(item))

    if settings.resetusertours:
        try:
            if _has_current_tour(host):
                fragments.append(render_reset_tour_link(host))
        except Exception:
            LOGGER.warning("navbarplus.tour_lookup_failed", exc_info=True)

    return fragments


def render(settings: SettingsLike, host: HostContext) -> Markup:
    """HTML to add to the navbar, possibly empty."""
    return Markup("").join(render_fragments(settings, host))


# ---------- diagnostics for the admin preview ----------

class LineReport:
    """Outcome of one configuration line, ``html`` is the item markup when it is visible."""

    def __init__(self, number: int, raw: str, visible: bool, reason: Optional[str] = None, html: Markup = Markup("")):
        self.number = number
        self.raw = raw
        self.visible = visible
        self.reason = reason
        self.html = html

    def __repr__(self) -> str:
        return f"LineReport({self.number}, visible={self.visible}, reason={self.reason!r})"


def explain(text: Optional[str], host: HostContext) -> List[LineReport]:
    reports = []
    for line in iter_lines(text):
        try:
            item, reason = parse_item(line, host)
        except Exception:
            LOGGER.warning("navbarplus.line_failed", line=line.number, exc_info=True)
            item, reason = None, SKIP_ERROR
        html = render_item(item) if reason is None else Markup("")
        reports.append(LineReport(line.number, line.text, reason is None, reason, html))
    return reports
