"""
Small HTML building helpers for navbar fragments.

Attribute values are escaped with markupsafe, element contents are expected to
be ``Markup`` already (plain strings are escaped).
"""
from typing import Dict, Optional

from markupsafe import Markup, escape


def attributes(attrs: Optional[Dict[str, object]] = None) -> Markup:
    """Render ``attrs`` as ` key="value"` pairs, dropping ``None`` values."""
    if not attrs:
        return Markup("")
    parts = [
        Markup(' {}="{}"').format(name, value)
        for name, value in attrs.items()
        if value is not None
    ]
    return Markup("").join(parts)


def start_tag(tag: str, attrs: Optional[Dict[str, object]] = None) -> Markup:
    return Markup("<{}{}>").format(tag, attributes(attrs))


def end_tag(tag: str) -> Markup:
    return Markup("</{}>").format(tag)


def tag(name: str, contents="", attrs: Optional[Dict[str, object]] = None) -> Markup:
    return start_tag(name, attrs) + escape(contents) + end_tag(name)


def link(url, text, attrs: Optional[Dict[str, object]] = None) -> Markup:
    """An ``<a>`` element, ``href`` first followed by ``attrs`` in order."""
    href = url.out() if hasattr(url, "out") else url
    merged = {"href": str(href) if href is not None else None}
    merged.update(attrs or {})
    return tag("a", text, merged)


def icon(fa_name: Optional[str], label: Optional[str] = None) -> Markup:
    """Font Awesome icon element as used in the navbar."""
    attrs = {"class": f"icon fa {fa_name or ''} fa-fw"}
    if label is not None:
        attrs["aria-label"] = label
    return tag("i", "", attrs)
