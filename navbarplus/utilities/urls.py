"""
URL values for navbar links.

A ``SiteUrl`` is one of:

- absolute, anything with a scheme pydantic's ``AnyUrl`` accepts,
- an anchor on the current page (``#top``), used as is,
- relative to the site (``/course/view.php`` or ``course/view.php``),
  resolved against the site root before validation.

Values with whitespace and script-like schemes are rejected.
"""
import re
from typing import Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

_URL_ADAPTER = TypeAdapter(AnyUrl)
SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):")
BLOCKED_SCHEMES = {"javascript", "vbscript", "data"}


class InvalidUrlError(ValueError):
    """Raised when a raw string cannot be turned into a URL."""

    def __init__(self, raw: str, reason: Optional[str] = None):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid URL {raw!r}" + (f": {reason}" if reason else ""))


class SiteUrl:
    """A validated link target. ``out()`` returns the value used for ``href``."""

    __slots__ = ("raw", "_href")

    def __init__(self, raw: str, site_root: str = ""):
        candidate = (raw or "").strip()
        if not candidate:
            raise InvalidUrlError(raw, "empty")
        if any(ch.isspace() for ch in candidate):
            raise InvalidUrlError(raw, "contains whitespace")

        self.raw = raw
        if candidate.startswith("#"):
            self._href = candidate
            return

        scheme = SCHEME_PATTERN.match(candidate)
        if scheme and scheme.group(1).lower() in BLOCKED_SCHEMES:
            raise InvalidUrlError(raw, f"scheme {scheme.group(1)!r} not allowed")

        # site relative, "//host/path" is left to the validator
        if not scheme and not candidate.startswith("//"):
            if not site_root:
                raise InvalidUrlError(raw, "relative URL without site root")
            candidate = site_root.rstrip("/") + "/" + candidate.lstrip("/")

        try:
            _URL_ADAPTER.validate_python(candidate)
        except ValidationError as exc:
            raise InvalidUrlError(raw, exc.errors()[0].get("msg")) from exc

        # keep the admin's spelling, pydantic would append a trailing slash
        self._href = candidate

    def out(self) -> str:
        return self._href

    def __str__(self) -> str:
        return self._href

    def __repr__(self) -> str:
        return f"SiteUrl({self._href!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, SiteUrl):
            return self._href == other._href
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._href)
