from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TRUTHY = {"1", "true", "yes", "on"}


def _as_flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return bool(value)


class NavbarPlusSettings(BaseModel):
    """
    Plugin settings as the host stores them.
    Field names follow the stored setting keys, the descriptive names are accepted as aliases.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    inserticonswithlinks: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("inserticonswithlinks", "link_items_text"),
    )
    resetusertours: bool = Field(
        default=False,
        validation_alias=AliasChoices("resetusertours", "reset_user_tours_enabled"),
    )

    @field_validator("inserticonswithlinks", mode="before")
    @classmethod
    def normalize_text(cls, value):
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            # YAML lists are accepted as one line per entry
            return "\n".join(str(line) for line in value)
        return str(value)

    @field_validator("resetusertours", mode="before")
    @classmethod
    def normalize_flag(cls, value):
        if value is None:
            return False
        return _as_flag(value)

    @property
    def link_items_text(self) -> Optional[str]:
        return self.inserticonswithlinks

    @property
    def reset_user_tours_enabled(self) -> bool:
        return self.resetusertours


class TourDefinition(BaseModel):
    """A user tour registered for pages whose path matches ``pathmatch``."""
    model_config = ConfigDict(extra="ignore")

    name: str
    pathmatch: str
    enabled: bool = True

    @field_validator("enabled", mode="before")
    @classmethod
    def normalize_enabled(cls, value):
        return True if value is None else _as_flag(value)


class AppSettings(BaseModel):
    """Application settings, read from ``NAVBARPLUS_*`` environment variables."""
    model_config = ConfigDict(extra="ignore")

    site_root: str = "http://localhost:8080"
    default_language: str = "en"
    log_debug: bool = False
    secret_key: Optional[str] = None
    session_cookie_secure: bool = True
    settings_path: Path = PACKAGE_DIR / "config" / "navbarplus.yaml"
    tours_path: Path = PACKAGE_DIR / "config" / "tours.yaml"
    lang_dir: Path = PACKAGE_DIR / "lang"

    @field_validator("log_debug", "session_cookie_secure", mode="before")
    @classmethod
    def normalize_flags(cls, value):
        return _as_flag(value)

    @field_validator("site_root")
    @classmethod
    def strip_site_root(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, environ=None, prefix: str = "NAVBARPLUS_") -> "AppSettings":
        environ = os.environ if environ is None else environ
        values = {
            key[len(prefix):].lower(): value
            for key, value in environ.items()
            if key.startswith(prefix)
        }
        return cls(**values)

    def installed_languages(self) -> List[str]:
        if not self.lang_dir.exists():
            return [self.default_language]
        return sorted(path.stem for path in self.lang_dir.glob("*.yaml"))
