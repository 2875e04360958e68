from .item import ConfigLine, NavbarItem
from .settings import AppSettings, NavbarPlusSettings, TourDefinition

__all__ = [
    "ConfigLine",
    "NavbarItem",
    "AppSettings",
    "NavbarPlusSettings",
    "TourDefinition",
]
