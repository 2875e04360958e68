from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from navbarplus.utilities.urls import SiteUrl

FIELD_SEPARATOR = "|"
MIN_FIELDS = 3
MAX_FIELDS = 7
MANDATORY_FIELDS = 3

BASE_CLASSES = "localnavbarplus nav-link"
ID_PREFIX = "localnavbarplus-"


class ConfigLine(BaseModel):
    """
    One line of the icon items setting, split on ``|`` with every field trimmed.

        icon|url|title[|languages][|newwindow][|classes][|id]
    """
    model_config = ConfigDict(frozen=True)

    number: int = 0
    raw_fields: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: str, number: int = 0) -> Optional["ConfigLine"]:
        line = line.strip()
        if not line:
            return None
        return cls(number=number, raw_fields=tuple(field.strip() for field in line.split(FIELD_SEPARATOR)))

    @property
    def field_count(self) -> int:
        return len(self.raw_fields)

    @property
    def has_valid_field_count(self) -> bool:
        return MIN_FIELDS <= self.field_count <= MAX_FIELDS

    @property
    def has_mandatory_fields(self) -> bool:
        return all(self.raw_fields[:MANDATORY_FIELDS]) and self.field_count >= MANDATORY_FIELDS

    @property
    def text(self) -> str:
        return FIELD_SEPARATOR.join(self.raw_fields)


class NavbarItem(BaseModel):
    """
    State of one item while its fields are processed, and the rendered item afterwards.
    ``skip_reason`` names the field check that last hid the item.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    icon_fa_name: Optional[str] = None
    url: Optional[SiteUrl] = None
    title: Optional[str] = None
    visible: bool = False
    open_in_new_window: bool = False
    additional_classes: Optional[str] = None
    element_id: Optional[str] = None
    skip_reason: Optional[str] = Field(default=None, exclude=True)

    @property
    def renderable(self) -> bool:
        # a missing URL always hides the item, whatever later fields did to ``visible``
        return self.visible and self.url is not None

    @property
    def css_classes(self) -> str:
        if self.additional_classes:
            return f"{BASE_CLASSES} {self.additional_classes}"
        return BASE_CLASSES

    @property
    def dom_id(self) -> Optional[str]:
        if self.element_id:
            return ID_PREFIX + self.element_id
        return None
