from __future__ import annotations

from typing import Dict, Optional

from flask_login import UserMixin


class SiteUser(UserMixin):
    """
    Minimal user for the demo site. ``is_guest`` marks the shared guest account,
    which is logged in but must be treated like an anonymous visitor elsewhere.
    """

    def __init__(self, id: str, full_name: str, is_admin: bool = False, is_guest: bool = False, lang: Optional[str] = None):
        self.id = id
        self.full_name = full_name
        self.is_admin = is_admin
        self.is_guest = is_guest
        self.lang = lang

    def __repr__(self) -> str:
        return f"SiteUser({self.id!r})"


USERS: Dict[str, SiteUser] = {
    "admin": SiteUser("admin", "Site administrator", is_admin=True),
    "student": SiteUser("student", "Student", lang="de"),
    "guest": SiteUser("guest", "Guest user", is_guest=True),
}


def get_user(user_id: str) -> Optional[SiteUser]:
    return USERS.get(str(user_id))
