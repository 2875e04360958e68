# views/__init__.py
from __future__ import annotations
from flask import Flask


def register_views(app: Flask) -> None:
    """
    Attach all blueprints to the Flask app.
    Keep this as the single entry point for route registration.
    """
    # Auth
    from .auth.user import bp as auth_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")

    # UI partials
    from .ui.base import bp as ui_bp
    app.register_blueprint(ui_bp, url_prefix="/ui")

    # Admin - Navbar Plus
    from .admin.navbarplus import bp as navbarplus_admin_bp
    app.register_blueprint(navbarplus_admin_bp, url_prefix="/admin/navbarplus")
