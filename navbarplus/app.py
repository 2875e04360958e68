import os
import secrets

from flask import Flask, render_template, send_from_directory
from flask_login import LoginManager
from flask_talisman import Talisman
from flask_wtf import CSRFProtect

from navbarplus.models.settings import AppSettings
from navbarplus.models.user import get_user
from navbarplus.services.base import _context, navbarplus_context
from navbarplus.utilities.logger import configure_logging
from navbarplus.utilities.settings_loader import load_tour_registry
from navbarplus.views import register_views


def create_app(settings: AppSettings = None, config: dict = None):
    settings = settings or AppSettings.from_env()

    app = Flask(__name__)
    app.config.logger = configure_logging(settings.log_debug)

    app.config.update(
        SECRET_KEY=settings.secret_key or os.environ.get("SECRET_KEY") or secrets.token_hex(32),
        SESSION_COOKIE_SECURE=settings.session_cookie_secure,  # send only over HTTPS
        SESSION_COOKIE_HTTPONLY=True,  # not accessible to JS
        SESSION_COOKIE_SAMESITE="Lax",  # CSRF mitigation for cross-site
        WTF_CSRF_TIME_LIMIT=None,
        SITE_NAME="Navbar Plus",
    )
    app.config.update(config or {})

    app.extensions["navbarplus.settings"] = settings
    app.extensions["navbarplus.tours"] = load_tour_registry(settings.tours_path)
    app.config.logger.info(
        "Navbar Plus configured.",
        settings_path=str(settings.settings_path),
        tours=len(app.extensions["navbarplus.tours"]),
    )

    # --- CSRF protection
    CSRFProtect(app)

    # --- Content Security Policy
    csp = {
        "default-src": "'self'",
        "base-uri": "'self'",
        "form-action": "'self'",
        "frame-ancestors": "'none'",
        "object-src": "'none'",

        # --- Scripts (HTMX) ---
        "script-src": [
            "'self'",
            "https://unpkg.com",
        ],

        # --- Styles (Font Awesome from the CDN) ---
        "style-src": [
            "'self'",
            "https://cdnjs.cloudflare.com",
        ],

        "font-src": [
            "'self'",
            "https://cdnjs.cloudflare.com",
            "data:",
        ],

        "img-src": [
            "'self'",
            "data:",
        ],
    }

    # --- Talisman security headers
    Talisman(
        app,
        content_security_policy=csp,
        content_security_policy_nonce_in=["script-src"],
        force_https=False,
        strict_transport_security=True,
        strict_transport_security_max_age=31536000,
        frame_options="DENY",
        referrer_policy="strict-origin-when-cross-origin",
        session_cookie_secure=app.config["SESSION_COOKIE_SECURE"],
    )

    # --- Login manager
    login_manager = LoginManager()
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        return get_user(user_id)

    register_views(app)

    # navbar output for every rendered template
    app.context_processor(navbarplus_context)

    @app.route('/')
    def index():
        return render_template("index.html", **_context())

    @app.route('/dashboard')
    def dashboard():
        return render_template("index.html", **_context())

    @app.route('/robots.txt')
    def robots_txt():
        return send_from_directory(app.static_folder, 'robots.txt', mimetype='text/plain')

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host='0.0.0.0', port=8080, debug=app.extensions["navbarplus.settings"].log_debug)
