from flask import current_app, request

from navbarplus.services.host import FlaskHostContext
from navbarplus.services.navbar import render
from navbarplus.utilities.settings_loader import load_navbarplus_settings


def navbar_output(host=None):
    """Navbar Plus HTML for the current request."""
    host = host or FlaskHostContext.from_app()
    settings = load_navbarplus_settings(current_app.extensions["navbarplus.settings"].settings_path)
    return render(settings, host)


def navbarplus_context():
    """Template globals for every page: the navbar output and the string lookup."""
    host = FlaskHostContext.from_app()

    def get_string(key, component="local_navbarplus"):
        return host.translate(key, component)

    return dict(
        current_language=host.current_language(),
        navbarplus_output=navbar_output(host),
        get_string=get_string,
    )


def _context(page_title="Navbar Plus"):
    return dict(
        page_title=page_title,
        canonical_url=request.base_url,
    )
