from flask import Blueprint, Response

from navbarplus.services.base import navbar_output

bp = Blueprint("ui", __name__, url_prefix="/ui")


@bp.get("/navbar")
def navbar():
    """Navbar Plus fragment on its own, for hx-get refreshes of the navbar."""
    return Response(str(navbar_output()), status=200, mimetype="text/html")


@bp.get("/empty")
def empty():
    # empty body so hx-swap="outerHTML" removes the target element
    return Response("", status=200)
