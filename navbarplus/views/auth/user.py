from flask import Blueprint, abort, flash, redirect, request, url_for
from flask_login import login_required, login_user, logout_user

from navbarplus.models.user import get_user
from navbarplus.utilities import LOGGER

bp = Blueprint("auth", __name__)


# ========== Demo sign in ==========

@bp.post("/login/<user_id>")
def login(user_id):
    """Sign in as one of the demo accounts (admin, student, guest)."""
    user = get_user(user_id)
    if user is None:
        LOGGER.warning(f"Unknown demo account: {user_id}")
        return abort(404)

    login_user(user)
    LOGGER.info(f"Signed in demo account: {user_id}")
    flash(f"Signed in as {user.full_name}.", "success")

    # only local redirects
    next_url = request.args.get("next") or ""
    if not next_url.startswith("/") or next_url.startswith("//"):
        next_url = url_for("index")
    return redirect(next_url)


@bp.route("/logout")
@login_required
def logout():
    logout_user()
    flash("You have been logged out.", "info")
    return redirect(url_for("index"))
