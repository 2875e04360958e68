from flask import Blueprint, current_app, render_template
from flask_login import login_required

from navbarplus.forms.navbarplus import NavbarPlusPreviewForm
from navbarplus.models.settings import NavbarPlusSettings
from navbarplus.services.base import _context
from navbarplus.services.host import FlaskHostContext, StaticHostContext
from navbarplus.services.navbar import explain, render
from navbarplus.services.strings import get_string
from navbarplus.utilities import LOGGER
from navbarplus.utilities.decorators import admin_required
from navbarplus.utilities.settings_loader import load_navbarplus_settings

bp = Blueprint("navbarplus_admin", __name__, url_prefix="/admin/navbarplus")


def _preview_host(language: str) -> StaticHostContext:
    """The current user's facts, as if on a page that has a tour."""
    live = FlaskHostContext.from_app()
    settings = current_app.extensions["navbarplus.settings"]
    return StaticHostContext(
        language=language,
        logged_in=live.is_logged_in(),
        guest=live.is_guest_user(),
        tours=[tour.name for tour in live.tours if tour.enabled],
        root=settings.site_root,
        strings=lambda key, component: get_string(key, component, language, settings.lang_dir),
    )


@bp.route("/preview", methods=["GET", "POST"])
@login_required
@admin_required
def preview():
    form = NavbarPlusPreviewForm()
    live = FlaskHostContext.from_app()
    reports = []
    output = None

    if not form.is_submitted():
        stored = load_navbarplus_settings(current_app.extensions["navbarplus.settings"].settings_path)
        form.inserticonswithlinks.data = stored.inserticonswithlinks
        form.resetusertours.data = stored.resetusertours

    if form.validate_on_submit():
        language = (form.language.data or "").strip() or live.current_language()
        host = _preview_host(language)
        settings = NavbarPlusSettings(
            inserticonswithlinks=form.inserticonswithlinks.data,
            resetusertours=form.resetusertours.data,
        )
        reports = explain(settings.inserticonswithlinks, host)
        output = render(settings, host)
        LOGGER.info(
            f"Navbar Plus preview: {sum(r.visible for r in reports)} of {len(reports)} lines rendered",
            language=language,
        )

    return render_template(
        "admin/preview.html",
        form=form,
        reports=reports,
        preview_output=output,
        **_context(live.translate("previewheading", "local_navbarplus")),
    )
