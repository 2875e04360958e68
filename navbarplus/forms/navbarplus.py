from flask_wtf import FlaskForm
from wtforms import BooleanField, StringField, SubmitField, TextAreaField
from wtforms.validators import Length, Optional


class NavbarPlusPreviewForm(FlaskForm):
    """Try out icon item lines before putting them into the site configuration."""

    inserticonswithlinks = TextAreaField(
        "Icons with links",
        validators=[Optional(), Length(max=20000)],
        description="One item per line: icon|url|title|languages|newwindow|classes|id",
        render_kw={"rows": 8, "spellcheck": "false"},
    )

    resetusertours = BooleanField("Reset user tour link", default=False)

    language = StringField(
        "Preview language",
        validators=[Optional(), Length(max=20)],
        description="Leave empty to use the current language.",
    )

    submit = SubmitField("Preview")
