from functools import wraps
from flask import abort
from flask_login import current_user


def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            # This should be handled by @login_required, but as a safeguard
            return abort(401)

        if not getattr(current_user, "is_admin", False):
            return abort(403)

        return f(*args, **kwargs)

    return decorated_function
