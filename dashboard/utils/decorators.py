from functools import wraps
from flask import flash, session
from flask_login import current_user, logout_user

from dashboard.core.session import ApiSession
from .helpers import login_redirect


def session_required(f):
    """
    Decorator to require a signed-in operator with a live API session

    Usage:
        @session_required
        def my_view():
            ...
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            flash('Please log in to access this page', 'warning')
            return login_redirect()

        if not ApiSession.load(session).is_authenticated:
            logout_user()
            flash('Your session has expired, please log in again', 'warning')
            return login_redirect()

        return f(*args, **kwargs)
    return decorated_function
