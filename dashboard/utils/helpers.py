from datetime import datetime, date

from flask import current_app, flash, redirect, request, session, url_for

from dashboard.core.api_client import APIClient
from dashboard.core.session import ApiSession


def get_api_client():
    """API client bound to the current request's session"""
    return APIClient(
        current_app.config['API_BASE_URL'],
        session=ApiSession.load(session),
        auth_scheme=current_app.config['API_AUTH_SCHEME'],
        login_path=current_app.config['API_LOGIN_PATH'],
        timeout=current_app.config['API_TIMEOUT'],
    )


def login_redirect():
    """Send the operator to login, coming back to the current page after.

    Dialog submits only accept POST, so those come back to their page's
    table instead.
    """
    next_page = request.path
    if request.method != 'GET':
        index = f'{request.blueprint}.index'
        next_page = url_for(index if index in current_app.view_functions else 'dashboard.index')
    return redirect(url_for('auth.login', next=next_page))


def report_error(message):
    """Every failed operation reaches the user the same way.

    The failure itself is logged where it happens.
    """
    flash(message, 'danger')


def _parse(value):
    """API dates arrive as ISO strings; anything unparseable is shown as is"""
    if isinstance(value, (date, datetime)):
        return value
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return None


def format_date(d, format='%d-%m-%Y'):
    """Format date"""
    if not d:
        return '-'
    parsed = _parse(d)
    if parsed is None:
        return str(d)
    return parsed.strftime(format)


def format_datetime(dt, format='%d-%m-%Y %H:%M'):
    """Format datetime"""
    if not dt:
        return '-'
    parsed = _parse(dt)
    if parsed is None:
        return str(dt)
    return parsed.strftime(format)


def format_currency(amount, currency=''):
    """Format amount as currency"""
    try:
        value = float(amount or 0)
    except (TypeError, ValueError):
        return str(amount)
    formatted = f"{value:,.2f}"
    return f"{formatted} {currency}".strip()
