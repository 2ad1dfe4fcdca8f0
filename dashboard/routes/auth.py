import logging

from flask import Blueprint, render_template, redirect, url_for, flash, request, session
from flask_login import login_user, logout_user, login_required, current_user

from dashboard.core.exceptions import APIError
from dashboard.core.session import ApiSession
from dashboard.forms import LoginForm
from dashboard.models.user import AdminUser
from dashboard.utils.helpers import get_api_client

auth_bp = Blueprint('auth', __name__)

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Login page"""
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.index'))

    form = LoginForm()

    if form.validate_on_submit():
        username = form.username.data.strip()
        client = get_api_client()

        try:
            client.login(username, form.password.data)
        except APIError as e:
            logger.warning(f"Login failed for {username}: {e}")
            flash('Invalid username or password', 'danger')
            return render_template('auth/login.html', form=form)

        # remembered logins keep the API token for PERMANENT_SESSION_LIFETIME
        session.permanent = bool(form.remember_me.data)
        client.session.save(session)
        login_user(AdminUser(username), remember=form.remember_me.data)

        flash(f'Welcome {username}', 'success')

        next_page = request.args.get('next')
        if next_page and next_page.startswith('/') and not next_page.startswith('//'):
            return redirect(next_page)

        return redirect(url_for('dashboard.index'))

    return render_template('auth/login.html', form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    """Logout"""
    ApiSession().save(session)
    logout_user()
    flash('You have been logged out', 'info')
    return redirect(url_for('auth.login'))
