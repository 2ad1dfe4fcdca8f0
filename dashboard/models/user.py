from flask import session
from flask_login import UserMixin

from dashboard import login_manager
from dashboard.core.session import ApiSession
from .base import Draft, Resource


class UserDraft(Draft):
    """Gym user (member account) managed through the user service"""
    fields = {
        'email': '',
        'first_name': '',
        'last_name': '',
        'username': '',
    }


USERS = Resource('user', '/user/api/users/', UserDraft, label='username')
FEEDBACKS = Resource('feedback', '/user/api/feedbacks/', label='message')


class AdminUser(UserMixin):
    """The dashboard operator signed in through the API.

    Nothing is stored locally: the user exists for as long as the API
    session in the cookie does.
    """

    def __init__(self, username):
        self.username = username

    def get_id(self):
        return self.username

    @property
    def name(self):
        return self.username

    def __repr__(self):
        return f'<AdminUser {self.username}>'


@login_manager.user_loader
def load_user(user_id):
    api_session = ApiSession.load(session)
    if not api_session.is_authenticated or api_session.username != user_id:
        return None
    return AdminUser(api_session.username)
