from flask import Blueprint

from dashboard.forms import UserForm
from dashboard.models.user import USERS
from .base import CrudView

users_bp = Blueprint('users', __name__)


class UserView(CrudView):
    resource = USERS
    form_class = UserForm
    title = 'User Management'
    description = "Manage your gym's user accounts"
    columns = ['Username', 'Email', 'First Name', 'Last Name']

    def row(self, user, page):
        return [
            user.get('username', ''),
            user.get('email', ''),
            user.get('first_name', ''),
            user.get('last_name', ''),
        ]


UserView(users_bp)
