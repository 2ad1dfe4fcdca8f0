from flask import Blueprint

from dashboard.forms import MembershipForm
from dashboard.models.user import USERS
from dashboard.models.member import MEMBERSHIPS, TRAINING_PACKAGES, TYPE_PACKAGES
from dashboard.utils.helpers import format_date
from .base import CrudView

members_bp = Blueprint('members', __name__)


class MemberView(CrudView):
    """Memberships, shown with the member's username and package names"""
    resource = MEMBERSHIPS
    form_class = MembershipForm
    lookups = {
        'users': USERS,
        'packages': TRAINING_PACKAGES,
        'types': TYPE_PACKAGES,
    }
    select_fields = {
        'user': ('users', 'Select User'),
        'package': ('packages', 'Select Training Package'),
        'type': ('types', 'Select Type Package'),
    }
    title = 'Members Management'
    description = 'Manage members and their memberships'
    columns = ['User', 'Training Package', 'Type Package', 'Registration Time', 'Expired Time']

    @property
    def name(self):
        return 'Member'

    def row(self, membership, page):
        return [
            page.lookups['users'].label_for(membership.get('user')),
            page.lookups['packages'].label_for(membership.get('package')),
            page.lookups['types'].label_for(membership.get('type')),
            format_date(membership.get('registration_time')),
            format_date(membership.get('expiration_time')),
        ]


MemberView(members_bp)
