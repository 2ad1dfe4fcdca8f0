from flask import Blueprint

from dashboard.core.lookup import resolve_through
from dashboard.forms import UsageForm, with_placeholder
from dashboard.models.user import USERS
from dashboard.models.member import MEMBERSHIPS, USAGES
from dashboard.models.room import ROOMS
from dashboard.utils.helpers import format_datetime
from .base import CrudView

usages_bp = Blueprint('usages', __name__)


class UsageView(CrudView):
    """Room usage records; a usage names its member through the membership"""
    resource = USAGES
    form_class = UsageForm
    lookups = {
        'rooms': ROOMS,
        'memberships': MEMBERSHIPS,
        'users': USERS,
    }
    title = 'Usage Management'
    description = 'Manage gym room usage records'
    columns = ['User', 'Room', 'Time']

    def member_name(self, membership_id, page):
        return resolve_through(membership_id, page.lookups['memberships'], 'user',
                               page.lookups['users'])

    def choices(self, page):
        memberships = [(membership_id, self.member_name(membership_id, page))
                       for membership_id, _ in page.lookups['memberships'].choices()]
        return {
            'membership': with_placeholder(memberships, 'Select Membership'),
            'room': with_placeholder(page.lookups['rooms'].choices(), 'Select Room'),
        }

    def row(self, usage, page):
        return [
            self.member_name(usage.get('membership'), page),
            page.lookups['rooms'].label_for(usage.get('room')),
            format_datetime(usage.get('time')),
        ]


UsageView(usages_bp)
