from datetime import date

from flask import Blueprint, render_template
from flask_login import current_user

from dashboard.core.loader import load_collections
from dashboard.models.user import USERS, FEEDBACKS
from dashboard.models.member import MEMBERSHIPS, TRAINING_PACKAGES
from dashboard.models.room import ROOMS
from dashboard.utils.decorators import session_required
from dashboard.utils.helpers import get_api_client

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/')
@session_required
def index():
    """Overview - collection counts and the latest feedback"""
    data = load_collections(get_api_client(), {
        'users': USERS.endpoint,
        'memberships': MEMBERSHIPS.endpoint,
        'packages': TRAINING_PACKAGES.endpoint,
        'rooms': ROOMS.endpoint,
        'feedbacks': FEEDBACKS.endpoint,
    })

    stats = {
        'users': len(data['users']),
        'memberships': len(data['memberships']),
        'active_memberships': count_active(data['memberships']),
        'packages': len(data['packages']),
        'rooms': len(data['rooms']),
    }

    # newest first
    feedbacks = list(reversed(data['feedbacks']))

    return render_template('dashboard/index.html',
                           stats=stats,
                           feedbacks=feedbacks,
                           admin=current_user)


def count_active(memberships, today=None):
    """Memberships whose expiration date has not passed"""
    today = (today or date.today()).isoformat()
    # ISO dates compare correctly as strings
    return sum(1 for m in memberships
               if str(m.get('expiration_time') or '')[:10] >= today)
