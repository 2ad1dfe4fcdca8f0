from .base import Draft, Resource


class TrainingPackageDraft(Draft):
    """What a membership buys: name, description and price"""
    fields = {
        'name': '',
        'description': '',
        'price': 0,
    }
    numbers = ('price',)


class TypePackageDraft(Draft):
    """How long a membership runs and at what rate"""
    fields = {
        'name': '',
        'duration': '',
        'rate': 0,
    }
    numbers = ('rate',)


class MembershipDraft(Draft):
    """A user's subscription to a training package of a given type"""
    fields = {
        'user': 0,
        'package': 0,
        'type': 0,
        'registration_time': '',
        'expiration_time': '',
    }
    references = ('user', 'package', 'type')
    dates = ('registration_time', 'expiration_time')


class UsageDraft(Draft):
    """A member's visit to a room"""
    fields = {
        'time': '',
        'membership': 0,
        'room': 0,
    }
    references = ('membership', 'room')
    datetimes = ('time',)


TRAINING_PACKAGES = Resource('training package', '/membership/api/trainingpackages/',
                             TrainingPackageDraft)
TYPE_PACKAGES = Resource('type package', '/membership/api/typepackages/', TypePackageDraft)
MEMBERSHIPS = Resource('membership', '/membership/api/memberships/', MembershipDraft,
                       label='user')
USAGES = Resource('usage', '/membership/api/usages/', UsageDraft, label='time')
