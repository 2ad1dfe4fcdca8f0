# Models package
from .base import Draft, Resource
from .user import UserDraft, AdminUser, USERS, FEEDBACKS
from .member import (
    TrainingPackageDraft, TypePackageDraft, MembershipDraft, UsageDraft,
    TRAINING_PACKAGES, TYPE_PACKAGES, MEMBERSHIPS, USAGES
)
from .room import RoomDraft, EquipmentDraft, ROOMS, EQUIPMENTS
