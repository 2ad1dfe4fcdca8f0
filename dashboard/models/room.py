from .base import Draft, Resource


class RoomDraft(Draft):
    fields = {
        'name': '',
    }


class EquipmentDraft(Draft):
    """Equipment kept in a room"""
    fields = {
        'name': '',
        'quantity': 1,
        'room': 0,
    }
    references = ('room',)
    integers = ('quantity',)


ROOMS = Resource('room', '/room/api/rooms/', RoomDraft)
EQUIPMENTS = Resource('equipment', '/room/api/equipments/', EquipmentDraft,
                      plural='equipment')
