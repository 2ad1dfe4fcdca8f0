"""Room and equipment pages"""
from flask import Blueprint

from dashboard.forms import RoomForm, EquipmentForm
from dashboard.models.room import ROOMS, EQUIPMENTS
from .base import CrudView

rooms_bp = Blueprint('rooms', __name__)
equipments_bp = Blueprint('equipments', __name__)


class RoomView(CrudView):
    resource = ROOMS
    form_class = RoomForm
    title = 'Room Management'
    description = "Manage your gym's rooms"
    columns = ['Name']

    def row(self, room, page):
        return [room.get('name', '')]


class EquipmentView(CrudView):
    resource = EQUIPMENTS
    form_class = EquipmentForm
    lookups = {'rooms': ROOMS}
    select_fields = {'room': ('rooms', 'Select Room')}
    title = 'Equipment Management'
    description = "Manage your gym's equipment and where it is kept"
    columns = ['Name', 'Quantity', 'Room']

    def row(self, equipment, page):
        return [
            equipment.get('name', ''),
            equipment.get('quantity', ''),
            page.lookups['rooms'].label_for(equipment.get('room')),
        ]


RoomView(rooms_bp)
EquipmentView(equipments_bp)
