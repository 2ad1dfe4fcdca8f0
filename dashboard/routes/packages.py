"""Training package and type package pages"""
from flask import Blueprint

from dashboard.forms import TrainingPackageForm, TypePackageForm
from dashboard.models.member import TRAINING_PACKAGES, TYPE_PACKAGES
from dashboard.utils.helpers import format_currency
from .base import CrudView

training_packages_bp = Blueprint('training_packages', __name__)
type_packages_bp = Blueprint('type_packages', __name__)


class TrainingPackageView(CrudView):
    resource = TRAINING_PACKAGES
    form_class = TrainingPackageForm
    title = 'Training Package Management'
    description = "Manage your gym's training packages"
    columns = ['Name', 'Description', 'Price']

    def row(self, package, page):
        return [
            package.get('name', ''),
            package.get('description', ''),
            format_currency(package.get('price')),
        ]


class TypePackageView(CrudView):
    resource = TYPE_PACKAGES
    form_class = TypePackageForm
    title = 'Type Package Management'
    description = "Manage your gym's type packages"
    columns = ['Name', 'Duration', 'Rate']

    def row(self, type_package, page):
        return [
            type_package.get('name', ''),
            type_package.get('duration', ''),
            type_package.get('rate', ''),
        ]


TrainingPackageView(training_packages_bp)
TypePackageView(type_packages_bp)
