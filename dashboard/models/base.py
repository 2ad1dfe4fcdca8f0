"""
Base classes for API resources and their form drafts
"""

import math
from datetime import date, datetime
from typing import Dict, Optional

from dashboard.core.api_client import item_path
from dashboard.core.exceptions import DraftError
from dashboard.core.lookup import reference_id


class Draft:
    """Client-side state of a record being created or edited.

    Subclasses list their fields with defaults. `references` are foreign
    keys (positive ids), `numbers` are decimal amounts and `integers` are
    counts; to_payload() coerces those and refuses anything it cannot
    send to the API.
    """

    fields: Dict = {}
    references = ()
    numbers = ()
    integers = ()
    # shown in <input type="date"> / <input type="datetime-local">
    dates = ()
    datetimes = ()

    def __init__(self, record_id=None, **values):
        self.id = record_id
        self.values = dict(self.fields)
        self.update(values)

    @classmethod
    def from_record(cls, record: Dict) -> 'Draft':
        """Copy an API record into a draft (used when opening the edit dialog)"""
        draft = cls(record_id=record.get('id'))
        for name in cls.fields:
            if name not in record:
                continue
            value = record[name]
            if name in cls.references:
                value = reference_id(value) or 0
            elif name in cls.dates:
                value = _input_value(value, '%Y-%m-%d')
            elif name in cls.datetimes:
                value = _input_value(value, '%Y-%m-%dT%H:%M')
            draft.values[name] = value
        return draft

    def set(self, name: str, value):
        """Change one field"""
        if name not in self.fields:
            raise KeyError(f'{type(self).__name__} has no field {name!r}')
        self.values[name] = value

    def update(self, values: Dict):
        for name, value in values.items():
            if name in self.fields:
                self.values[name] = value

    def reset(self):
        """Back to the default shape"""
        self.id = None
        self.values = dict(self.fields)

    def __getitem__(self, name):
        return self.values[name]

    def as_dict(self) -> Dict:
        return {'id': self.id, **self.values}

    def __eq__(self, other):
        if not isinstance(other, Draft):
            return NotImplemented
        return type(self) is type(other) and self.as_dict() == other.as_dict()

    def __repr__(self):
        return f'<{type(self).__name__} {self.as_dict()}>'

    # ============= Submit =============

    def to_payload(self) -> Dict:
        """Validated request body; raises DraftError when not ready to submit"""
        payload = {}
        errors = {}

        for name, value in self.values.items():
            try:
                payload[name] = self._coerce(name, value)
            except ValueError as e:
                errors[name] = str(e)

        if errors:
            raise DraftError(errors)
        return payload

    def _coerce(self, name, value):
        if name in self.references:
            ref = reference_id(value)
            if not ref or ref < 1:
                raise ValueError('select a value')
            return ref

        if name in self.numbers:
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise ValueError('not a valid number')
            if not math.isfinite(number):
                raise ValueError('not a valid number')
            return number

        if name in self.integers:
            try:
                return int(value)
            except (TypeError, ValueError):
                raise ValueError('not a valid whole number')

        if isinstance(value, datetime):
            return value.isoformat(timespec='minutes')
        if isinstance(value, date):
            return value.isoformat()
        return value


def _input_value(value, format):
    """ISO timestamp from the API -> value an HTML date input accepts"""
    if not value:
        return ''
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00')).strftime(format)
    except ValueError:
        return value


class Resource:
    """A REST collection exposed by the gym API"""

    def __init__(self, name: str, endpoint: str, draft_class: Optional[type] = None,
                 label: str = 'name', plural: Optional[str] = None):
        self.name = name
        self.plural = plural or f'{name}s'
        self.endpoint = endpoint
        self.draft_class = draft_class
        self.label = label

    @property
    def is_editable(self) -> bool:
        return self.draft_class is not None

    def item_path(self, record_id) -> str:
        return item_path(self.endpoint, record_id)

    def new_draft(self) -> Draft:
        if self.draft_class is None:
            raise TypeError(f'{self.plural} are read-only')
        return self.draft_class()

    def __repr__(self):
        return f'<Resource {self.name} {self.endpoint}>'
