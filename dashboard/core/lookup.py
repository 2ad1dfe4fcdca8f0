"""
Cross-reference resolution - turn foreign key ids into display labels
"""

from typing import Dict, Iterable, List, Optional, Tuple

UNKNOWN = 'Unknown'


def reference_id(value) -> Optional[int]:
    """Normalise a foreign key value.

    The API returns references either as a bare id or as a nested
    object ({"id": 3, "name": ...}); both resolve to the id.
    """
    if isinstance(value, dict):
        value = value.get('id')
    if value is None or value == '':
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def resolve(record_id, lookup: Iterable[Dict], label: str = 'name') -> str:
    """Label of the record in `lookup` whose id is `record_id`, else UNKNOWN"""
    record_id = reference_id(record_id)
    if record_id is None:
        return UNKNOWN
    for record in lookup:
        if reference_id(record.get('id')) == record_id:
            return str(record.get(label, UNKNOWN))
    return UNKNOWN


class LookupIndex:
    """Lookup list indexed by id.

    Gives the same labels as resolve() without rescanning the list
    for every row.
    """

    def __init__(self, records: Iterable[Dict] = (), label: str = 'name'):
        self.label = label
        self.records: List[Dict] = list(records)
        self._by_id: Dict[int, Dict] = {}
        for record in self.records:
            key = reference_id(record.get('id'))
            # first match wins, as in a linear scan
            if key is not None and key not in self._by_id:
                self._by_id[key] = record

    def get(self, record_id) -> Optional[Dict]:
        return self._by_id.get(reference_id(record_id))

    def label_for(self, record_id) -> str:
        record = self.get(record_id)
        if record is None:
            return UNKNOWN
        return str(record.get(self.label, UNKNOWN))

    def choices(self) -> List[Tuple[int, str]]:
        """(id, label) pairs for a select input"""
        return [(key, self.label_for(key)) for key in self._by_id]

    def __contains__(self, record_id):
        return reference_id(record_id) in self._by_id

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)


def resolve_through(record_id, middle: LookupIndex, field: str, target: LookupIndex) -> str:
    """Two-hop resolution, e.g. usage.membership -> membership.user -> username"""
    record = middle.get(record_id)
    if record is None:
        return UNKNOWN
    return target.label_for(record.get(field))
