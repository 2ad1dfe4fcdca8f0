"""
CRUD controller - draft state and add/edit/delete flows for one resource page
"""

import logging
from typing import Dict, List, Optional

from .exceptions import APIError, DraftError, SessionExpired
from .loader import load_collections
from .lookup import LookupIndex, reference_id

logger = logging.getLogger(__name__)


class ResourcePage:
    """State behind a resource's table and its dialogs.

    `records` is the last fetched list, patched in place by successful
    mutations. `lookups` maps a name to the Resource whose list is needed
    to resolve foreign keys on this page.

    Mutations never raise for API or draft failures: they log, set
    `error` and leave the list and the open dialog as they were.
    Only SessionExpired propagates.
    """

    def __init__(self, client, resource, lookups: Optional[Dict] = None):
        self.client = client
        self.resource = resource
        self.lookup_resources = lookups or {}

        self.records: List[Dict] = []
        self.lookups: Dict[str, LookupIndex] = {
            name: LookupIndex(label=res.label) for name, res in self.lookup_resources.items()
        }

        self.new_draft = resource.new_draft() if resource.is_editable else None
        self.edit_draft = resource.new_draft() if resource.is_editable else None
        self.add_open = False
        self.edit_open = False
        self.pending_delete = None
        self.error: Optional[str] = None

    # ============= Loading =============

    def load(self):
        """Fetch the primary list and every lookup list"""
        paths = {name: res.endpoint for name, res in self.lookup_resources.items()}
        paths[self.resource.plural] = self.resource.endpoint
        results = load_collections(self.client, paths)

        self.records = results.pop(self.resource.plural)
        for name, records in results.items():
            self.lookups[name] = LookupIndex(records, label=self.lookup_resources[name].label)
        return self

    def find(self, record_id) -> Optional[Dict]:
        record_id = reference_id(record_id)
        for record in self.records:
            if reference_id(record.get('id')) == record_id:
                return record
        return None

    # ============= Dialogs =============

    def open_add(self):
        self.add_open = True

    def close_add(self):
        self.add_open = False

    def open_edit(self, record_id) -> bool:
        """Copy a loaded record into the edit draft and open the dialog"""
        record = self.find(record_id)
        if record is None:
            return False
        self.edit_draft = self.resource.draft_class.from_record(record)
        self.edit_open = True
        return True

    def close_edit(self):
        self.edit_open = False

    # ============= Mutations =============

    def add(self) -> Optional[Dict]:
        """POST the new draft and append the created record"""
        self.error = None
        try:
            payload = self.new_draft.to_payload()
            record = _expect_record(self.client.post(self.resource.endpoint, payload))
        except SessionExpired:
            raise
        except (APIError, DraftError) as e:
            self._fail('add', e)
            return None

        self.records = self.records + [record]
        self.new_draft.reset()
        self.add_open = False
        logger.info(f"Added {self.resource.name} {record.get('id')}")
        return record

    def edit(self) -> Optional[Dict]:
        """PUT the edit draft and replace the matching record"""
        self.error = None
        record_id = self.edit_draft.id
        try:
            if record_id is None:
                raise DraftError({'id': 'no record selected'})
            payload = self.edit_draft.to_payload()
            record = _expect_record(self.client.put(self.resource.item_path(record_id), payload))
        except SessionExpired:
            raise
        except (APIError, DraftError) as e:
            self._fail('edit', e)
            return None

        key = reference_id(record_id)
        self.records = [record if reference_id(item.get('id')) == key else item
                        for item in self.records]
        self.edit_draft.reset()
        self.edit_open = False
        logger.info(f"Updated {self.resource.name} {record_id}")
        return record

    def request_delete(self, record_id):
        self.pending_delete = reference_id(record_id)

    def cancel_delete(self):
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        """DELETE the pending record and drop it from the list"""
        self.error = None
        record_id = self.pending_delete
        if record_id is None:
            return False
        try:
            self.client.delete(self.resource.item_path(record_id))
        except SessionExpired:
            raise
        except APIError as e:
            self._fail('delete', e)
            return False

        self.records = [item for item in self.records
                        if reference_id(item.get('id')) != record_id]
        self.pending_delete = None
        logger.info(f"Deleted {self.resource.name} {record_id}")
        return True

    def _fail(self, action, error):
        self.error = f'Failed to {action} {self.resource.name}: {error}'
        logger.error(self.error)


def _expect_record(data) -> Dict:
    """The saved record echoed back by a POST/PUT"""
    if not isinstance(data, dict):
        raise APIError('The API did not return the saved record')
    return data
