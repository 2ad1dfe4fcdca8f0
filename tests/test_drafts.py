import unittest
from datetime import date

from dashboard.core.exceptions import DraftError
from dashboard.models import (
    MembershipDraft, TypePackageDraft, UsageDraft, EquipmentDraft, UserDraft,
    MEMBERSHIPS, FEEDBACKS
)


class TestDraft(unittest.TestCase):
    def test_defaults(self):
        draft = MembershipDraft()
        self.assertEqual(draft.as_dict(), {
            'id': None, 'user': 0, 'package': 0, 'type': 0,
            'registration_time': '', 'expiration_time': '',
        })

    def test_set_and_reset(self):
        draft = UserDraft()
        draft.set('username', 'alice')
        self.assertEqual(draft['username'], 'alice')

        draft.reset()
        self.assertEqual(draft, UserDraft())

    def test_set_unknown_field(self):
        with self.assertRaises(KeyError):
            UserDraft().set('password', 'x')

    def test_update_ignores_unknown_fields(self):
        draft = UserDraft()
        draft.update({'username': 'bob', 'csrf_token': 'xyz'})
        self.assertEqual(draft['username'], 'bob')
        self.assertNotIn('csrf_token', draft.values)

    def test_from_record_normalises_nested_references_and_dates(self):
        draft = MembershipDraft.from_record({
            'id': 3,
            'user': 1,
            'package': {'id': 5, 'name': 'Gold'},
            'type': {'id': 1},
            'registration_time': '2024-01-01T00:00:00Z',
            'expiration_time': '2024-06-01',
            'created_at': '2023-12-31',
        })

        self.assertEqual(draft.id, 3)
        self.assertEqual(draft['package'], 5)
        self.assertEqual(draft['type'], 1)
        self.assertEqual(draft['registration_time'], '2024-01-01')
        self.assertEqual(draft['expiration_time'], '2024-06-01')
        self.assertNotIn('created_at', draft.values)

    def test_from_record_datetime_input(self):
        draft = UsageDraft.from_record({'id': 1, 'time': '2024-02-01T09:30:00+07:00'})
        self.assertEqual(draft['time'], '2024-02-01T09:30')


class TestPayload(unittest.TestCase):
    def test_membership_payload(self):
        draft = MembershipDraft(user='2', package=5, type=1,
                                registration_time='2024-01-01', expiration_time='2024-06-01')
        self.assertEqual(draft.to_payload(), {
            'user': 2, 'package': 5, 'type': 1,
            'registration_time': '2024-01-01', 'expiration_time': '2024-06-01',
        })

    def test_unselected_reference_is_rejected(self):
        with self.assertRaises(DraftError) as ctx:
            MembershipDraft(user=2, package=0, type=1).to_payload()
        self.assertEqual(list(ctx.exception.errors), ['package'])

    def test_rate_is_parsed_as_float(self):
        payload = TypePackageDraft(name='Monthly', duration='30 days', rate='1.5').to_payload()
        self.assertEqual(payload['rate'], 1.5)

    def test_invalid_rate_is_rejected(self):
        for rate in ('abc', '', None, 'nan', float('nan'), float('inf')):
            with self.assertRaises(DraftError, msg=repr(rate)):
                TypePackageDraft(name='Monthly', rate=rate).to_payload()

    def test_quantity_must_be_whole(self):
        draft = EquipmentDraft(name='Bike', quantity='three', room=7)
        with self.assertRaises(DraftError):
            draft.to_payload()

    def test_dates_are_serialised(self):
        draft = MembershipDraft(user=1, package=1, type=1,
                                registration_time=date(2024, 1, 1), expiration_time='2024-06-01')
        self.assertEqual(draft.to_payload()['registration_time'], '2024-01-01')

    def test_strings_are_not_validated(self):
        self.assertEqual(UserDraft().to_payload(), {
            'email': '', 'first_name': '', 'last_name': '', 'username': '',
        })


class TestResource(unittest.TestCase):
    def test_item_path(self):
        self.assertEqual(MEMBERSHIPS.item_path(3), '/membership/api/memberships/3/')

    def test_read_only_resource(self):
        self.assertFalse(FEEDBACKS.is_editable)
        with self.assertRaises(TypeError):
            FEEDBACKS.new_draft()


if __name__ == '__main__':
    unittest.main()
