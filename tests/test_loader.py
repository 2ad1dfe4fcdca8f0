import threading
import unittest

from dashboard.core.exceptions import APIError, SessionExpired
from dashboard.core.loader import fetch_list, load_collections
from tests.base import fake_client


class TestFetchList(unittest.TestCase):
    def test_plain_list(self):
        client = fake_client()
        self.assertEqual(fetch_list(client, '/room/api/rooms/'), [{'id': 7, 'name': 'Cardio'}])

    def test_paginated_body(self):
        client = fake_client({'/room/api/rooms/': {'count': 1, 'results': [{'id': 7}]}})
        self.assertEqual(fetch_list(client, '/room/api/rooms/'), [{'id': 7}])

    def test_unexpected_body_is_empty(self):
        client = fake_client({'/room/api/rooms/': {'detail': 'odd'}})
        with self.assertLogs('dashboard.core.loader', level='WARNING'):
            self.assertEqual(fetch_list(client, '/room/api/rooms/'), [])


class TestLoadCollections(unittest.TestCase):
    def test_loads_every_collection(self):
        client = fake_client()
        results = load_collections(client, {
            'users': '/user/api/users/',
            'rooms': '/room/api/rooms/',
        })

        self.assertEqual([u['username'] for u in results['users']], ['alice', 'bob'])
        self.assertEqual(results['rooms'], [{'id': 7, 'name': 'Cardio'}])
        self.assertEqual(client.get.call_count, 2)

    def test_fetches_run_concurrently(self):
        # both requests must be in flight at once for either to finish
        barrier = threading.Barrier(2, timeout=5)
        client = fake_client()
        served = client.get.side_effect

        def get(path):
            barrier.wait()
            return served(path)

        client.get.side_effect = get
        results = load_collections(client, {
            'users': '/user/api/users/',
            'rooms': '/room/api/rooms/',
        })
        self.assertEqual(len(results['users']), 2)

    def test_failed_fetch_leaves_collection_empty(self):
        client = fake_client()
        with self.assertLogs('dashboard.core.loader', level='ERROR') as logs:
            results = load_collections(client, {
                'users': '/user/api/users/',
                'missing': '/nope/',
            })

        self.assertEqual(results['missing'], [])
        self.assertEqual(len(results['users']), 2)
        self.assertIn('Failed to load missing', logs.output[0])

    def test_session_expired_is_raised_after_all_fetches(self):
        client = fake_client()
        served = client.get.side_effect

        def get(path):
            if path == '/user/api/users/':
                raise SessionExpired('Request failed', 401)
            return served(path)

        client.get.side_effect = get
        with self.assertRaises(SessionExpired):
            load_collections(client, {
                'users': '/user/api/users/',
                'rooms': '/room/api/rooms/',
            })
        self.assertEqual(client.get.call_count, 2)

    def test_no_paths(self):
        client = fake_client()
        self.assertEqual(load_collections(client, {}), {})
        client.get.assert_not_called()

    def test_api_error_is_not_raised(self):
        client = fake_client()
        client.get.side_effect = APIError('Connection failed')
        with self.assertLogs('dashboard.core.loader', level='ERROR'):
            self.assertEqual(load_collections(client, {'rooms': '/room/api/rooms/'}), {'rooms': []})


if __name__ == '__main__':
    unittest.main()
