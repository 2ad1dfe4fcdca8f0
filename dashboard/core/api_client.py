"""
API Client - Communicate with the gym REST API
"""

import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import APIError, SessionExpired
from .session import ApiSession

logger = logging.getLogger(__name__)

TOKEN_KEYS = ('token', 'access', 'key')


def item_path(collection: str, record_id) -> str:
    """Item endpoint for a record in a collection: /x/api/things/ -> /x/api/things/5/"""
    return f"{collection.rstrip('/')}/{record_id}/"


class APIClient:
    """Handle API communication with the gym backend"""

    def __init__(self, base_url: str, session: ApiSession = None,
                 auth_scheme: str = 'Bearer', login_path: str = '/user/api/login/',
                 timeout: Optional[float] = None):
        self.base_url = base_url.rstrip('/')
        self.session = session or ApiSession()
        self.auth_scheme = auth_scheme
        self.login_path = login_path
        self.timeout = timeout

    def _get_headers(self) -> Dict:
        """Get request headers with the session credential"""
        headers = {
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        }
        if self.session.is_authenticated:
            headers['Authorization'] = f'{self.auth_scheme} {self.session.token}'
        return headers

    def _make_request(self, method: str, path: str, data: Dict = None) -> Any:
        """Make HTTP request to API, raising APIError on any failure"""
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            if method == 'GET':
                response = requests.get(url, headers=self._get_headers(),
                                        timeout=self.timeout)
            elif method == 'POST':
                response = requests.post(url, headers=self._get_headers(),
                                         json=data, timeout=self.timeout)
            elif method == 'PUT':
                response = requests.put(url, headers=self._get_headers(),
                                        json=data, timeout=self.timeout)
            elif method == 'DELETE':
                response = requests.delete(url, headers=self._get_headers(),
                                           timeout=self.timeout)
            else:
                raise ValueError(f'Unknown method: {method}')
        except requests.exceptions.ConnectionError as e:
            raise APIError(f'Could not connect to {self.base_url}') from e
        except requests.exceptions.Timeout as e:
            raise APIError(f'Request to {path} timed out') from e
        except requests.exceptions.RequestException as e:
            raise APIError(f'Request to {path} failed: {e}') from e

        if response.status_code == 401:
            raise SessionExpired('Session rejected by the API', response.status_code)

        if not 200 <= response.status_code < 300:
            logger.warning(f"{method} {path} returned {response.status_code}")
            raise APIError('Request failed', response.status_code, _safe_json(response))

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise APIError(f'Invalid JSON from {path}', response.status_code) from e

    # ============= Verbs =============

    def get(self, path: str) -> Any:
        return self._make_request('GET', path)

    def post(self, path: str, body: Dict) -> Any:
        return self._make_request('POST', path, body)

    def put(self, path: str, body: Dict) -> Any:
        return self._make_request('PUT', path, body)

    def delete(self, path: str) -> None:
        self._make_request('DELETE', path)

    # ============= Auth =============

    def login(self, username: str, password: str) -> str:
        """Exchange credentials for a token and store it on the session"""
        self.session.logout()
        try:
            data = self.post(self.login_path, {'username': username, 'password': password})
        except SessionExpired as e:
            raise APIError('Invalid username or password', e.status_code) from e

        token = None
        if isinstance(data, dict):
            token = next((data[key] for key in TOKEN_KEYS if data.get(key)), None)
        if not token:
            raise APIError('Login response did not contain a token')

        self.session.login(token, username)
        logger.info(f"Logged in to API as {username}")
        return token

    def test_connection(self) -> tuple:
        """Check whether the API base URL answers at all"""
        try:
            requests.get(self.base_url, timeout=self.timeout or 10)
            return True, 'Connected'
        except requests.exceptions.RequestException as e:
            return False, str(e)


def _safe_json(response):
    try:
        return response.json()
    except ValueError:
        return response.text
