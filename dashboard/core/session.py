"""
API Session - the credential shared by the API client and the auth gate
"""

from typing import Dict, Optional

SESSION_KEY = 'api_session'


class ApiSession:
    """Current API credential.

    Written only by the auth views (login/logout), read by the API client.
    Stored in the signed Flask session cookie between requests.
    """

    def __init__(self, token: Optional[str] = None, username: Optional[str] = None):
        self.token = token
        self.username = username

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def login(self, token: str, username: str):
        """Start a session with a freshly exchanged token"""
        self.token = token
        self.username = username

    def logout(self):
        """Forget the credential"""
        self.token = None
        self.username = None

    def to_dict(self) -> Dict:
        return {'token': self.token, 'username': self.username}

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> 'ApiSession':
        data = data or {}
        return cls(token=data.get('token'), username=data.get('username'))

    # ============= Flask session storage =============

    @classmethod
    def load(cls, store) -> 'ApiSession':
        """Read the session from a mapping (normally flask.session)"""
        return cls.from_dict(store.get(SESSION_KEY))

    def save(self, store):
        """Write the session to a mapping, removing it when logged out"""
        if self.is_authenticated:
            store[SESSION_KEY] = self.to_dict()
        else:
            store.pop(SESSION_KEY, None)

    def __repr__(self):
        state = 'authenticated' if self.is_authenticated else 'anonymous'
        return f'<ApiSession {self.username or "-"} {state}>'
