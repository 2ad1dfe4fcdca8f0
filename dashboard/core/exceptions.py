"""
Exceptions raised by the API client and the CRUD controller
"""


class APIError(Exception):
    """A request to the gym API failed"""

    def __init__(self, message, status_code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __str__(self):
        if self.status_code:
            return f'{self.message} (status {self.status_code})'
        return self.message


class SessionExpired(APIError):
    """The API rejected the stored credential (401)"""


class DraftError(ValueError):
    """A draft is not ready to be submitted"""

    def __init__(self, errors):
        self.errors = errors
        super().__init__('; '.join(f'{name}: {msg}' for name, msg in errors.items()))
