# Core modules
from .exceptions import APIError, SessionExpired, DraftError
from .session import ApiSession
from .api_client import APIClient, item_path
from .lookup import UNKNOWN, resolve, LookupIndex
from .loader import load_collections
from .crud import ResourcePage
