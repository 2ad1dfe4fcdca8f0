# Utils package
from .decorators import session_required
from .helpers import get_api_client, report_error, format_date, format_datetime, format_currency
