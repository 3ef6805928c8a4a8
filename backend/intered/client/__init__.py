"""Client-side data layer of the admin dashboard.

Build one ``AppContext`` per application root and hand it to the hooks in
``intered.client.hooks``, the dialogs and the pages.
"""

from .auth import AuthContext, use_auth
from .config import ClientSettings, get_client_settings
from .context import AppContext
from .errors import ApiRequestError, AuthProviderMissingError, DialogStateError
from .http import ApiClient
from .mutations import Mutation
from .notifications import Toast, ToastCenter
from .query_client import CacheEvent, QueryClient, QueryObserver, QueryState
from .result import Err, Ok, Result

__all__ = [
    "ApiClient",
    "ApiRequestError",
    "AppContext",
    "AuthContext",
    "AuthProviderMissingError",
    "CacheEvent",
    "ClientSettings",
    "DialogStateError",
    "Err",
    "Mutation",
    "Ok",
    "QueryClient",
    "QueryObserver",
    "QueryState",
    "Result",
    "Toast",
    "ToastCenter",
    "get_client_settings",
    "use_auth",
]
