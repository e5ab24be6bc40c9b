"""VaultHub Client — Session and access-control gateway.

Security Note (Threat Model):
    The navigation guard's security PIN check is a user-experience gate and
    fails open on lookup errors. The server enforces authentication, roles and
    the security PIN on every protected call; the client only mirrors them.
"""

from .version import __version__
from .conf import ClientConfig
from .client import TransportClient, CallResult
from .context import VaultContext
from .exceptions import (
    VaultClientError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    ServerError,
    RequestTimeoutError,
    NetworkError,
    ApplicationError,
    NavigationError,
    RouteNotFound,
)
from .guard import NavigationGuard, Decision
from .models import ResponseEnvelope, Role, SecurityPinStatus, UserInfo
from .notify import Notifier, LoggingNotifier
from .router import Router
from .routes import Route, RouteMeta, RouteTable, DEFAULT_ROUTES
from .session import SessionState
from .storage import CredentialStore, FileStorage, MemoryStorage

__all__ = [
    "__version__",
    "ClientConfig",
    "TransportClient",
    "CallResult",
    "VaultContext",
    "VaultClientError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ServerError",
    "RequestTimeoutError",
    "NetworkError",
    "ApplicationError",
    "NavigationError",
    "RouteNotFound",
    "NavigationGuard",
    "Decision",
    "ResponseEnvelope",
    "Role",
    "SecurityPinStatus",
    "UserInfo",
    "Notifier",
    "LoggingNotifier",
    "Router",
    "Route",
    "RouteMeta",
    "RouteTable",
    "DEFAULT_ROUTES",
    "SessionState",
    "CredentialStore",
    "FileStorage",
    "MemoryStorage",
]
