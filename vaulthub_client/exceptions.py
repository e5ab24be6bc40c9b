"""
Client Exceptions.

Every failure of an outbound call is reported as exactly one subclass of
:class:`VaultClientError`. Navigation failures derive from
:class:`NavigationError`.
"""
from typing import Optional


class VaultClientError(Exception):
    """Base exception for classified call failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"status={self.status!r}, code={self.code!r})"
        )


class AuthenticationError(VaultClientError):
    """Raised when the server declares the credential invalid."""


class PermissionDeniedError(VaultClientError, PermissionError):
    """Raised on HTTP 403."""


class NotFoundError(VaultClientError):
    """Raised on HTTP 404."""


class ServerError(VaultClientError):
    """Raised on HTTP 5xx."""


class RequestTimeoutError(VaultClientError, TimeoutError):
    """Raised when no response arrived before the call timeout."""


class NetworkError(VaultClientError):
    """Raised when no response was received at all."""


class ApplicationError(VaultClientError):
    """Raised when the envelope carries a non-success application code."""


class NavigationError(Exception):
    """Base exception for router failures."""


class RouteNotFound(NavigationError):
    """Raised when a path matches no declared route."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No route declared for path {path!r}")
        self.path = path
