"""
Transport Client — Single chokepoint for calls to the VaultHub API.

Every outbound call:
- attaches ``Authorization: Bearer <token>`` when the Credential Store holds one
- unwraps the ``{code, data, message}`` response envelope
- converts application and transport failures into one classified
  :class:`~vaulthub_client.exceptions.VaultClientError`
- on an authentication failure, closes the session, tells the user and
  navigates to the login route

``call()`` returns a typed :class:`CallResult`; ``send()`` unwraps it and
raises the classified error. No call is ever retried.

Security Note:
    Never log the bearer token or request payloads. Only log method, path
    and the classification of a failure.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import aiohttp
import orjson
from pydantic import ValidationError

from .conf import ClientConfig
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
)
from .models import ResponseEnvelope
from .notify import Notifier, LoggingNotifier
from .session import SessionState

logger = logging.getLogger("vaulthub.client")

MSG_SESSION_EXPIRED = "Session expired, please log in again"
MSG_UNAUTHORIZED = "Unauthorized"
MSG_FORBIDDEN = "You do not have permission to access this resource"
MSG_NOT_FOUND = "The requested resource does not exist"
MSG_SERVER_ERROR = "Server error, please try again later"
MSG_TIMEOUT = "Request timed out, please try again later"
MSG_NETWORK = "Network error, please check your connection"
MSG_REQUEST_FAILED = "Request failed"
MSG_INVALID_RESPONSE = "Invalid response from server"


class Navigator(Protocol):
    async def push(self, path: str) -> Any: ...


@dataclass(frozen=True)
class CallResult:
    """Outcome of one call: either ``data`` or a classified ``error``."""

    data: Any = None
    error: Optional[VaultClientError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.data


def _clean_params(params: dict[str, Any]) -> dict[str, str]:
    """Drop unset query parameters and render the rest as strings."""
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = str(value)
    return cleaned


def _body_message(body: bytes) -> Optional[str]:
    try:
        decoded = orjson.loads(body) if body else None
    except orjson.JSONDecodeError:
        return None
    if isinstance(decoded, dict):
        message = decoded.get("message")
        return str(message) if message else None
    return None


class TransportClient:
    """Async HTTP client bound to a :class:`SessionState`.

    Args:
        config: Validated client configuration.
        session: Session State whose Credential Store is read on every call.
        notifier: Receives one user-visible notice per classified failure.
        navigator: Router used for the forced redirect to the login route.
            May be assigned after construction.
        http: Optional externally managed ``aiohttp.ClientSession``.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: SessionState,
        notifier: Optional[Notifier] = None,
        navigator: Optional[Navigator] = None,
        http: Optional[aiohttp.ClientSession] = None,
    ):
        self._config = config
        self._session = session
        self._notifier = notifier or LoggingNotifier()
        self.navigator = navigator
        self._http = http
        self._owns_http = http is None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def open(self) -> "TransportClient":
        if self._http is None or self._http.closed:
            self._http = aiohttp.ClientSession()
            self._owns_http = True
        return self

    async def close(self) -> None:
        if self._http is not None and self._owns_http and not self._http.closed:
            await self._http.close()
        self._http = None

    async def __aenter__(self) -> "TransportClient":
        return await self.open()

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @property
    def session(self) -> SessionState:
        return self._session

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        token = self._session.credentials.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _expire_session(self) -> None:
        """Forced logout. Safe to run several times in a row."""
        self._session.logout()
        self._notifier.error(MSG_SESSION_EXPIRED)
        if self.navigator is not None:
            # the caller still receives the AuthenticationError
            try:
                await self.navigator.push(self._config.login_path)
            except NavigationError as err:
                logger.error("Navigation to login after expiry failed: %s", err)

    def _fail(self, method: str, path: str, error: VaultClientError) -> CallResult:
        logger.warning(
            "%s %s failed: %s (status=%s code=%s)",
            method, path, error.__class__.__name__, error.status, error.code,
        )
        return CallResult(error=error)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    async def _classify_status(
        self, method: str, path: str, status: int, body: bytes
    ) -> CallResult:
        """Classify a reply whose HTTP status is not 2xx."""
        message = _body_message(body)
        if status == 401:
            await self._expire_session()
            logger.warning("%s %s rejected the credential", method, path)
            return CallResult(
                error=AuthenticationError(message or MSG_UNAUTHORIZED, status=status)
            )
        if status == 403:
            return self._fail(
                method, path, PermissionDeniedError(MSG_FORBIDDEN, status=status)
            )
        if status == 404:
            return self._fail(
                method, path, NotFoundError(MSG_NOT_FOUND, status=status)
            )
        if status >= 500:
            return self._fail(
                method, path, ServerError(MSG_SERVER_ERROR, status=status)
            )
        return self._fail(
            method, path,
            ApplicationError(message or MSG_REQUEST_FAILED, status=status),
        )

    async def _classify_envelope(
        self, method: str, path: str, status: int, body: bytes
    ) -> CallResult:
        """Classify a 2xx reply by its envelope code."""
        try:
            envelope = ResponseEnvelope.model_validate(orjson.loads(body))
        except (orjson.JSONDecodeError, ValidationError):
            return self._fail(
                method, path, ApplicationError(MSG_INVALID_RESPONSE, status=status)
            )
        if envelope.ok:
            return CallResult(data=envelope.data)
        if envelope.unauthorized:
            await self._expire_session()
            logger.warning("%s %s rejected the credential", method, path)
            return CallResult(
                error=AuthenticationError(
                    envelope.message or MSG_UNAUTHORIZED,
                    status=status,
                    code=envelope.code,
                )
            )
        return self._fail(
            method, path,
            ApplicationError(
                envelope.message or MSG_REQUEST_FAILED,
                status=status,
                code=envelope.code,
            ),
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def call(
        self,
        method: str,
        path: str,
        payload: Any = None,
        params: Optional[dict[str, Any]] = None,
        notify: bool = True,
    ) -> CallResult:
        """Perform one call and return its classified outcome.

        Args:
            method: HTTP method.
            path: API path relative to ``base_url`` (e.g. ``/v1/secrets``).
            payload: JSON body, if any.
            params: Query parameters; ``None`` values are dropped.
            notify: Show the failure notice to the user. The session-expired
                notice of a forced logout is always shown.

        Returns:
            CallResult carrying either the envelope ``data`` or the error.
        """
        result = await self._dispatch(method.upper(), path, payload, params)
        error = result.error
        if error is not None and notify and not isinstance(error, AuthenticationError):
            self._notifier.error(error.message)
        return result

    async def _dispatch(
        self,
        method: str,
        path: str,
        payload: Any,
        params: Optional[dict[str, Any]],
    ) -> CallResult:
        if self._http is None:
            raise RuntimeError("TransportClient is not open")
        kwargs: dict[str, Any] = {"headers": self._headers()}
        if payload is not None:
            kwargs["data"] = orjson.dumps(payload)
        if params:
            kwargs["params"] = _clean_params(params)
        try:
            async with self._http.request(
                method,
                self._url(path),
                timeout=aiohttp.ClientTimeout(total=self._config.timeout),
                **kwargs,
            ) as response:
                status = response.status
                body = await response.read()
        except asyncio.TimeoutError:
            return self._fail(method, path, RequestTimeoutError(MSG_TIMEOUT))
        except aiohttp.ClientError as err:
            logger.debug("%s %s transport error: %s", method, path, err)
            return self._fail(method, path, NetworkError(MSG_NETWORK))

        if not 200 <= status < 300:
            return await self._classify_status(method, path, status, body)
        return await self._classify_envelope(method, path, status, body)

    async def send(
        self,
        method: str,
        path: str,
        payload: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Perform one call and return its ``data``.

        Raises:
            VaultClientError: the classified failure of the call.
        """
        result = await self.call(method, path, payload=payload, params=params)
        return result.unwrap()

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.send("GET", path, params=params)

    async def post(
        self, path: str, payload: Any = None, params: Optional[dict[str, Any]] = None
    ) -> Any:
        return await self.send("POST", path, payload=payload, params=params)

    async def put(self, path: str, payload: Any = None) -> Any:
        return await self.send("PUT", path, payload=payload)

    async def patch(self, path: str, payload: Any = None) -> Any:
        return await self.send("PATCH", path, payload=payload)

    async def delete(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self.send("DELETE", path, params=params)
