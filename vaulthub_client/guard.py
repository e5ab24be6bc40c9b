"""
Navigation Guard — Ordered access policy evaluated before every transition.

Checks, strictly in order, stopping at the first decisive one:

1. the route requires authentication and no credential exists → login
2. the route is login/registration and a credential exists → landing
3. the route requires a role → fetch the current user; lookup failure →
   login, role mismatch → landing
4. the route requires authentication and does not skip the PIN check →
   fetch the security PIN status; lookup failure is tolerated unless the
   credential was rejected (→ login), a missing PIN → enrollment route
5. allow

Local checks run before remote lookups. The PIN check fails open: it nudges
users towards enrollment, the server enforces the PIN on every protected
operation.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import ValidationError

from .api.auth import CURRENT_USER_PATH
from .api.keys import SECURITY_PIN_STATUS_PATH
from .client import TransportClient
from .conf import ClientConfig
from .exceptions import AuthenticationError
from .models import Role, SecurityPinStatus, UserInfo
from .notify import Notifier, LoggingNotifier
from .routes import Route

logger = logging.getLogger("vaulthub.guard")

MSG_USER_LOOKUP_FAILED = "Failed to load user information"
MSG_NO_PERMISSION = "You do not have permission to access this page"


@dataclass(frozen=True)
class Decision:
    """Outcome of one guard evaluation."""

    allowed: bool
    redirect: Optional[str] = None
    reason: str = ""

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True, reason="allowed")

    @classmethod
    def redirect_to(cls, path: str, reason: str) -> "Decision":
        return cls(allowed=False, redirect=path, reason=reason)


class NavigationGuard:
    """Evaluates the access policy of a target route.

    Args:
        client: Transport Client used for the user and PIN lookups.
        config: Supplies the login, registration, landing and enrollment paths.
        notifier: Receives permission and lookup-failure notices.
    """

    def __init__(
        self,
        client: TransportClient,
        config: ClientConfig,
        notifier: Optional[Notifier] = None,
    ):
        self._client = client
        self._config = config
        self._notifier = notifier or LoggingNotifier()

    @property
    def _anonymous_entries(self) -> tuple[str, str]:
        return (self._config.login_path, self._config.register_path)

    async def evaluate(self, route: Route) -> Decision:
        """Decide whether navigation to ``route`` may proceed."""
        meta = route.meta
        token = self._client.session.credentials.get_token()

        if meta.requires_auth and not token:
            logger.debug("Blocking anonymous navigation to %s", route.path)
            return Decision.redirect_to(self._config.login_path, "unauthenticated")

        if route.path in self._anonymous_entries and token:
            return Decision.redirect_to(
                self._config.landing_path, "already-authenticated"
            )

        if meta.requires_role and token:
            decision = await self._check_role(route, meta.requires_role)
            if decision is not None:
                return decision

        if meta.requires_auth and not meta.skip_security_pin_check and token:
            decision = await self._check_security_pin(route)
            if decision is not None:
                return decision

        return Decision.allow()

    async def _check_role(
        self, route: Route, required: Union[Role, str]
    ) -> Optional[Decision]:
        result = await self._client.call("GET", CURRENT_USER_PATH, notify=False)
        user = None
        if result.ok:
            try:
                user = UserInfo.model_validate(result.data)
            except ValidationError as err:
                logger.error("Malformed user information: %s", err)
        if user is None:
            logger.error(
                "Role check for %s failed: %r", route.path, result.error,
            )
            # a rejected credential already produced the session-expired notice
            if not isinstance(result.error, AuthenticationError):
                self._notifier.error(MSG_USER_LOOKUP_FAILED)
            return Decision.redirect_to(self._config.login_path, "user-lookup-failed")

        self._client.session.set_user_info(user)
        if not user.has_role(required):
            logger.info(
                "Role %s denied for %s (requires %s)", user.role, route.path, required,
            )
            self._notifier.error(MSG_NO_PERMISSION)
            return Decision.redirect_to(self._config.landing_path, "role-mismatch")
        return None

    async def _check_security_pin(self, route: Route) -> Optional[Decision]:
        result = await self._client.call("GET", SECURITY_PIN_STATUS_PATH, notify=False)
        status = None
        if result.ok:
            try:
                status = SecurityPinStatus.model_validate(result.data)
            except ValidationError as err:
                logger.error("Malformed security PIN status: %s", err)
        if isinstance(result.error, AuthenticationError):
            return Decision.redirect_to(self._config.login_path, "credential-rejected")
        if status is None:
            logger.warning(
                "Security PIN status unavailable, allowing navigation to %s: %r",
                route.path, result.error,
            )
            return None
        if not status.has_security_pin and route.path != self._config.enrollment_path:
            return Decision.redirect_to(
                self._config.enrollment_path, "security-pin-missing"
            )
        return None
