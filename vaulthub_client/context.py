"""
VaultContext — Lifecycle-scoped owner of the client session objects.

Constructed once at application start and closed at shutdown::

    async with VaultContext.from_env(notifier=ui_notifier) as ctx:
        await ctx.router.push("/vault")
        secrets = await api.secrets.list_secrets(ctx.client)

It owns the Credential Store and the Session State and wires the Transport
Client, the Navigation Guard and the Router around them.
"""
import logging
from typing import Optional

import aiohttp

from .api import auth
from .client import TransportClient
from .conf import ClientConfig
from .exceptions import ApplicationError, AuthenticationError, VaultClientError
from .guard import NavigationGuard
from .models import UserInfo
from .notify import Notifier, LoggingNotifier
from .router import Router
from .routes import DEFAULT_ROUTES, RouteTable
from .session import SessionState
from .storage import BaseStorage, CredentialStore, FileStorage

logger = logging.getLogger("vaulthub.context")


class VaultContext:
    """Owns credentials, session, transport client, guard and router."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        storage: Optional[BaseStorage] = None,
        notifier: Optional[Notifier] = None,
        routes: Optional[RouteTable] = None,
        http: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = config or ClientConfig()
        self.notifier = notifier or LoggingNotifier()
        if storage is None:
            storage = FileStorage(self.config.storage_path)
        self.credentials = CredentialStore(storage)
        self.session = SessionState(self.credentials)
        self.client = TransportClient(
            self.config, self.session, notifier=self.notifier, http=http,
        )
        self.guard = NavigationGuard(self.client, self.config, notifier=self.notifier)
        self.router = Router(
            routes if routes is not None else DEFAULT_ROUTES,
            self.guard,
            max_redirects=self.config.max_redirects,
        )
        # the forced logout on 401 navigates through the same router
        self.client.navigator = self.router

    def __repr__(self) -> str:
        return (
            f'<VaultContext base_url={self.config.base_url!r} '
            f'session={self.session!r}>'
        )

    @classmethod
    def from_env(cls, **kwargs) -> "VaultContext":
        return cls(ClientConfig.from_env(), **kwargs)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> "VaultContext":
        await self.client.open()
        logger.info(
            "VaultHub context started (authenticated=%s)",
            self.session.is_authenticated,
        )
        return self

    async def close(self) -> None:
        await self.client.close()
        logger.debug("VaultHub context closed")

    async def __aenter__(self) -> "VaultContext":
        return await self.start()

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    async def sign_in(self, username: str, password: str) -> Optional[UserInfo]:
        """Log in, start the session and navigate to the landing route.

        Returns:
            The user snapshot returned with the token, if any.

        Raises:
            VaultClientError: the login call failed.
        """
        data = await auth.login(self.client, username, password)
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise ApplicationError("Login response did not include a token")
        user = None
        if data.get("user"):
            user = UserInfo.model_validate(data["user"])
        self.session.login(token)
        if user is not None:
            self.session.set_user_info(user)
        await self.router.push(self.config.landing_path)
        return self.session.current_user

    async def sign_out(self) -> None:
        """Log out remotely, then close the local session whatever happened.

        A failed remote logout is logged and already announced by the
        client; it is never raised since the local session is gone.
        """
        try:
            await auth.logout(self.client)
        except AuthenticationError:
            # the credential was already rejected and the session closed
            logger.debug("Logout with a rejected credential")
        except VaultClientError as err:
            logger.warning("Remote logout failed: %s", err)
        finally:
            self.session.logout()
            await self.router.push(self.config.login_path)
