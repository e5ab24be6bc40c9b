import logging
from typing import Optional

from .models import UserInfo
from .storage import CredentialStore

logger = logging.getLogger("vaulthub.session")


class SessionState:
    """In-memory reflection of the authenticated session.

    Seeded once from the :class:`CredentialStore` at construction. Only
    ``login()``, ``logout()`` and ``set_user_info()`` mutate it; the transport
    client's forced logout goes through ``logout()`` so the durable slot and
    this reflection never disagree.
    """

    def __init__(self, credentials: CredentialStore) -> None:
        self._credentials = credentials
        self._token: Optional[str] = credentials.get_token()
        self._user: Optional[UserInfo] = None

    def __repr__(self) -> str:
        return (
            f'<VaultHub-Session [authenticated:{self.is_authenticated}] '
            f'user={self.current_user!r}>'
        )

    # --- Properties ---

    @property
    def credentials(self) -> CredentialStore:
        return self._credentials

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    @property
    def current_user(self) -> Optional[UserInfo]:
        # a user snapshot is never trusted without a token
        if not self._token:
            return None
        return self._user

    # --- Actions ---

    def login(self, token: str) -> None:
        """Persist ``token`` and mark the session authenticated."""
        self._credentials.set_token(token)
        self._token = token
        self._user = None
        logger.info("Session started")

    def logout(self) -> None:
        """Clear the durable credential, the token and the user snapshot.

        Calling it on an already closed session is a no-op.
        """
        was_authenticated = self.is_authenticated
        self._credentials.remove_token()
        self._token = None
        self._user = None
        if was_authenticated:
            logger.info("Session closed")

    def set_user_info(self, user: UserInfo) -> None:
        """Record a freshly fetched user snapshot."""
        if not self._token:
            logger.debug("Ignoring user snapshot for an anonymous session")
            return
        self._user = user

    def clear_user_info(self) -> None:
        self._user = None
