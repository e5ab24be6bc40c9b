"""
Wire models consumed from the VaultHub API.

Every remote reply is a :class:`ResponseEnvelope`; the payloads used by the
navigation guard are :class:`UserInfo` and :class:`SecurityPinStatus`.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

SUCCESS_CODE = 200
UNAUTHORIZED_CODE = 401


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"


class ResponseEnvelope(BaseModel):
    """Canonical shape of every remote reply."""

    model_config = ConfigDict(extra="allow")

    code: int
    data: Any = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE

    @property
    def unauthorized(self) -> bool:
        return self.code == UNAUTHORIZED_CODE


class UserInfo(BaseModel):
    """Read-only snapshot of the current user.

    Profile fields other than ``role`` are optional and unknown keys are
    kept, so newer servers do not break the client.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    role: Union[Role, str]
    id: Optional[int] = None
    uuid: Optional[str] = None
    username: Optional[str] = None
    status: Optional[int] = None
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_role(self, role: Union[Role, str]) -> bool:
        return _role_value(self.role) == _role_value(role)


class SecurityPinStatus(BaseModel):
    has_security_pin: bool


def _role_value(role: Union[Role, str]) -> str:
    return role.value if isinstance(role, Role) else str(role)
