"""
Client Configuration — Validated settings for the VaultHub client.

Reads settings from environment variables:
    VAULTHUB_API_BASE_URL = <http(s) URL of the API root>
    VAULTHUB_TIMEOUT = <seconds, float>
    VAULTHUB_STORAGE_PATH = <path of the durable client storage file>

Security Note:
    Never log the bearer token. Only log slot names and paths.
"""
import os
import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger("vaulthub.conf")

# Storage slot holding the bearer token.
TOKEN_KEY = "vaulthub_token"

DEFAULT_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 10.0
DEFAULT_STORAGE_PATH = Path.home() / ".vaulthub" / "storage.json"

LOGIN_PATH = "/login"
REGISTER_PATH = "/register"
LANDING_PATH = "/vault"
ENROLLMENT_PATH = "/setup-security-pin"


class ClientConfig(BaseModel):
    """Validated client configuration."""

    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    storage_path: Path = Field(default=DEFAULT_STORAGE_PATH)
    login_path: str = Field(default=LOGIN_PATH)
    register_path: str = Field(default=REGISTER_PATH)
    landing_path: str = Field(default=LANDING_PATH)
    enrollment_path: str = Field(default=ENROLLMENT_PATH)
    max_redirects: int = Field(default=10, ge=1, le=100)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Only http(s) endpoints are supported."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    @field_validator("login_path", "register_path", "landing_path", "enrollment_path")
    @classmethod
    def validate_route_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"route path must start with '/', got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_landing(self) -> "ClientConfig":
        """The landing route cannot be one of the anonymous entry routes."""
        if self.landing_path in (self.login_path, self.register_path):
            raise ValueError(
                f"landing_path {self.landing_path} cannot be the login "
                "or registration route"
            )
        return self

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create ClientConfig by loading values from environment.

        Returns:
            Populated ClientConfig instance.
        """
        values = {}
        base_url = os.environ.get("VAULTHUB_API_BASE_URL")
        if base_url:
            values["base_url"] = base_url
        timeout = os.environ.get("VAULTHUB_TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)
        storage_path = os.environ.get("VAULTHUB_STORAGE_PATH")
        if storage_path:
            values["storage_path"] = Path(storage_path).expanduser()
        config = cls(**values)
        logger.debug(
            "Loaded client config: base_url=%s timeout=%s storage=%s",
            config.base_url, config.timeout, config.storage_path,
        )
        return config
