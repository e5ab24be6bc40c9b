"""Encryption key and security PIN endpoints."""
from typing import Any

from ..client import TransportClient
from ..models import SecurityPinStatus

SECURITY_PIN_STATUS_PATH = "/v1/auth/security-pin-status"


async def create_encryption_key(client: TransportClient, data: dict) -> Any:
    """Create the user's encryption key, setting the security PIN.

    The reply carries the 24-word recovery mnemonic; it is shown once.
    """
    return await client.post("/v1/keys/create", data)


async def get_security_pin_status(client: TransportClient) -> SecurityPinStatus:
    data = await client.get(SECURITY_PIN_STATUS_PATH)
    return SecurityPinStatus.model_validate(data)


async def reset_security_pin(client: TransportClient, data: dict) -> Any:
    """Reset the security PIN with the recovery mnemonic.

    Returns a new mnemonic; the old one stops working.
    """
    return await client.post("/v1/auth/reset-password", data)


async def verify_recovery_key(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/keys/verify-recovery", data)


async def rotate_key(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/keys/rotate", data)


async def get_rotation_status(client: TransportClient) -> Any:
    return await client.get("/v1/keys/rotation-status")
