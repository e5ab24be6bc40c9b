"""Encrypted secret endpoints."""
from typing import Any, Optional

from ..client import TransportClient


async def list_secrets(client: TransportClient, params: Optional[dict] = None) -> Any:
    return await client.get("/v1/secrets", params=params)


async def create_secret(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/secrets", data)


async def decrypt_secret(client: TransportClient, secret_uuid: str, data: dict) -> Any:
    """Return the plaintext of a secret; ``data`` carries the security PIN."""
    return await client.post(f"/v1/secrets/{secret_uuid}/decrypt", data)


async def delete_secret(client: TransportClient, secret_uuid: str) -> Any:
    return await client.delete(f"/v1/secrets/{secret_uuid}")
