"""Email verification endpoints."""
from typing import Any

from ..client import TransportClient


async def send_verification_code(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/email/send-code", data)


async def verify_code(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/email/verify-code", data)
