"""Usage statistics endpoints."""
from typing import Any, Optional

from ..client import TransportClient


async def get_current_statistics(
    client: TransportClient, user_uuid: Optional[str] = None
) -> Any:
    """Statistics of the current user, or of ``user_uuid`` for admins."""
    return await client.get("/v1/statistics/current", params={"user_uuid": user_uuid})


async def get_user_statistics(client: TransportClient, params: Optional[dict] = None) -> Any:
    return await client.get("/v1/statistics/user", params=params)
