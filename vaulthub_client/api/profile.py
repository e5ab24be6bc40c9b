"""User profile endpoints."""
from typing import Any, Optional

from ..client import TransportClient


async def get_profile(client: TransportClient) -> Any:
    return await client.get("/v1/profile")


async def create_profile(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/profile", data)


async def update_profile(client: TransportClient, data: dict) -> Any:
    return await client.put("/v1/profile", data)


async def patch_profile(client: TransportClient, data: dict) -> Any:
    return await client.patch("/v1/profile", data)


async def delete_profile(client: TransportClient) -> Any:
    return await client.delete("/v1/profile")


async def list_profiles(client: TransportClient, params: Optional[dict] = None) -> Any:
    return await client.get("/v1/admin/profiles", params=params)


async def get_user_profile(client: TransportClient, user_id: int) -> Any:
    return await client.get(f"/v1/admin/users/{user_id}/profile")


async def update_user_profile(client: TransportClient, user_id: int, data: dict) -> Any:
    return await client.put(f"/v1/admin/users/{user_id}/profile", data)
