"""User administration endpoints."""
from typing import Any, Optional

from ..client import TransportClient


async def list_users(client: TransportClient, params: Optional[dict] = None) -> Any:
    return await client.get("/v1/users", params=params)


async def get_user(client: TransportClient, user_uuid: str) -> Any:
    return await client.get(f"/v1/users/{user_uuid}")


async def create_user(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/users", data)


async def update_user(client: TransportClient, user_uuid: str, data: dict) -> Any:
    return await client.put(f"/v1/users/{user_uuid}", data)


async def delete_user(client: TransportClient, user_uuid: str) -> Any:
    return await client.delete(f"/v1/users/{user_uuid}")


async def change_password(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/users/change-password", data)
