"""System configuration endpoints (admin only)."""
from typing import Any

from ..client import TransportClient


async def list_configs(client: TransportClient) -> Any:
    return await client.get("/v1/configs")


async def get_config(client: TransportClient, key: str) -> Any:
    return await client.get(f"/v1/configs/{key}")


async def update_config(client: TransportClient, key: str, data: dict) -> Any:
    return await client.put(f"/v1/configs/{key}", data)


async def batch_update_configs(client: TransportClient, data: dict) -> Any:
    return await client.put("/v1/configs/batch", data)


async def reload_configs(client: TransportClient) -> Any:
    return await client.post("/v1/configs/reload")
