"""Authentication endpoints."""
from typing import Any

from ..client import TransportClient
from ..models import UserInfo

LOGIN_PATH = "/v1/auth/login"
CURRENT_USER_PATH = "/v1/auth/current"


async def login(client: TransportClient, username: str, password: str) -> dict:
    """Exchange credentials for ``{"token": ..., "user": {...}}``."""
    return await client.post(
        LOGIN_PATH, {"username": username, "password": password}
    )


async def register(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/auth/register", data)


async def logout(client: TransportClient) -> Any:
    return await client.post("/v1/auth/logout")


async def get_current_user(client: TransportClient) -> UserInfo:
    data = await client.get(CURRENT_USER_PATH)
    return UserInfo.model_validate(data)


async def refresh_token(client: TransportClient) -> Any:
    return await client.post("/v1/auth/refresh")


async def request_password_reset(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/auth/request-password-reset", data)


async def verify_reset_token(client: TransportClient, token: str) -> Any:
    return await client.get("/v1/auth/verify-reset-token", params={"token": token})


async def reset_password_with_token(client: TransportClient, data: dict) -> Any:
    return await client.post("/v1/auth/reset-password-with-token", data)
