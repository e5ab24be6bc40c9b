"""Audit log endpoints."""
from typing import Any, Optional

from ..client import TransportClient


async def query_audit_logs(client: TransportClient, params: Optional[dict] = None) -> Any:
    return await client.get("/v1/audit/logs", params=params)


async def export_statistics(client: TransportClient, params: Optional[dict] = None) -> Any:
    return await client.get("/v1/audit/logs/export", params=params)


async def export_operation_statistics(
    client: TransportClient, params: Optional[dict] = None
) -> Any:
    return await client.get("/v1/audit/operations/export", params=params)
