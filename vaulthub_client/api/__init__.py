"""Resource API wrappers.

Thin coroutines over :class:`~vaulthub_client.client.TransportClient`; each
takes the client first and returns the envelope ``data``.
"""
from . import audit, auth, configs, email, keys, profile, secrets, statistics, users

__all__ = [
    "audit",
    "auth",
    "configs",
    "email",
    "keys",
    "profile",
    "secrets",
    "statistics",
    "users",
]
