"""Form input checks shared by the registration and profile flows.

Patterns are ASCII-only and must match the whole value.
"""
import re

_EMAIL = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}", re.ASCII)
# mainland China mobile numbers
_PHONE = re.compile(r"1[3-9]\d{9}", re.ASCII)
_STRONG_PASSWORD = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}",
    re.ASCII,
)
_USERNAME = re.compile(r"[a-zA-Z0-9_]{4,20}", re.ASCII)
_URL = re.compile(r"(https?://)?([\da-z.-]+)\.([a-z.]{2,6})([/\w .-]*)/?", re.ASCII)
# dotted quad, octets are not range-checked
_IP = re.compile(r"(\d{1,3}\.){3}\d{1,3}", re.ASCII)


def is_email(value: str) -> bool:
    return bool(_EMAIL.fullmatch(value or ""))


def is_phone(value: str) -> bool:
    return bool(_PHONE.fullmatch(value or ""))


def is_strong_password(value: str) -> bool:
    """At least 8 characters with lower, upper, digit and one of ``@$!%*?&``."""
    return bool(_STRONG_PASSWORD.fullmatch(value or ""))


def is_username(value: str) -> bool:
    """4 to 20 letters, digits or underscores."""
    return bool(_USERNAME.fullmatch(value or ""))


def is_url(value: str) -> bool:
    return bool(_URL.fullmatch(value or ""))


def is_ip(value: str) -> bool:
    return bool(_IP.fullmatch(value or ""))
