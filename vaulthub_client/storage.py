"""
Durable client storage and the Credential Store.

Provides a small named-slot storage API:
- ``get_item(key)`` / ``set_item(key, value)`` / ``remove_item(key)`` / ``clear()``
  — raw string slots
- ``get_value(key)`` / ``set_value(key, value)`` — JSON encoded values

Two backends are available: :class:`FileStorage` keeps every slot in one JSON
document on disk, :class:`MemoryStorage` keeps them in process memory.

Security Note:
    Never log slot values. The bearer token lives in the ``vaulthub_token``
    slot as a plain string.
"""
import os
import logging
from pathlib import Path
from typing import Any, Optional, Union

import orjson
import jsonpickle

from .conf import TOKEN_KEY

logger = logging.getLogger("vaulthub.storage")


class BaseStorage:
    """Named string slots with JSON helpers on top."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def get_value(self, key: str) -> Any:
        """Return the decoded value of a slot.

        A slot that does not hold valid JSON is returned as the raw string.
        """
        raw = self.get_item(key)
        if raw is None:
            return None
        try:
            return jsonpickle.decode(raw)
        except ValueError:
            return raw

    def set_value(self, key: str, value: Any) -> None:
        """Encode ``value`` with jsonpickle and store it.

        Raises:
            RuntimeError: Error converting data to json.
        """
        try:
            encoded = jsonpickle.encode(value)
        except Exception as err:
            raise RuntimeError(err) from err
        self.set_item(key, encoded)


class MemoryStorage(BaseStorage):
    """Process-local storage, lost at exit."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._slots: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._slots[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._slots.pop(key, None)

    def clear(self) -> None:
        self._slots.clear()

    def __repr__(self) -> str:
        return f"<MemoryStorage slots={sorted(self._slots)}>"


class FileStorage(BaseStorage):
    """Storage persisted as a JSON document on disk.

    The document is re-read on every access so several client processes
    sharing one file observe each other's writes (last write wins).
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return {}
        if not raw.strip():
            return {}
        try:
            slots = orjson.loads(raw)
        except orjson.JSONDecodeError as err:
            logger.error("Corrupted storage file %s: %s", self._path, err)
            return {}
        if not isinstance(slots, dict):
            logger.error("Storage file %s does not hold an object", self._path)
            return {}
        return slots

    def _dump(self, slots: dict[str, str]) -> None:
        self._path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        # the slot may hold a bearer token: owner-only from creation
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        # a leftover temp file keeps its old mode
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "wb") as fh:
            fh.write(orjson.dumps(slots))
        os.replace(tmp, self._path)

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        slots = self._load()
        slots[key] = str(value)
        self._dump(slots)
        logger.debug("Storage set: slot=%s", key)

    def remove_item(self, key: str) -> None:
        slots = self._load()
        if key in slots:
            del slots[key]
            self._dump(slots)
            logger.debug("Storage remove: slot=%s", key)

    def clear(self) -> None:
        if self._path.exists():
            self._dump({})

    def __repr__(self) -> str:
        return f"<FileStorage path={str(self._path)!r}>"


class CredentialStore:
    """Holds the current bearer token in one durable slot."""

    def __init__(self, storage: BaseStorage, key: str = TOKEN_KEY):
        self._storage = storage
        self._key = key

    @property
    def storage(self) -> BaseStorage:
        return self._storage

    def get_token(self) -> Optional[str]:
        return self._storage.get_item(self._key) or None

    def set_token(self, token: str) -> None:
        if not token:
            raise ValueError("Bearer token cannot be empty")
        self._storage.set_item(self._key, token)

    def remove_token(self) -> None:
        self._storage.remove_item(self._key)

    def has_token(self) -> bool:
        return self.get_token() is not None
