"""
Tests for client storage backends and CredentialStore.
"""
import os
import stat

import pytest

from vaulthub_client.storage import CredentialStore, FileStorage, MemoryStorage


@pytest.fixture(params=["memory", "file"])
def backend(request, tmp_path):
    if request.param == "memory":
        return MemoryStorage()
    return FileStorage(tmp_path / "client" / "storage.json")


class TestSlots:

    def test_missing_slot(self, backend):
        assert backend.get_item("nope") is None

    def test_set_get_remove(self, backend):
        backend.set_item("k", "v")
        assert backend.get_item("k") == "v"
        backend.remove_item("k")
        assert backend.get_item("k") is None

    def test_remove_missing_is_noop(self, backend):
        backend.remove_item("nope")

    def test_clear(self, backend):
        backend.set_item("a", "1")
        backend.set_item("b", "2")
        backend.clear()
        assert backend.get_item("a") is None
        assert backend.get_item("b") is None


class TestJsonValues:

    def test_structured_value(self, backend):
        backend.set_value("prefs", {"theme": "dark", "page_size": 20})
        assert backend.get_value("prefs") == {"theme": "dark", "page_size": 20}

    def test_raw_string_fallback(self, backend):
        backend.set_item("raw", "not json at all")
        assert backend.get_value("raw") == "not json at all"

    def test_missing_value(self, backend):
        assert backend.get_value("nope") is None


class TestFileStorage:

    def test_survives_new_instance(self, tmp_path):
        path = tmp_path / "storage.json"
        FileStorage(path).set_item("vaulthub_token", "abc")
        assert FileStorage(path).get_item("vaulthub_token") == "abc"

    def test_owner_only_permissions(self, tmp_path):
        path = tmp_path / "storage.json"
        FileStorage(path).set_item("vaulthub_token", "abc")
        mode = stat.S_IMODE(os.stat(path).st_mode)
        assert mode == 0o600

    def test_temp_file_owner_only_while_written(self, tmp_path, monkeypatch):
        """The token never sits in a file readable by other users."""
        old_umask = os.umask(0o022)
        seen = []
        real_fdopen = os.fdopen

        def recording_fdopen(fd, *args, **kwargs):
            seen.append(stat.S_IMODE(os.fstat(fd).st_mode))
            return real_fdopen(fd, *args, **kwargs)

        monkeypatch.setattr(os, "fdopen", recording_fdopen)
        try:
            path = tmp_path / "storage.json"
            (tmp_path / "storage.json.tmp").write_bytes(b"stale")
            os.chmod(tmp_path / "storage.json.tmp", 0o644)
            FileStorage(path).set_item("vaulthub_token", "abc")
        finally:
            os.umask(old_umask)
        assert seen == [0o600]

    def test_directory_owner_only(self, tmp_path):
        path = tmp_path / "vaulthub" / "storage.json"
        FileStorage(path).set_item("vaulthub_token", "abc")
        assert stat.S_IMODE(os.stat(path.parent).st_mode) == 0o700

    def test_corrupted_file_reads_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{broken")
        storage = FileStorage(path)
        assert storage.get_item("vaulthub_token") is None
        storage.set_item("vaulthub_token", "abc")
        assert storage.get_item("vaulthub_token") == "abc"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("")
        assert FileStorage(path).get_item("k") is None


class TestCredentialStore:

    def test_token_lifecycle(self, backend):
        store = CredentialStore(backend)
        assert store.has_token() is False
        store.set_token("abc")
        assert store.get_token() == "abc"
        assert backend.get_item("vaulthub_token") == "abc"
        store.remove_token()
        assert store.get_token() is None

    def test_empty_token_rejected(self, credentials):
        with pytest.raises(ValueError):
            credentials.set_token("")

    def test_empty_slot_is_no_token(self):
        store = CredentialStore(MemoryStorage({"vaulthub_token": ""}))
        assert store.get_token() is None

    def test_custom_slot(self, storage):
        store = CredentialStore(storage, key="other")
        store.set_token("abc")
        assert storage.get_item("other") == "abc"

    def test_remove_twice(self, credentials):
        credentials.set_token("abc")
        credentials.remove_token()
        credentials.remove_token()
        assert credentials.get_token() is None
