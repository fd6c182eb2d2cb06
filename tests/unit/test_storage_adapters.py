"""
Unit tests for storage adapters (no Redis or Vault server needed).
"""

from unittest.mock import MagicMock

import pytest

from boardroom_client.adapters.memory_storage import MemoryStorageAdapter
from boardroom_client.adapters.redis_storage import RedisStorageAdapter
from boardroom_client.adapters.vault_storage import VaultStorageAdapter


class FakeRedis:
    """The subset of redis.Redis the adapter uses."""

    def __init__(self, fail: bool = False):
        self.data = {}
        self.fail = fail

    def _check(self):
        if self.fail:
            raise ConnectionError("Redis is down")

    def get(self, key):
        self._check()
        return self.data.get(key)

    def set(self, key, value):
        self._check()
        self.data[key] = value

    def delete(self, key):
        self._check()
        self.data.pop(key, None)


def test_memory_storage():
    """Test memory storage basics."""
    storage = MemoryStorageAdapter(initial={"a": "1"})

    assert storage.get_item("a") == "1"
    storage.set_item("b", "2")
    storage.remove_item("a")
    storage.remove_item("missing")

    assert storage.get_item("a") is None
    assert storage.keys() == ["b"]


def test_redis_storage_prefixes_keys():
    """Test Redis reads and writes under the prefix."""
    redis_client = FakeRedis()
    storage = RedisStorageAdapter(redis_client=redis_client, prefix="test:")

    storage.set_item("auth-storage", "{}")

    assert redis_client.data == {"test:auth-storage": "{}"}
    assert storage.get_item("auth-storage") == "{}"

    storage.remove_item("auth-storage")
    assert storage.get_item("auth-storage") is None


def test_redis_storage_decodes_bytes():
    redis_client = FakeRedis()
    redis_client.data["boardroom:k"] = b"value"
    storage = RedisStorageAdapter(redis_client=redis_client)

    assert storage.get_item("k") == "value"


def test_redis_storage_is_best_effort():
    """Test that backend failures read as a missing key."""
    storage = RedisStorageAdapter(redis_client=FakeRedis(fail=True))

    storage.set_item("k", "v")
    storage.remove_item("k")
    assert storage.get_item("k") is None


@pytest.fixture
def hvac_exceptions():
    return pytest.importorskip("hvac.exceptions")


@pytest.fixture
def vault_client(hvac_exceptions):
    client = MagicMock()
    client.is_authenticated.return_value = True
    return client


def test_vault_storage_write(vault_client):
    """Test writing a value as a KV v2 secret."""
    storage = VaultStorageAdapter(client=vault_client, path_prefix="kiosk")

    storage.set_item("auth-storage", '{"accessToken": "A1"}')

    vault_client.secrets.kv.v2.create_or_update_secret.assert_called_once_with(
        path="kiosk/auth-storage",
        secret={"value": '{"accessToken": "A1"}'},
        mount_point="secret",
    )


def test_vault_storage_read(vault_client):
    vault_client.secrets.kv.v2.read_secret_version.return_value = {
        "data": {"data": {"value": "stored"}}
    }
    storage = VaultStorageAdapter(client=vault_client)

    assert storage.get_item("auth-storage") == "stored"
    vault_client.secrets.kv.v2.read_secret_version.assert_called_once_with(
        path="boardroom/auth-storage",
        mount_point="secret",
        raise_on_deleted_version=True,
    )


def test_vault_storage_missing_secret(vault_client, hvac_exceptions, caplog):
    """Test that a missing secret reads as None without a warning."""
    vault_client.secrets.kv.v2.read_secret_version.side_effect = hvac_exceptions.InvalidPath("no secret")
    storage = VaultStorageAdapter(client=vault_client)

    with caplog.at_level("WARNING"):
        assert storage.get_item("auth-storage") is None

    assert not caplog.records


def test_vault_storage_read_failure(vault_client, hvac_exceptions, caplog):
    vault_client.secrets.kv.v2.read_secret_version.side_effect = hvac_exceptions.Forbidden("denied")
    storage = VaultStorageAdapter(client=vault_client)

    with caplog.at_level("WARNING"):
        assert storage.get_item("auth-storage") is None

    assert "Vault read failed for auth-storage" in caplog.text


def test_vault_storage_remove_missing_secret(vault_client, hvac_exceptions, caplog):
    vault_client.secrets.kv.v2.delete_metadata_and_all_versions.side_effect = hvac_exceptions.InvalidPath("gone")
    storage = VaultStorageAdapter(client=vault_client)

    with caplog.at_level("WARNING"):
        storage.remove_item("auth-storage")

    assert not caplog.records


def test_vault_storage_remove(vault_client):
    storage = VaultStorageAdapter(client=vault_client)

    storage.remove_item("auth-storage")

    vault_client.secrets.kv.v2.delete_metadata_and_all_versions.assert_called_once_with(
        path="boardroom/auth-storage",
        mount_point="secret",
    )


def test_vault_storage_rejects_bad_token(vault_client):
    vault_client.is_authenticated.return_value = False

    with pytest.raises(ValueError, match="Vault authentication failed"):
        VaultStorageAdapter(client=vault_client)
