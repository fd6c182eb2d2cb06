"""
HashiCorp Vault Storage Adapter - Secure storage for session tokens.
"""

import logging
from typing import Optional
from boardroom_client.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)


class VaultStorageAdapter(StoragePort):
    """
    HashiCorp Vault storage adapter.

    Uses KV Secrets Engine v2; each key is one secret holding {"value": ...}.
    Requires: pip install hvac
    """

    def __init__(
        self,
        url: str = "http://localhost:8200",
        token: Optional[str] = None,
        mount_point: str = "secret",
        path_prefix: str = "boardroom",
        client=None,
    ):
        """
        Initialize Vault adapter.

        Args:
            url: Vault server URL
            token: Vault token (or use VAULT_TOKEN env var)
            mount_point: KV mount point (default: secret)
            path_prefix: Path prefix for secrets (default: boardroom)
            client: Pre-built hvac.Client (skips url/token)

        Raises:
            ImportError: If hvac is missing
            ValueError: If Vault rejects the token
        """
        self._mount_point = mount_point
        self._path_prefix = path_prefix

        try:
            import hvac
            from hvac.exceptions import InvalidPath
        except ImportError:
            raise ImportError("hvac package required: pip install hvac")

        # Raised by kv.v2 for a path with no secret
        self._invalid_path = InvalidPath

        if client is None:
            client = hvac.Client(url=url, token=token)

        self._client = client

        if not self._client.is_authenticated():
            raise ValueError("Vault authentication failed")

    def _get_path(self, key: str) -> str:
        """Get full Vault path for a key."""
        return f"{self._path_prefix}/{key}"

    def get_item(self, key: str) -> Optional[str]:
        try:
            response = self._client.secrets.kv.v2.read_secret_version(
                path=self._get_path(key),
                mount_point=self._mount_point,
                raise_on_deleted_version=True,
            )
            return response["data"]["data"].get("value")
        except self._invalid_path:
            logger.debug(f"No Vault secret for {key}")
            return None
        except Exception as e:
            logger.warning(f"Vault read failed for {key}: {e}")
            return None

    def set_item(self, key: str, value: str) -> None:
        try:
            self._client.secrets.kv.v2.create_or_update_secret(
                path=self._get_path(key),
                secret={"value": value},
                mount_point=self._mount_point,
            )
        except Exception as e:
            logger.warning(f"Vault write failed for {key}: {e}")

    def remove_item(self, key: str) -> None:
        try:
            self._client.secrets.kv.v2.delete_metadata_and_all_versions(
                path=self._get_path(key),
                mount_point=self._mount_point,
            )
        except self._invalid_path:
            pass
        except Exception as e:
            logger.warning(f"Vault delete failed for {key}: {e}")
