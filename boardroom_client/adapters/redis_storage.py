"""
Redis Storage Adapter - Redis-backed key/value storage.
"""

import logging
from typing import Optional
from boardroom_client.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)


class RedisStorageAdapter(StoragePort):
    """
    Redis-backed storage.

    Lets several client processes (e.g. workers of a kiosk service) share
    one persisted session. Values are plain strings under a key prefix.
    """

    def __init__(
        self,
        redis_client=None,
        prefix: str = "boardroom:",
        url: str = "redis://localhost:6379/0",
    ):
        """
        Initialize Redis storage adapter.

        Args:
            redis_client: Redis client instance (redis.Redis); created lazily from url if omitted
            prefix: Key prefix
            url: Connection URL used when no client is given
        """
        self._redis = redis_client
        self._prefix = prefix
        self._url = url

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            try:
                import redis
            except ImportError:
                raise ImportError("redis package required: pip install redis")
            self._redis = redis.Redis.from_url(self._url, decode_responses=True)
        return self._redis

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get_item(self, key: str) -> Optional[str]:
        try:
            value = self._get_redis().get(self._key(key))
        except ImportError:
            raise
        except Exception as e:
            logger.warning(f"Redis read failed for {key}: {e}")
            return None

        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set_item(self, key: str, value: str) -> None:
        try:
            self._get_redis().set(self._key(key), value)
        except ImportError:
            raise
        except Exception as e:
            logger.warning(f"Redis write failed for {key}: {e}")

    def remove_item(self, key: str) -> None:
        try:
            self._get_redis().delete(self._key(key))
        except ImportError:
            raise
        except Exception as e:
            logger.warning(f"Redis delete failed for {key}: {e}")
