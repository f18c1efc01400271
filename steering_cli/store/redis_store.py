"""Steering CLI Module"""

# standard library
import json
import logging
from typing import Any

# third-party
import redis

# first-party
from steering_cli.store.key_value_store_abc import KeyValueStoreABC, StoreError

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])


class RedisStore(KeyValueStoreABC):
    """Key/value store backed by Redis, for catalogues shared between hosts.

    Connection and command failures are raised as StoreError.
    """

    def __init__(self, url: str = 'redis://localhost:6379/0', client: redis.Redis | None = None):
        """Initialize instance properties."""
        self.url = url
        self.client = client or redis.Redis.from_url(url, decode_responses=True)

    def read(self, key: str) -> Any | None:
        """Return the value for key or None if missing."""
        try:
            raw = self.client.get(key)
        except redis.RedisError as ex:
            raise StoreError(f'action=redis-read, key={key}, error={ex}') from ex

        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            _logger.warning(f'action=redis-read, key={key}, ignoring invalid JSON value')
            return None

    def write(self, key: str, value: Any):
        """Write the value for key."""
        try:
            self.client.set(key, json.dumps(value, sort_keys=True))
        except redis.RedisError as ex:
            raise StoreError(f'action=redis-write, key={key}, error={ex}') from ex

    def delete(self, key: str):
        """Delete key if present."""
        try:
            self.client.delete(key)
        except redis.RedisError as ex:
            raise StoreError(f'action=redis-delete, key={key}, error={ex}') from ex

    def keys(self, prefix: str = '') -> list[str]:
        """Return the stored keys starting with prefix."""
        try:
            return sorted(self.client.scan_iter(match=f'{prefix}*'))
        except redis.RedisError as ex:
            raise StoreError(f'action=redis-keys, prefix={prefix}, error={ex}') from ex

    def close(self):
        """Close the Redis connection pool."""
        self.client.close()
