"""Steering CLI Module"""

# standard library
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any
from urllib.parse import quote, unquote

# first-party
from steering_cli.store.key_value_store_abc import KeyValueStoreABC, StoreError

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])


class JsonFileStore(KeyValueStoreABC):
    """Key/value store with one JSON file per key.

    Each key is replaced atomically (temp file in the same directory +
    ``os.replace``), so concurrent processes writing different keys never
    lose each other's updates, writers of the same key are last-writer-wins,
    and a reader never observes a half written file.
    """

    suffix = '.json'

    def __init__(self, path: Path):
        """Initialize instance properties."""
        self.path = Path(path)

    def _key_file(self, key: str) -> Path:
        """Return the file for key (the key is percent-encoded)."""
        return self.path / f'{quote(key, safe="")}{self.suffix}'

    def read(self, key: str) -> Any | None:
        """Return the value for key or None if missing or unreadable."""
        key_file = self._key_file(key)
        if not key_file.is_file():
            return None
        try:
            with key_file.open('r', encoding='utf-8') as fh:
                return json.load(fh)
        except (OSError, ValueError):
            _logger.exception(f'action=store-read, path={key_file}, ignoring unreadable value')
            return None

    def write(self, key: str, value: Any):
        """Atomically replace the value for key."""
        key_file = self._key_file(key)
        try:
            self.path.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f'.{key_file.name}.', suffix='.tmp', dir=self.path
            )
        except OSError as ex:
            raise StoreError(f'action=store-write, path={key_file}, error={ex}') from ex

        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump(value, fh, indent=2, sort_keys=True)
                fh.write('\n')
            os.replace(tmp_name, key_file)
        except OSError as ex:
            raise StoreError(f'action=store-write, path={key_file}, error={ex}') from ex
        finally:
            Path(tmp_name).unlink(missing_ok=True)

    def delete(self, key: str):
        """Delete key if present."""
        try:
            self._key_file(key).unlink(missing_ok=True)
        except OSError as ex:
            raise StoreError(f'action=store-delete, key={key}, error={ex}') from ex

    def keys(self, prefix: str = '') -> list[str]:
        """Return the stored keys starting with prefix."""
        if not self.path.is_dir():
            return []
        keys = (
            unquote(p.name[: -len(self.suffix)])
            for p in self.path.iterdir()
            if p.is_file() and p.name.endswith(self.suffix) and not p.name.startswith('.')
        )
        return sorted(k for k in keys if k.startswith(prefix))
