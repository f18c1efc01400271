"""Shared test doubles and payload builders."""

# standard library
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import MagicMock

# first-party
from steering_cli.catalogue.model.template_metadata_model import TemplateMetadataModel
from steering_cli.store.key_value_store_abc import KeyValueStoreABC


class MemoryStore(KeyValueStoreABC):
    """In-memory key/value store for tests."""

    def __init__(self):
        """Initialize instance properties."""
        self.data: dict[str, Any] = {}
        self.closed = False

    def read(self, key: str) -> Any | None:
        """Return the value for key."""
        return self.data.get(key)

    def write(self, key: str, value: Any):
        """Write the value for key."""
        self.data[key] = value

    def delete(self, key: str):
        """Delete key if present."""
        self.data.pop(key, None)

    def keys(self, prefix: str = '') -> list[str]:
        """Return the keys starting with prefix."""
        return sorted(k for k in self.data if k.startswith(prefix))

    def close(self):
        """Mark the store closed."""
        self.closed = True


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: datetime | None = None):
        """Initialize instance properties."""
        self.now = now or datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        """Return the current fake time."""
        return self.now

    def advance(self, seconds: float):
        """Move the clock forward."""
        self.now += timedelta(seconds=seconds)


def make_template(
    path: str, download_reference: str | None = None, **kwargs
) -> TemplateMetadataModel:
    """Return a template for a slash separated path."""
    return TemplateMetadataModel.from_path(
        path,
        download_reference or f'https://raw.githubusercontent.com/o/r/main/{path}',
        **kwargs,
    )


def make_response(
    status_code: int = 200,
    payload: Any = None,
    headers: dict | None = None,
    text: str = '',
) -> MagicMock:
    """Return a mock requests Response."""
    r = MagicMock()
    r.ok = status_code < 400
    r.status_code = status_code
    r.headers = headers or {}
    r.text = text
    r.reason = 'reason'
    r.url = 'https://api.github.com/test'
    if isinstance(payload, Exception):
        r.json.side_effect = payload
    else:
        r.json.return_value = payload
    return r


def content_entry(path: str, type_: str = 'file', size: int = 100) -> dict:
    """Return a GitHub contents API entry."""
    return {
        'name': path.rsplit('/', 1)[-1],
        'path': path,
        'sha': f'sha-{path}',
        'size': size if type_ == 'file' else 0,
        'type': type_,
        'download_url': (
            f'https://raw.githubusercontent.com/o/r/main/{path}' if type_ == 'file' else None
        ),
    }


