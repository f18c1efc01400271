"""Steering CLI Module"""

# standard library
import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

# third-party
from pydantic import BaseModel, ValidationError

# first-party
from steering_cli.catalogue.model.cache_entry_model import CacheEntryModel
from steering_cli.catalogue.model.template_metadata_model import TemplateMetadataModel
from steering_cli.store.key_value_store_abc import KeyValueStoreABC

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])

CACHE_KEY_PREFIX = 'steering.cache.'


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(tz=UTC)


class CacheStatsModel(BaseModel):
    """Model Definition"""

    total_entries: int = 0
    fresh_entries: int = 0
    stale_entries: int = 0


class CacheStore:
    """Last successful template listing per repository identity.

    Freshness is a read-time predicate (``is_fresh``); entries are never
    removed because of their age, so a stale entry stays available as a
    fallback when a refetch fails. Entries are removed only by ``invalidate``,
    ``invalidate_all``, or by the ``max_entries`` bound, which evicts the entry
    with the oldest ``fetched_at`` when a new key is added.
    """

    def __init__(
        self,
        store: KeyValueStoreABC,
        clock: Callable[[], datetime] = utc_now,
        max_entries: int | None = 100,
    ):
        """Initialize instance properties."""
        self.clock = clock
        self.max_entries = max_entries
        self.store = store

    @staticmethod
    def _full_key(key: str) -> str:
        """Return the storage key for a cache key."""
        return f'{CACHE_KEY_PREFIX}{key}'

    def get(self, key: str) -> CacheEntryModel | None:
        """Return the cache entry for key, or None when absent or corrupt."""
        raw = self.store.read(self._full_key(key))
        if raw is None:
            return None

        try:
            return CacheEntryModel.model_validate(raw)
        except ValidationError:
            _logger.exception(f'action=cache-get, key={key}, corrupt entry removed')
            self.store.delete(self._full_key(key))
            return None

    def set(self, key: str, templates: Sequence[TemplateMetadataModel]) -> CacheEntryModel:
        """Store templates for key with fetched_at set to now."""
        if self.store.read(self._full_key(key)) is None:
            self._enforce_limit()

        entry = CacheEntryModel(key=key, templates=list(templates), fetched_at=self.clock())
        self.store.write(self._full_key(key), entry.model_dump(mode='json'))
        _logger.debug(f'action=cache-set, key={key}, templates={len(entry.templates)}')
        return entry

    def is_fresh(self, key: str, max_age_seconds: float) -> bool:
        """Return True if an entry exists and is no older than max_age_seconds."""
        entry = self.get(key)
        if entry is None:
            return False
        return entry.age_seconds(self.clock()) <= max_age_seconds

    def invalidate(self, key: str):
        """Remove the entry for key. Removing a missing entry is not an error."""
        self.store.delete(self._full_key(key))
        _logger.debug(f'action=cache-invalidate, key={key}')

    def invalidate_all(self):
        """Remove every cache entry."""
        for full_key in self.store.keys(CACHE_KEY_PREFIX):
            self.store.delete(full_key)
        _logger.debug('action=cache-invalidate-all')

    def keys(self) -> list[str]:
        """Return the cached repository identities."""
        return [k[len(CACHE_KEY_PREFIX) :] for k in self.store.keys(CACHE_KEY_PREFIX)]

    def stats(self, max_age_seconds: float) -> CacheStatsModel:
        """Return counts of fresh and stale entries."""
        stats = CacheStatsModel()
        for key in self.keys():
            stats.total_entries += 1
            if self.is_fresh(key, max_age_seconds):
                stats.fresh_entries += 1
            else:
                stats.stale_entries += 1
        return stats

    def _enforce_limit(self):
        """Evict the oldest entries so one more key fits under max_entries."""
        if not self.max_entries:
            return

        entries = [e for e in (self.get(k) for k in self.keys()) if e is not None]
        overflow = len(entries) - self.max_entries + 1
        if overflow <= 0:
            return

        for entry in sorted(entries, key=lambda e: e.fetched_at)[:overflow]:
            _logger.info(f'action=cache-evict, key={entry.key}, fetched-at={entry.fetched_at}')
            self.invalidate(entry.key)
