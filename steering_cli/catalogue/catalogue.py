"""Steering CLI Module"""

# standard library
import logging
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path

# first-party
from steering_cli.catalogue.cache_store import CacheStore
from steering_cli.catalogue.config_resolver import ConfigResolver
from steering_cli.catalogue.errors import CatalogueError, LocalPathError, NetworkError
from steering_cli.catalogue.github_client import GithubClient
from steering_cli.catalogue.local_enumerator import LocalFileEnumerator
from steering_cli.catalogue.model.catalogue_result_model import (
    CatalogueResultModel,
    ClassifiedErrorModel,
    FreshnessLabel,
)
from steering_cli.catalogue.model.configuration_source_model import (
    ConfigurationSource,
    LocalSource,
    RemoteSource,
    UnconfiguredSource,
)
from steering_cli.catalogue.model.repository_config_model import RepositoryConfigModel
from steering_cli.catalogue.model.template_metadata_model import TemplateMetadataModel
from steering_cli.catalogue.notifier import LogNotifier, NotifierABC
from steering_cli.catalogue.tree_assembler import TreeAssembler
from steering_cli.store.key_value_store_abc import StoreError
from steering_cli.store.token_store import TokenStoreABC

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])

DEFAULT_FRESHNESS_WINDOW = 300


class CatalogueState(str, Enum):
    """States of a single catalogue request."""

    IDLE = 'idle'
    RESOLVING = 'resolving'
    SERVING_CACHED = 'serving_cached'
    FETCHING = 'fetching'
    ASSEMBLING = 'assembling'
    READY = 'ready'
    FAILED = 'failed'


def source_label(source: ConfigurationSource) -> str:
    """Return the machine readable label for a configuration source."""
    if isinstance(source, RemoteSource):
        return f'github:{source.repository.identity}'
    if isinstance(source, LocalSource):
        return f'local:{source.root_path}'
    if isinstance(source, UnconfiguredSource):
        return 'unconfigured'
    ex_msg = f'Unsupported configuration source: {type(source).__name__}'
    raise TypeError(ex_msg)


class Catalogue:
    """Build the template catalogue for the configured source.

    Remote listings are served from the cache while fresh, otherwise refetched
    and written back to the cache. When a refetch fails and a cached listing
    exists it is served with the "stale" label; when no listing was ever
    cached the request fails with the classified error. Local directories
    are read on every request and never cached.

    The orchestrator does not retry failed fetches; a new ``refresh`` call
    is the retry. ``refresh`` never raises.
    """

    def __init__(
        self,
        resolver: ConfigResolver,
        client: GithubClient,
        cache: CacheStore,
        token_store: TokenStoreABC,
        enumerator: LocalFileEnumerator | None = None,
        assembler: TreeAssembler | None = None,
        notifier: NotifierABC | None = None,
        freshness_window: float = DEFAULT_FRESHNESS_WINDOW,
    ):
        """Initialize instance properties."""
        self.assembler = assembler or TreeAssembler()
        self.cache = cache
        self.client = client
        self.enumerator = enumerator or LocalFileEnumerator()
        self.freshness_window = freshness_window
        self.notifier = notifier or LogNotifier()
        self.resolver = resolver
        self.state = CatalogueState.IDLE
        self.token_store = token_store

    # ==================================================================
    # Refresh
    # ==================================================================

    def refresh(
        self, force: bool = False, cancel_event: threading.Event | None = None
    ) -> CatalogueResultModel:
        """Return the catalogue for the active source.

        With ``force`` the remote listing is refetched even if the cache is
        fresh.
        """
        self.state = CatalogueState.RESOLVING
        label = 'unknown'
        try:
            source = self.resolver.resolve()
            label = source_label(source)
            _logger.info(f'action=refresh, source={label}, force={force}')

            if isinstance(source, UnconfiguredSource):
                self.state = CatalogueState.READY
                return CatalogueResultModel(
                    source_label=label, freshness_label='none', needs_setup=True
                )
            if isinstance(source, LocalSource):
                return self._refresh_local(source, label)
            if isinstance(source, RemoteSource):
                return self._refresh_remote(source, label, force, cancel_event)

            ex_msg = f'Unsupported configuration source: {type(source).__name__}'
            raise TypeError(ex_msg)
        except CatalogueError as ex:
            return self._failed(label, ex)
        except Exception as ex:
            _logger.exception(f'action=refresh, source={label}, unexpected error')
            return self._failed(
                label,
                NetworkError(
                    f'action=refresh, source={label}, unexpected error: {ex}',
                    user_message=f'An unexpected error occurred: {ex}',
                ),
            )

    def _refresh_local(self, source: LocalSource, label: str) -> CatalogueResultModel:
        """Return the catalogue for a local directory."""
        files = self.enumerator.list_files(source.root_path)
        templates = [
            TemplateMetadataModel.from_path(f.name, f.absolute_path) for f in files
        ]
        return self._ready(label, templates, 'none')

    def _refresh_remote(
        self,
        source: RemoteSource,
        label: str,
        force: bool,
        cancel_event: threading.Event | None,
    ) -> CatalogueResultModel:
        """Return the catalogue for a remote repository."""
        repository = source.repository
        key = repository.identity

        if not force and self.cache.is_fresh(key, self.freshness_window):
            entry = self.cache.get(key)
            if entry is not None:
                self.state = CatalogueState.SERVING_CACHED
                _logger.debug(f'action=refresh, key={key}, serving cached listing')
                return self._ready(label, entry.templates, 'cached', fetched_at=entry.fetched_at)

        self.state = CatalogueState.FETCHING
        self._apply_token()
        try:
            templates = self.client.fetch_templates(
                repository.owner,
                repository.repo,
                repository.path,
                repository.branch,
                cancel_event=cancel_event,
            )
        except CatalogueError as ex:
            stale = self.cache.get(key)
            if stale is None:
                raise

            _logger.warning(
                f'action=refresh, key={key}, error={ex.kind}, serving stale listing '
                f'fetched-at={stale.fetched_at}'
            )
            self.notifier.info(f'{ex.user_message} Showing cached templates.')
            return self._ready(
                label,
                stale.templates,
                'stale',
                error=ClassifiedErrorModel.from_error(ex),
                fetched_at=stale.fetched_at,
            )

        try:
            fetched_at = self.cache.set(key, templates).fetched_at
        except (OSError, StoreError):
            # the listing is still served, it just is not cached
            _logger.exception(f'action=refresh, key={key}, failed to cache fresh listing')
            fetched_at = self.cache.clock()
        return self._ready(label, templates, 'fresh', fetched_at=fetched_at)

    def _ready(
        self,
        label: str,
        templates: list[TemplateMetadataModel],
        freshness: FreshnessLabel,
        error: ClassifiedErrorModel | None = None,
        fetched_at: datetime | None = None,
    ) -> CatalogueResultModel:
        """Assemble the tree and return a ready result."""
        self.state = CatalogueState.ASSEMBLING
        tree = self.assembler.build(templates)
        self.state = CatalogueState.READY
        return CatalogueResultModel(
            tree=tree,
            source_label=label,
            freshness_label=freshness,
            error=error,
            fetched_at=fetched_at,
        )

    def _failed(self, label: str, error: CatalogueError) -> CatalogueResultModel:
        """Return a failed result for a classified error."""
        self.state = CatalogueState.FAILED
        _logger.error(
            f'action=refresh, source={label}, error={error.kind}, '
            f'remediation={error.remediation}, message={error.message}'
        )
        self.notifier.error(error.user_message)
        return CatalogueResultModel(
            source_label=label,
            freshness_label='none',
            error=ClassifiedErrorModel.from_error(error),
        )

    # ==================================================================
    # Cache & Configuration
    # ==================================================================

    def active_identity(self) -> str | None:
        """Return the identity of the active remote repository, if any."""
        source = self.resolver.resolve()
        if isinstance(source, RemoteSource):
            return source.repository.identity
        return None

    def invalidate(self, key: str | None = None):
        """Invalidate one cache entry (the active repository when key is omitted)."""
        key = key or self.active_identity()
        if key is None:
            _logger.debug('action=invalidate, no remote repository configured')
            return
        self.cache.invalidate(key)

    def invalidate_all(self):
        """Invalidate every cache entry."""
        self.cache.invalidate_all()

    def last_fetched_at(self) -> datetime | None:
        """Return when the active repository listing was last fetched."""
        key = self.active_identity()
        if key is None:
            return None
        entry = self.cache.get(key)
        return entry.fetched_at if entry is not None else None

    def configure_remote(self, repository: RepositoryConfigModel):
        """Switch to a repository, dropping the cache of a replaced identity or branch."""
        previous = self.resolver.load().repository
        self.resolver.use_remote(repository)
        if previous is not None and (
            previous.identity != repository.identity or previous.branch != repository.branch
        ):
            self.cache.invalidate(previous.identity)

    def configure_local(self, templates_path: str):
        """Switch to a local templates directory."""
        self.resolver.use_local(templates_path)

    # ==================================================================
    # Authentication
    # ==================================================================

    def _apply_token(self):
        """Load the stored token into the client."""
        self.client.set_auth_token(self.token_store.get_token())

    def set_auth_token(self, token: str):
        """Store the auth token and use it for subsequent requests."""
        self.token_store.set_token(token)
        self.client.set_auth_token(token)

    def clear_auth_token(self):
        """Remove the stored auth token."""
        self.token_store.clear_token()
        self.client.clear_auth_token()

    # ==================================================================
    # Content
    # ==================================================================

    def fetch_content(self, template: TemplateMetadataModel) -> str:
        """Return the text of a template from its download reference."""
        if template.is_remote:
            self._apply_token()
            return self.client.fetch_file_content(template.download_reference)

        path = Path(template.download_reference)
        try:
            return path.read_text(encoding='utf-8')
        except OSError as ex:
            raise LocalPathError(
                f'action=fetch-content, path={path}, unreadable: {ex}',
                user_message=f'Unable to read template file: {path}',
            ) from ex
