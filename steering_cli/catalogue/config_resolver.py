"""Steering CLI Module"""

# standard library
import logging

# third-party
from pydantic import ValidationError

# first-party
from steering_cli.catalogue.model.configuration_source_model import (
    ConfigurationSource,
    LocalSource,
    RemoteSource,
    SourceConfigModel,
    UnconfiguredSource,
)
from steering_cli.catalogue.model.repository_config_model import RepositoryConfigModel
from steering_cli.store.key_value_store_abc import KeyValueStoreABC

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])

CONFIG_KEY = 'steering.config'


class ConfigResolver:
    """Resolve the active template source from the persisted configuration.

    Precedence: a repository with both owner and repo set is Remote, else a
    non-blank templates path is Local, else Unconfigured. Switching between
    sources only happens through ``use_remote`` and ``use_local``.
    """

    def __init__(self, store: KeyValueStoreABC):
        """Initialize instance properties."""
        self.store = store

    def load(self) -> SourceConfigModel:
        """Return the persisted configuration record."""
        raw = self.store.read(CONFIG_KEY)
        if raw is None:
            return SourceConfigModel()
        try:
            return SourceConfigModel.model_validate(raw)
        except ValidationError:
            _logger.exception('action=load-config, invalid configuration record ignored')
            return SourceConfigModel()

    def save(self, config: SourceConfigModel):
        """Persist the configuration record."""
        self.store.write(CONFIG_KEY, config.model_dump(mode='json'))

    def resolve(self) -> ConfigurationSource:
        """Return the active configuration source."""
        config = self.load()

        if config.repository is not None and config.repository.is_valid:
            return RemoteSource(repository=config.repository)

        if config.templates_path and config.templates_path.strip():
            return LocalSource(root_path=config.templates_path.strip())

        return UnconfiguredSource()

    def use_remote(self, repository: RepositoryConfigModel):
        """Make the repository the active source, keeping any stored local path."""
        config = self.load()
        config.repository = repository
        self.save(config)
        _logger.info(f'action=use-remote, identity={repository.identity}')

    def use_local(self, templates_path: str):
        """Make the local path the active source, removing the repository."""
        config = self.load()
        config.repository = None
        config.templates_path = templates_path
        self.save(config)
        _logger.info(f'action=use-local, path={templates_path}')

    def clear(self):
        """Remove all source configuration."""
        self.store.delete(CONFIG_KEY)
