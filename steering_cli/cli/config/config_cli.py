"""Steering CLI Module"""

# standard library
from pathlib import Path

# first-party
from steering_cli.catalogue.display import format_configuration_source, format_last_fetch
from steering_cli.catalogue.errors import ConfigurationError, LocalPathError
from steering_cli.catalogue.url_parser import parse_repository_url
from steering_cli.cli.catalogue.catalogue_cli import CatalogueCli
from steering_cli.render.render import Render


class ConfigCli(CatalogueCli):
    """CLI for selecting the template source and managing the GitHub token."""

    def configure_remote(self, url: str, branch: str | None = None, validate: bool = True):
        """Make a GitHub repository the active template source."""
        repository = parse_repository_url(url, branch)

        if validate:
            self.client.set_auth_token(self.catalogue.token_store.get_token())
            result = self.client.validate_repository(repository.owner, repository.repo)
            if not result.valid:
                raise ConfigurationError(
                    f'action=configure-remote, identity={repository.identity}, '
                    f'status-code={result.status_code}, validation failed',
                    user_message=result.error or 'Repository validation failed.',
                    details={'status_code': result.status_code},
                )

        self.catalogue.configure_remote(repository)
        Render.panel.success(
            f'Using templates from {repository.identity} (branch {repository.branch}).'
        )

    def configure_local(self, templates_path: str):
        """Make a local directory the active template source."""
        path = Path(templates_path).expanduser()
        if not path.is_dir():
            raise LocalPathError(
                f'action=configure-local, path={path}, directory not found',
                user_message=f'Templates path not found: {path}',
                details={'path': str(path)},
            )

        self.catalogue.configure_local(str(path.resolve()))
        Render.panel.success(f'Using templates from local directory {path.resolve()}.')

    def show(self):
        """Render the current configuration."""
        config = self.resolver.load()
        repository = config.repository
        Render.table.key_value(
            'Steering Configuration',
            {
                'Active Source': format_configuration_source(self.resolver.resolve()),
                'Repository': repository.identity if repository else None,
                'Branch': repository.branch if repository else None,
                'Local Path': config.templates_path,
                'Authenticated': self.catalogue.token_store.get_token() is not None,
                'Cache Backend': self.settings.cache_backend,
                'Cache TTL': f'{self.settings.cache_ttl}s',
                'Last Fetch': format_last_fetch(self.catalogue.last_fetched_at()),
            },
        )

    # ==================================================================
    # Token
    # ==================================================================

    def set_token(self, token: str | None = None):
        """Store a GitHub token, prompting (hidden) when none is given."""
        token = token or Render.prompt.ask('GitHub token', password=True, show_default=False)
        if not token or not token.strip():
            Render.panel.failure('A token is required.')

        self.catalogue.set_auth_token(token.strip())
        Render.panel.success('GitHub token saved.')

    def clear_token(self):
        """Remove the stored GitHub token."""
        self.catalogue.clear_auth_token()
        Render.panel.success('GitHub token removed.')
