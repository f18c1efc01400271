"""Steering CLI Module"""

# standard library
from functools import cached_property
from pathlib import Path

# first-party
from steering_cli.catalogue.cache_store import CacheStore
from steering_cli.catalogue.catalogue import Catalogue
from steering_cli.catalogue.config_resolver import ConfigResolver
from steering_cli.catalogue.display import (
    format_configuration_source,
    format_display_name,
    format_file_size,
    format_last_fetch,
)
from steering_cli.catalogue.front_matter import ParsedTemplateModel, parse_front_matter
from steering_cli.catalogue.github_client import GithubClient
from steering_cli.catalogue.model.catalogue_result_model import CatalogueResultModel
from steering_cli.catalogue.model.template_metadata_model import TemplateMetadataModel
from steering_cli.catalogue.model.tree_node_model import DirectoryNode, LeafNode
from steering_cli.catalogue.tree_assembler import (
    directory_paths,
    filter_by_directory,
    find,
    flatten,
)
from steering_cli.cli.catalogue.template_writer import TemplateWriter
from steering_cli.cli.cli_abc import CliABC
from steering_cli.pleb.proxies import proxies
from steering_cli.render.render import Render
from steering_cli.render.render_notifier import RenderNotifier
from steering_cli.store.json_file_store import JsonFileStore
from steering_cli.store.key_value_store_abc import KeyValueStoreABC
from steering_cli.store.redis_store import RedisStore
from steering_cli.store.token_store import EnvTokenStore, FileTokenStore


class CatalogueCli(CliABC):
    """CLI for listing, refreshing, and loading steering templates.

    All state (configuration record and cached listings) lives in one
    key/value store selected by the ``cache_backend`` setting. The GitHub
    token is read from the environment or the token file in the CLI out path.
    """

    def __init__(
        self,
        proxy_host: str | None = None,
        proxy_port: int | None = None,
        proxy_user: str | None = None,
        proxy_pass: str | None = None,
    ):
        """Initialize instance properties."""
        super().__init__()

        # proxy settings (processed by CliABC helpers)
        self.proxy_host = self._process_proxy_host(proxy_host)
        self.proxy_port = self._process_proxy_port(proxy_port)
        self.proxy_user = self._process_proxy_user(proxy_user)
        self.proxy_pass = self._process_proxy_pass(proxy_pass)

        self.writer = TemplateWriter()

    # ==================================================================
    # Wiring
    # ==================================================================

    @cached_property
    def store(self) -> KeyValueStoreABC:
        """Return the key/value store for configuration and cache state."""
        if self.settings.cache_backend == 'redis':
            self.log.debug(f'action=select-store, backend=redis, url={self.settings.redis_url}')
            return RedisStore(self.settings.redis_url)
        return JsonFileStore(self.cli_out_path / 'state')

    @cached_property
    def client(self) -> GithubClient:
        """Return the GitHub contents client."""
        return GithubClient(
            api_url=self.settings.api_url,
            timeout=self.settings.request_timeout,
            max_retries=self.settings.max_retries,
            max_depth=self.settings.max_depth,
            proxies=proxies(self.proxy_host, self.proxy_port, self.proxy_user, self.proxy_pass),
        )

    @cached_property
    def resolver(self) -> ConfigResolver:
        """Return the configuration resolver."""
        return ConfigResolver(self.store)

    @cached_property
    def catalogue(self) -> Catalogue:
        """Return the catalogue orchestrator."""
        return Catalogue(
            resolver=self.resolver,
            client=self.client,
            cache=CacheStore(self.store, max_entries=self.settings.cache_max_entries),
            token_store=EnvTokenStore(FileTokenStore(self.cli_out_path / 'token')),
            notifier=RenderNotifier(),
            freshness_window=self.settings.cache_ttl,
        )

    def close(self):
        """Release the key/value store."""
        self.store.close()

    # ==================================================================
    # Listing
    # ==================================================================

    def list_templates(self, force: bool = False) -> CatalogueResultModel:
        """Render the catalogue tree and return the result."""
        result = self.catalogue.refresh(force=force)

        if result.needs_setup:
            Render.panel.warning(
                'No template source configured. Run "steering configure --repo OWNER/REPO" '
                'or "steering configure --local PATH".',
                title='Setup Required',
            )
            return result

        if result.failed:
            # the notifier already rendered the user message
            Render.panel.failure(
                f'Unable to load templates ({result.error.kind}). '
                f'Recommended action: {result.error.remediation}.'
            )

        title = format_configuration_source(self.resolver.resolve())
        if not result.tree:
            Render.panel.info('No templates found.', title=title)
        else:
            Render.tree.catalogue(result, title)
        return result

    def clear_cache(self, all_: bool = False):
        """Invalidate the active repository cache entry or every entry."""
        if all_:
            self.catalogue.invalidate_all()
            Render.panel.success('Cleared all cached template listings.')
            return

        identity = self.catalogue.active_identity()
        if identity is None:
            Render.panel.warning('No GitHub repository configured, nothing to clear.')
            return
        self.catalogue.invalidate(identity)
        Render.panel.success(f'Cleared cached template listing for {identity}.')

    def cache_status(self) -> dict:
        """Return cache statistics for display."""
        stats = self.catalogue.cache.stats(self.settings.cache_ttl)
        return {
            'Cached Repositories': stats.total_entries,
            'Fresh': stats.fresh_entries,
            'Stale': stats.stale_entries,
            'Last Fetch': format_last_fetch(self.catalogue.last_fetched_at()),
        }

    # ==================================================================
    # Loading
    # ==================================================================

    def find_template(self, template_path: str) -> TemplateMetadataModel:
        """Return the template for a catalogue path (e.g. docs/api)."""
        result = self.catalogue.refresh()
        if result.needs_setup:
            Render.panel.failure('No template source configured. Run "steering configure".')
        if result.failed:
            Render.panel.failure(f'Unable to load templates ({result.error.kind}).')

        node = find(result.tree, template_path)
        if isinstance(node, LeafNode):
            return node.template
        if isinstance(node, DirectoryNode):
            templates = filter_by_directory(flatten(result.tree), node.path)
            names = ', '.join(t.path for t in templates) or 'none'
            Render.panel.failure(
                f'"{template_path}" is a directory. Templates in it: {names}',
            )
        directories = ', '.join(sorted(directory_paths(flatten(result.tree)))) or 'none'
        Render.panel.failure(f'Template not found: {template_path}. Directories: {directories}')

    def load(
        self, template_path: str, dest: Path | None = None, force: bool = False
    ) -> Path | None:
        """Fetch a template and write it into the target directory.

        Returns the written path, or None if the user declined the overwrite.
        """
        template = self.find_template(template_path)
        content = self.catalogue.fetch_content(template)
        parsed = parse_front_matter(content)
        self.render_front_matter(template, parsed)

        target = (dest or self.settings.target_dir) / template.filename
        if target.exists() and not force:
            response = Render.prompt.ask(
                f'{target} already exists. Overwrite?', choices=['y', 'n'], default='n'
            )
            if response != 'y':
                Render.panel.info(f'Skipped {target}.')
                return None

        self.writer.write(target, content)
        Render.panel.success(f'Wrote {template.filename} to {target.parent}.')
        return target

    @staticmethod
    def render_front_matter(template: TemplateMetadataModel, parsed: ParsedTemplateModel):
        """Render the template details and parsed front matter."""
        front_matter = parsed.front_matter
        Render.table.key_value(
            'Template',
            {
                'Name': front_matter.title or format_display_name(template.filename),
                'Path': template.path,
                'Size': format_file_size(template.size_bytes or 0),
                'Description': front_matter.description,
                'Tags': ', '.join(front_matter.tags) if front_matter.tags else None,
                'Author': front_matter.author,
            },
        )

    # ==================================================================
    # GitHub Status
    # ==================================================================

    def rate_limit(self):
        """Render the GitHub rate limit status."""
        self.client.set_auth_token(self.catalogue.token_store.get_token())
        info = self.client.rate_limit_status()
        Render.table.key_value(
            'GitHub Rate Limit',
            {
                'Authenticated': info.authenticated,
                'Limit': info.limit,
                'Remaining': info.remaining,
                'Resets': format_last_fetch(info.reset),
            },
        )
