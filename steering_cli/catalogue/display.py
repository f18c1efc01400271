"""Steering CLI Module"""

# standard library
from datetime import datetime

# third-party
import arrow

# first-party
from steering_cli.catalogue.model.catalogue_result_model import CatalogueResultModel
from steering_cli.catalogue.model.configuration_source_model import (
    ConfigurationSource,
    LocalSource,
    RemoteSource,
    UnconfiguredSource,
)
from steering_cli.catalogue.model.template_metadata_model import (
    TemplateMetadataModel,
    remove_extension,
)


def format_file_size(size_bytes: int) -> str:
    """Return a human readable file size (e.g. 1.50 KB)."""
    if size_bytes <= 0:
        return '0 B'

    units = ['B', 'KB', 'MB', 'GB']
    size = float(size_bytes)
    index = 0
    while size >= 1024 and index < len(units) - 1:
        size /= 1024
        index += 1
    return f'{size:.2f} {units[index]}'


def generate_tooltip(template: TemplateMetadataModel) -> str:
    """Return the filename with its size in KB."""
    if template.size_bytes is None:
        return template.filename
    return f'{template.filename} ({template.size_bytes / 1024:.2f} KB)'


def format_display_name(filename: str) -> str:
    """Return a title cased display name for a template filename.

    >>> format_display_name('api-design_guide.md')
    'Api Design Guide'
    """
    words = remove_extension(filename).replace('-', ' ').replace('_', ' ').split(' ')
    return ' '.join(w[:1].upper() + w[1:] for w in words)


def format_configuration_source(source: ConfigurationSource) -> str:
    """Return the user facing description of a configuration source."""
    if isinstance(source, RemoteSource):
        return f'GitHub: {source.repository.identity}'
    if isinstance(source, LocalSource):
        return f'Local: {source.root_path}'
    if isinstance(source, UnconfiguredSource):
        return 'No Configuration'
    ex_msg = f'Unsupported configuration source: {type(source).__name__}'
    raise TypeError(ex_msg)


def format_last_fetch(fetched_at: datetime | None, now: datetime | None = None) -> str:
    """Return a humanized age for the last fetch (e.g. "2 minutes ago")."""
    if fetched_at is None:
        return 'never'
    other = arrow.get(now) if now is not None else arrow.utcnow()
    return arrow.get(fetched_at).humanize(other)


def format_status_line(result: CatalogueResultModel, now: datetime | None = None) -> str:
    """Return the status line shown above the catalogue tree."""
    status = f'Cache: {result.freshness_label}'
    if result.fetched_at is not None:
        status = f'Last fetch: {format_last_fetch(result.fetched_at, now)} • {status}'
    return status
