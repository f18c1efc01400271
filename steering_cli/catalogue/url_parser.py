"""Steering CLI Module"""

# standard library
import re

# first-party
from steering_cli.catalogue.errors import ConfigurationError
from steering_cli.catalogue.model.repository_config_model import (
    DEFAULT_BRANCH,
    RepositoryConfigModel,
)

# owner and repo names: alphanumerics and hyphens, not starting with a hyphen
_NAME_PATTERN = re.compile(r'^[a-zA-Z0-9][a-zA-Z0-9-]*$')
_FULL_URL_PATTERN = re.compile(r'^https?://github\.com/([^/]+)/([^/]+)')


def is_valid_github_name(name: str) -> bool:
    """Return True if name is a valid GitHub owner or repository name."""
    return bool(name) and _NAME_PATTERN.match(name) is not None


def parse_repository_url(url: str, branch: str | None = None) -> RepositoryConfigModel:
    """Return the repository config for a repository reference.

    Supported formats:
    * https://github.com/owner/repo (an optional .git suffix is removed)
    * owner/repo
    * owner/repo/path/to/templates
    """
    trimmed = url.strip()
    if not trimmed:
        raise ConfigurationError(
            'Empty repository URL', user_message='Repository URL cannot be empty.'
        )

    match = _FULL_URL_PATTERN.match(trimmed)
    if match:
        owner = match.group(1)
        repo = re.sub(r'\.git$', '', match.group(2))
        path = None
    else:
        parts = trimmed.split('/')
        if len(parts) < 2:
            raise ConfigurationError(
                f'Invalid repository URL format: {url}',
                user_message=(
                    'Repository URL must be in format "owner/repo" or '
                    '"https://github.com/owner/repo".'
                ),
                details={'url': url},
            )
        owner, repo = parts[0], parts[1]
        path_parts = [p for p in parts[2:] if p.strip()]
        path = '/'.join(path_parts) or None

    if not is_valid_github_name(owner):
        raise ConfigurationError(
            f'Invalid owner name: {owner}',
            user_message='Owner name contains invalid characters.',
            details={'owner': owner},
        )

    if not is_valid_github_name(repo):
        raise ConfigurationError(
            f'Invalid repository name: {repo}',
            user_message='Repository name contains invalid characters.',
            details={'repo': repo},
        )

    return RepositoryConfigModel(
        owner=owner, repo=repo, path=path, branch=branch or DEFAULT_BRANCH
    )
