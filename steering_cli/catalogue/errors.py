"""Classified errors raised while building a template catalogue.

The remote client and the local enumerator raise these; the Catalogue is the
only place that decides whether an error is recoverable (stale cache) or is
surfaced to the user with a remediation hint.
"""

# standard library
from datetime import datetime
from typing import Any


class CatalogueError(Exception):
    """Base class for all classified catalogue errors.

    ``message`` is the diagnostic text written to the log, ``user_message`` is
    the text shown to the user, and ``remediation`` names the recovery action.
    """

    kind = 'catalogue_error'
    remediation = 'retry'
    default_user_message = 'An unexpected error occurred.'

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize instance properties."""
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the diagnostic message."""
        return self.message


class NotFoundError(CatalogueError):
    """Repository or path does not exist."""

    kind = 'not_found'
    remediation = 'reconfigure'
    default_user_message = (
        'Repository not found or is private. Check the repository URL or configure '
        'authentication.'
    )


class AuthError(CatalogueError):
    """Token missing, invalid, or lacking the required scope."""

    kind = 'auth'
    remediation = 're-authenticate'
    default_user_message = 'Authentication failed. Please update your GitHub token.'


class RateLimitError(CatalogueError):
    """API quota exhausted."""

    kind = 'rate_limit'
    remediation = 'wait or configure a token'
    default_user_message = (
        'GitHub API rate limit exceeded. Please wait or configure an authentication token.'
    )

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        details: dict[str, Any] | None = None,
        reset_at: datetime | None = None,
    ):
        """Initialize instance properties."""
        if user_message is None and reset_at is not None:
            user_message = f'Rate limit exceeded. Resets at {reset_at.strftime("%H:%M:%S")} UTC.'
        super().__init__(message, user_message, details)
        self.reset_at = reset_at


class NetworkError(CatalogueError):
    """Transport failure or unexpected HTTP status."""

    kind = 'network'
    remediation = 'retry'
    default_user_message = 'Unable to connect to GitHub. Please check your internet connection.'


class FetchCancelledError(NetworkError):
    """A fetch was cancelled before it completed."""

    kind = 'cancelled'
    default_user_message = 'Template fetch was cancelled.'


class MalformedResponseError(CatalogueError):
    """The API returned a payload with an unexpected shape."""

    kind = 'malformed_response'
    remediation = 'retry'
    default_user_message = 'Received an unexpected response format from GitHub.'


class TooDeepError(MalformedResponseError):
    """Directory nesting exceeded the traversal ceiling."""

    kind = 'too_deep'
    default_user_message = (
        'The repository directory structure is nested too deeply to list templates.'
    )


class ConfigurationError(CatalogueError):
    """Repository identity is missing or invalid."""

    kind = 'configuration'
    remediation = 'reconfigure'
    default_user_message = 'Invalid configuration. Please check your repository settings.'


class LocalPathError(CatalogueError):
    """Local templates path is missing or unreadable."""

    kind = 'local_path'
    remediation = 'set a new local path'
    default_user_message = 'Templates path not found or not readable.'
