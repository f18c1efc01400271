"""Steering CLI Module"""

# standard library
import os
from abc import ABC, abstractmethod
from pathlib import Path


class TokenStoreABC(ABC):
    """Storage for the GitHub authentication token."""

    @abstractmethod
    def get_token(self) -> str | None:
        """Return the stored token or None."""

    @abstractmethod
    def set_token(self, token: str):
        """Store the token."""

    @abstractmethod
    def clear_token(self):
        """Remove the stored token."""


class FileTokenStore(TokenStoreABC):
    """Token persisted in a file only readable by the current user."""

    def __init__(self, path: Path):
        """Initialize instance properties."""
        self.path = Path(path)

    def get_token(self) -> str | None:
        """Return the stored token or None."""
        if not self.path.is_file():
            return None
        token = self.path.read_text(encoding='utf-8').strip()
        return token or None

    def set_token(self, token: str):
        """Store the token with 0600 permissions."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, 'w', encoding='utf-8') as fh:
            fh.write(token.strip())
        self.path.chmod(0o600)

    def clear_token(self):
        """Remove the stored token."""
        self.path.unlink(missing_ok=True)


class EnvTokenStore(TokenStoreABC):
    """Token from the environment, falling back to another store.

    GITHUB_TOKEN (or GITHUB_PAT) takes precedence over the stored token.
    Writes always go to the fallback store.
    """

    env_vars = ('GITHUB_TOKEN', 'GITHUB_PAT')

    def __init__(self, store: TokenStoreABC):
        """Initialize instance properties."""
        self.store = store

    def get_token(self) -> str | None:
        """Return the environment token or the stored token."""
        for env_var in self.env_vars:
            token = os.getenv(env_var)
            if token:
                return token
        return self.store.get_token()

    def set_token(self, token: str):
        """Store the token in the fallback store."""
        self.store.set_token(token)

    def clear_token(self):
        """Remove the token from the fallback store."""
        self.store.clear_token()
