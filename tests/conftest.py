"""Conftest for testing."""

# standard library
from pathlib import Path

# third-party
import pytest
from dotenv import load_dotenv

# first-party
from tests.helpers import FakeClock, MemoryStore

load_dotenv()

PROXY_ENV_VARS = ('PROXY_HOST', 'PROXY_PORT', 'PROXY_USER', 'PROXY_PASS')
TOKEN_ENV_VARS = ('GITHUB_TOKEN', 'GITHUB_PAT')


@pytest.fixture()
def clear_proxy_env_vars(monkeypatch: pytest.MonkeyPatch):
    """Clear all proxy-related environment variables.

    Use this fixture in tests that should not route requests through a proxy.
    Env vars are automatically restored after the test completes.

    Args:
        monkeypatch: Pytest fixture for modifying environment variables.
    """
    for var in PROXY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def clear_token_env_vars(monkeypatch: pytest.MonkeyPatch):
    """Clear the GitHub token environment variables."""
    for var in TOKEN_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def memory_store() -> MemoryStore:
    """Return an empty in-memory key/value store."""
    return MemoryStore()


@pytest.fixture()
def clock() -> FakeClock:
    """Return a fake clock."""
    return FakeClock()


@pytest.fixture()
def out_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI out path (state, token, log) at a temp directory."""
    path = tmp_path / '.steering'
    monkeypatch.setenv('STEERING_OUT_PATH', str(path))
    monkeypatch.setenv('STEERING_CACHE_BACKEND', 'json')
    return path
