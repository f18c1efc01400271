"""Fixtures for CLI command tests."""

# standard library
import logging
from logging.handlers import RotatingFileHandler

# third-party
import pytest
from typer.testing import CliRunner


@pytest.fixture()
def runner() -> CliRunner:
    """Return a typer CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cli(out_path, clear_proxy_env_vars, clear_token_env_vars):
    """Run every CLI test against a temp out path and remove its log handlers afterwards."""
    yield
    logger = logging.getLogger('steering_cli')
    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()
