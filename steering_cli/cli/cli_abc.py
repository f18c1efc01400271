"""Steering CLI Module"""

# standard library
import logging
import os
from abc import ABC
from functools import cached_property
from logging.handlers import RotatingFileHandler
from pathlib import Path

# first-party
from steering_cli.cli.model.app_settings_model import AppSettingsModel

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)8s - %(message)s (%(filename)s:%(lineno)d)'


class CliABC(ABC):  # noqa: B024
    """Base class for CLI command implementations.

    Provides settings, the CLI output directory, a rotating file log, and the
    proxy option helpers shared by every command.
    """

    def __init__(self):
        """Initialize instance properties."""
        self.settings = AppSettingsModel()
        self.log = _logger
        self._add_file_handler()

    @cached_property
    def cli_out_path(self) -> Path:
        """Return the directory for CLI state, token, and log files."""
        path = self.settings.out_path
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _add_file_handler(self):
        """Attach a rotating file handler to the package logger (once per log file)."""
        log_file = self.cli_out_path / 'steering.log'
        for handler in _logger.handlers:
            if isinstance(handler, RotatingFileHandler) and Path(handler.baseFilename) == log_file:
                return

        handler = RotatingFileHandler(
            log_file,
            backupCount=self.settings.log_backup_count,
            encoding='utf-8',
            maxBytes=self.settings.log_max_bytes,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
        _logger.setLevel(self.settings.log_level.upper())

    @staticmethod
    def _process_proxy_host(proxy_host: str | None) -> str | None:
        """Return the proxy host from the option or the PROXY_HOST env var."""
        return proxy_host or os.getenv('PROXY_HOST')

    @staticmethod
    def _process_proxy_port(proxy_port: int | None) -> int | None:
        """Return the proxy port from the option or the PROXY_PORT env var."""
        if proxy_port is not None:
            return proxy_port
        env_port = os.getenv('PROXY_PORT')
        if env_port and env_port.isdigit():
            return int(env_port)
        return None

    @staticmethod
    def _process_proxy_user(proxy_user: str | None) -> str | None:
        """Return the proxy user from the option or the PROXY_USER env var."""
        return proxy_user or os.getenv('PROXY_USER')

    @staticmethod
    def _process_proxy_pass(proxy_pass: str | None) -> str | None:
        """Return the proxy password from the option or the PROXY_PASS env var."""
        return proxy_pass or os.getenv('PROXY_PASS')
