"""Steering CLI Module"""

# standard library
import logging
from abc import ABC, abstractmethod

# get logger
_logger = logging.getLogger(__name__.split('.', maxsplit=1)[0])


class NotifierABC(ABC):
    """Surface catalogue outcomes to a user."""

    @abstractmethod
    def info(self, message: str):
        """Show an informational message."""

    @abstractmethod
    def error(self, message: str):
        """Show an error message."""


class LogNotifier(NotifierABC):
    """Notifier that only writes to the log."""

    def info(self, message: str):
        """Log an informational message."""
        _logger.info(f'action=notify, message={message}')

    def error(self, message: str):
        """Log an error message."""
        _logger.error(f'action=notify, message={message}')
