"""Steering CLI Module"""

# first-party
from steering_cli.catalogue.notifier import NotifierABC
from steering_cli.render.render import Render


class RenderNotifier(NotifierABC):
    """Notifier that renders rich panels."""

    def info(self, message: str):
        """Render an info panel."""
        Render.panel.info(message)

    def error(self, message: str):
        """Render an error panel."""
        Render.panel.error(message)
