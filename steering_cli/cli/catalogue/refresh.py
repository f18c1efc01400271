"""Steering CLI Module"""

# standard library
from typing import Optional

# third-party
import typer

# first-party
from steering_cli.catalogue.errors import CatalogueError
from steering_cli.cli.catalogue.catalogue_cli import CatalogueCli
from steering_cli.render.render import Render

# typer does not yet support PEP 604, but pyupgrade will enforce
# PEP 604. this is a temporary workaround until support is added.
IntOrNone = Optional[int]  # noqa: UP007
StrOrNone = Optional[str]  # noqa: UP007


def command(
    proxy_host: StrOrNone = typer.Option(None, help='(Advanced) Hostname for the proxy server.'),
    proxy_port: IntOrNone = typer.Option(None, help='(Advanced) Port number for the proxy server.'),
    proxy_user: StrOrNone = typer.Option(None, help='(Advanced) Username for the proxy server.'),
    proxy_pass: StrOrNone = typer.Option(None, help='(Advanced) Password for the proxy server.'),
):
    """Refetch the template listing from GitHub, bypassing the cache."""
    cli = CatalogueCli(proxy_host, proxy_port, proxy_user, proxy_pass)
    try:
        result = cli.list_templates(force=True)
        if result.freshness_label == 'fresh':
            Render.panel.success('Template listing refreshed.')
    except typer.Exit:
        raise
    except CatalogueError as ex:
        cli.log.exception('Failed to run "steering refresh" command.')
        Render.panel.failure(ex.user_message)
    except Exception as ex:
        cli.log.exception('Failed to run "steering refresh" command.')
        Render.panel.failure(f'Exception: {ex}')
    finally:
        cli.close()
