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
    refresh: bool = typer.Option(
        default=False, help='Refetch the listing even if the cached copy is fresh.'
    ),
    stats: bool = typer.Option(default=False, help='Show cache statistics after the listing.'),
    proxy_host: StrOrNone = typer.Option(None, help='(Advanced) Hostname for the proxy server.'),
    proxy_port: IntOrNone = typer.Option(None, help='(Advanced) Port number for the proxy server.'),
    proxy_user: StrOrNone = typer.Option(None, help='(Advanced) Username for the proxy server.'),
    proxy_pass: StrOrNone = typer.Option(None, help='(Advanced) Password for the proxy server.'),
):
    r"""List the available steering templates.

    GitHub listings are cached for STEERING_CACHE_TTL seconds (default 300). When
    GitHub is unreachable a previously cached listing is shown and marked stale.

    Optional environment variables include:\n
    * GITHUB_TOKEN\n
    * PROXY_HOST\n
    * PROXY_PORT\n
    * PROXY_USER\n
    * PROXY_PASS\n
    """
    cli = CatalogueCli(proxy_host, proxy_port, proxy_user, proxy_pass)
    try:
        cli.list_templates(force=refresh)
        if stats:
            Render.table.key_value('Cache', cli.cache_status())
    except typer.Exit:
        raise
    except CatalogueError as ex:
        cli.log.exception('Failed to run "steering list" command.')
        Render.panel.failure(ex.user_message)
    except Exception as ex:
        cli.log.exception('Failed to run "steering list" command.')
        Render.panel.failure(f'Exception: {ex}')
    finally:
        cli.close()
