"""Steering CLI Module"""

# standard library
from typing import Optional

# third-party
import typer

# first-party
from steering_cli.catalogue.errors import CatalogueError
from steering_cli.cli.config.config_cli import ConfigCli
from steering_cli.render.render import Render

# typer does not yet support PEP 604, but pyupgrade will enforce
# PEP 604. this is a temporary workaround until support is added.
IntOrNone = Optional[int]  # noqa: UP007
StrOrNone = Optional[str]  # noqa: UP007


def command(
    repo: StrOrNone = typer.Option(
        None,
        help='The GitHub repository (owner/repo[/path] or https://github.com/owner/repo).',
    ),
    branch: StrOrNone = typer.Option(
        None, help='The branch to read templates from (default: main).'
    ),
    local: StrOrNone = typer.Option(None, help='A local directory of templates.'),
    show: bool = typer.Option(default=False, help='Show the current configuration.'),
    validate: bool = typer.Option(
        default=True, help='Check that the repository is reachable before saving.'
    ),
    proxy_host: StrOrNone = typer.Option(None, help='(Advanced) Hostname for the proxy server.'),
    proxy_port: IntOrNone = typer.Option(None, help='(Advanced) Port number for the proxy server.'),
    proxy_user: StrOrNone = typer.Option(None, help='(Advanced) Username for the proxy server.'),
    proxy_pass: StrOrNone = typer.Option(None, help='(Advanced) Password for the proxy server.'),
):
    """Select the template source.

    A configured repository takes precedence over a local path. Setting
    --local removes the configured repository.
    """
    if repo is not None and local is not None:
        Render.panel.failure('Use either --repo or --local, not both.')

    if branch is not None and repo is None:
        Render.panel.failure('The --branch flag requires --repo.')

    cli = ConfigCli(proxy_host, proxy_port, proxy_user, proxy_pass)
    try:
        if repo is not None:
            cli.configure_remote(repo, branch, validate=validate)
        elif local is not None:
            cli.configure_local(local)

        if show or (repo is None and local is None):
            cli.show()
    except typer.Exit:
        raise
    except CatalogueError as ex:
        cli.log.exception('Failed to run "steering configure" command.')
        Render.panel.failure(ex.user_message)
    except Exception as ex:
        cli.log.exception('Failed to run "steering configure" command.')
        Render.panel.failure(f'Exception: {ex}')
    finally:
        cli.close()
