"""Steering CLI Module"""

# third-party
import typer

# first-party
from steering_cli.cli.catalogue.catalogue_cli import CatalogueCli
from steering_cli.render.render import Render


def command(
    all_: bool = typer.Option(
        False, '--all', help='Clear the cached listings of every repository.'
    ),
):
    """Clear the cached template listing of the active repository."""
    cli = CatalogueCli()
    try:
        cli.clear_cache(all_=all_)
    except Exception as ex:
        cli.log.exception('Failed to run "steering clear-cache" command.')
        Render.panel.failure(f'Exception: {ex}')
    finally:
        cli.close()
