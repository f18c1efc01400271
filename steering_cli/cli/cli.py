"""Steering CLI Module"""

# standard library
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

# third-party
import typer

# first-party
from steering_cli.__metadata__ import __version__
from steering_cli.cli.catalogue import clear_cache, list_, load, rate_limit, refresh
from steering_cli.cli.config import configure, token_
from steering_cli.render.render import Render


def version_callback(
    version: bool = typer.Option(False, '--version', help='Display the version and exit.')
):
    """Display the version and exit."""
    if version is True:
        try:
            cli_version = get_version('steering-cli')
        except PackageNotFoundError:
            cli_version = __version__

        Render.table.key_value('Version Data', {'Steering CLI': cli_version})
        raise typer.Exit()


# initialize typer
app = typer.Typer(callback=version_callback, invoke_without_command=True)
app.command('clear-cache')(clear_cache.command)
app.command('configure')(configure.command)
app.command('list')(list_.command)
app.command('load')(load.command)
app.command('rate-limit')(rate_limit.command)
app.command('refresh')(refresh.command)
app.command('token')(token_.command)


if __name__ == '__main__':
    app()
