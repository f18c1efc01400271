"""Steering CLI Module"""

# third-party
import typer

# first-party
from steering_cli.cli.config.config_cli import ConfigCli
from steering_cli.render.render import Render


def command(
    set_: bool = typer.Option(False, '--set', help='Prompt for a GitHub token and store it.'),
    clear: bool = typer.Option(default=False, help='Remove the stored GitHub token.'),
):
    r"""Manage the GitHub token used for API requests.

    A token raises the GitHub rate limit and allows private repositories.
    The GITHUB_TOKEN environment variable takes precedence over the stored token.\n
    """
    if set_ and clear:
        Render.panel.failure('Use either --set or --clear, not both.')

    cli = ConfigCli()
    try:
        if set_:
            cli.set_token()
        elif clear:
            cli.clear_token()
        else:
            authenticated = cli.catalogue.token_store.get_token() is not None
            Render.table.key_value('GitHub Token', {'Authenticated': authenticated})
    except typer.Exit:
        raise
    except Exception as ex:
        cli.log.exception('Failed to run "steering token" command.')
        Render.panel.failure(f'Exception: {ex}')
    finally:
        cli.close()
