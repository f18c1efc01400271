"""Steering CLI Module"""

# standard library
from typing import NoReturn

# third-party
import typer
from rich import print as print_
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.tree import Tree

# first-party
from steering_cli.catalogue.display import format_status_line, generate_tooltip
from steering_cli.catalogue.model.catalogue_result_model import CatalogueResultModel
from steering_cli.catalogue.model.tree_node_model import DirectoryNode, LeafNode, TreeNode


class RenderPanel:
    """Render rich panels."""

    accent = 'dark_orange'

    @classmethod
    def info(cls, message: str, title: str = 'Info'):
        """Render an info panel."""
        print_(Panel(message, title=f'[bold {cls.accent}]{title}', title_align='left'))

    @classmethod
    def success(cls, message: str, title: str = 'Success'):
        """Render a success panel."""
        print_(
            Panel(message, title=f'[bold green]{title}', title_align='left', border_style='green')
        )

    @classmethod
    def warning(cls, message: str, title: str = 'Warning'):
        """Render a warning panel."""
        print_(
            Panel(message, title=f'[bold yellow]{title}', title_align='left', border_style='yellow')
        )

    @classmethod
    def error(cls, message: str, title: str = 'Error'):
        """Render an error panel without exiting."""
        print_(Panel(message, title=f'[bold red]{title}', title_align='left', border_style='red'))

    @classmethod
    def failure(cls, message: str, title: str = 'Failure') -> NoReturn:
        """Render an error panel and exit with code 1."""
        cls.error(message, title)
        raise typer.Exit(code=1)


class RenderPrompt:
    """Render rich prompts."""

    @staticmethod
    def ask(
        text: str,
        choices: list[str] | None = None,
        default: str | None = None,
        password: bool = False,
        show_choices: bool = True,
        show_default: bool = True,
    ) -> str | None:
        """Prompt the user for a value."""
        return Prompt.ask(
            text,
            choices=choices,
            default=default,
            password=password,
            show_choices=show_choices,
            show_default=show_default,
        )


class RenderTable:
    """Render rich tables."""

    @staticmethod
    def key_value(title: str, kv_data: dict | list[dict]):
        """Render a two column key/value table."""
        table = Table(show_edge=False, show_header=False, title=title, title_justify='left')
        table.add_column('Key', style='dark_orange', no_wrap=True)
        table.add_column('Value', style='bold')

        rows = kv_data if isinstance(kv_data, list) else [kv_data]
        for row in rows:
            for key, value in row.items():
                table.add_row(str(key), '' if value is None else str(value))
        print_(table)


class RenderTree:
    """Render the template catalogue as a rich tree."""

    @classmethod
    def catalogue(cls, result: CatalogueResultModel, title: str):
        """Render the catalogue tree with its status line."""
        tree = Tree(f'[bold]{title}[/bold] [dim]{format_status_line(result)}[/dim]')
        cls._add_nodes(tree, result.tree)
        print_(tree)

    @classmethod
    def _add_nodes(cls, branch: Tree, nodes: list[TreeNode]):
        """Add nodes to a rich tree branch."""
        for node in nodes:
            if isinstance(node, DirectoryNode):
                cls._add_nodes(branch.add(f'[bold blue]{node.name}/'), node.children)
            elif isinstance(node, LeafNode):
                branch.add(f'{node.name} [dim]({generate_tooltip(node.template)})[/dim]')
            else:
                ex_msg = f'Unsupported tree node type: {type(node).__name__}'
                raise TypeError(ex_msg)


class Render:
    """Render CLI output."""

    panel = RenderPanel
    prompt = RenderPrompt
    table = RenderTable
    tree = RenderTree
