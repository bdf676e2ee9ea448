"""Config command for service-manager CLI."""

from pathlib import Path
from typing import Any

import click
from rich.markup import escape
from rich.tree import Tree

from svcmgr.cli.output import console
from svcmgr.models.config import ManagerConfig


def _add_branch(tree: Tree, data: dict[str, Any]) -> None:
    """Add nested config values to a rich tree."""
    for key, value in data.items():
        if isinstance(value, dict):
            branch = tree.add(f"[bold]{escape(str(key))}[/bold]")
            _add_branch(branch, value)
        else:
            tree.add(f"{escape(str(key))}: [cyan]{escape(str(value))}[/cyan]")


@click.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show the effective configuration.

    Values come from config.yaml when it exists, otherwise defaults.
    """
    settings: ManagerConfig = ctx.obj["config"]
    config_path: Path = ctx.obj["config_path"]

    state = "loaded" if config_path.exists() else "not found, using defaults"
    console.print(f"[dim]{escape(str(config_path))} ({state})[/dim]", soft_wrap=True)
    tree = Tree("[bold]Configuration[/bold]")
    _add_branch(tree, settings.model_dump(by_alias=True))
    console.print(tree)
