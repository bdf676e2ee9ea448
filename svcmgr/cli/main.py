"""Main CLI entry point for service-manager."""

import logging
import sys
from pathlib import Path

import click

from svcmgr.cli.config import config
from svcmgr.cli.control import start, stop
from svcmgr.cli.list import list_services
from svcmgr.cli.output import error
from svcmgr.cli.status import status
from svcmgr.exceptions import ConfigError, ServiceManagerError
from svcmgr.services.brew import BrewBackend
from svcmgr.services.config import ConfigService
from svcmgr.services.launchd import LaunchdBackend


def _setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config.yaml",
)
@click.option("--debug/--no-debug", default=False, help="Show debug information")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, debug: bool) -> None:
    """macOS Service Manager - Manage system services.

    Lists, starts and stops launchd jobs and, with --brew, Homebrew services.
    """
    _setup_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    config_service = ConfigService(config_path)
    try:
        settings = config_service.load()
    except ConfigError as e:
        error(str(e))
        raise click.Abort() from None

    ctx.obj["config"] = settings
    ctx.obj["config_path"] = config_service.config_path
    # Backends may be injected by the caller, e.g. in tests
    ctx.obj.setdefault("launchd", LaunchdBackend(settings.executables.launchctl))
    ctx.obj.setdefault("brew", BrewBackend(settings.executables.brew))


# Register commands
cli.add_command(list_services, name="list")
cli.add_command(start)
cli.add_command(stop)
cli.add_command(status)
cli.add_command(config)


def main() -> None:
    """Main entry point with error handling."""
    try:
        cli()
    except ServiceManagerError as e:
        error(str(e))
        sys.exit(1)
    except Exception as e:
        if "--debug" in sys.argv:
            raise
        error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
