"""Status command for service-manager CLI."""

import click
from rich.markup import escape

from svcmgr.cli.output import console, error, print_service_status
from svcmgr.exceptions import ServiceManagerError, ServiceNotFoundError
from svcmgr.services.dispatcher import ServiceDispatcher


@click.command()
@click.argument("service")
@click.option("-b", "--brew", is_flag=True, help="Check as brew service")
@click.pass_context
def status(ctx: click.Context, service: str, brew: bool) -> None:
    """Show the status of one service.

    Only launchd is queried unless --brew is given, in which case only
    Homebrew is queried.

    Examples:
        service-manager status com.apple.Finder
        service-manager status redis --brew
    """
    dispatcher = ServiceDispatcher(ctx.obj["launchd"], ctx.obj["brew"])

    try:
        record = dispatcher.status(service, brew=brew)
    except ServiceNotFoundError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise click.Abort() from None
    except ServiceManagerError as e:
        error(str(e))
        raise click.Abort() from None

    print_service_status(record)
