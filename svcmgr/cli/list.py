"""List command for service-manager CLI."""

import click

from svcmgr.cli.output import error, print_services, warning
from svcmgr.exceptions import ServiceManagerError
from svcmgr.models.config import ManagerConfig
from svcmgr.services.aggregator import ServiceAggregator


@click.command("list")
@click.option("-r", "--running", is_flag=True, help="Show only running services")
@click.option("-b", "--brew", is_flag=True, help="Include brew services")
@click.option("-s", "--sort", is_flag=True, help="Order by source, then name")
@click.pass_context
def list_services(ctx: click.Context, running: bool, brew: bool, sort: bool) -> None:
    """List launchd services, optionally with Homebrew services.

    Examples:
        service-manager list              # All launchd jobs
        service-manager list -r           # Only running jobs
        service-manager list --brew -s    # launchd + brew, sorted
    """
    settings: ManagerConfig = ctx.obj["config"]
    aggregator = ServiceAggregator(ctx.obj["launchd"], ctx.obj["brew"])

    try:
        listing = aggregator.collect(
            running_only=running,
            include_brew=brew or settings.brew.include_by_default,
            sort=sort or settings.list_defaults.sort,
        )
    except ServiceManagerError as e:
        error(str(e))
        raise click.Abort() from None

    for msg in listing.warnings:
        warning(msg)

    print_services(listing.services)
