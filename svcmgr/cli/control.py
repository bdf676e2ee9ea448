"""Start and stop commands for service-manager CLI."""

import click
from rich.markup import escape

from svcmgr.cli.output import console, error, info, success, warning
from svcmgr.cli.picker import select_service
from svcmgr.exceptions import SelectionCancelledError, ServiceManagerError
from svcmgr.models.config import ManagerConfig
from svcmgr.models.service import ServiceRecord, ServiceSource, ServiceStatus
from svcmgr.services.aggregator import ServiceAggregator
from svcmgr.services.dispatcher import ServiceDispatcher


def _direct_record(name: str, brew: bool, status: ServiceStatus) -> ServiceRecord:
    """Build a record for a service named on the command line."""
    return ServiceRecord(
        name=name,
        status=status,
        source=ServiceSource.BREW if brew else ServiceSource.LAUNCHD,
    )


def _candidates(ctx: click.Context, brew: bool, running: bool) -> list[ServiceRecord]:
    """Collect the services the picker should offer.

    Args:
        ctx: Click context with backends and config.
        brew: Whether --brew was given.
        running: Offer running services (for stop) instead of stopped ones.

    Returns:
        Candidate records.
    """
    settings: ManagerConfig = ctx.obj["config"]
    aggregator = ServiceAggregator(ctx.obj["launchd"], ctx.obj["brew"])
    listing = aggregator.collect(include_brew=brew or settings.brew.include_by_default)
    for msg in listing.warnings:
        warning(msg)
    return listing.running() if running else listing.stopped()


def _source_name(service: ServiceRecord) -> str:
    return "Brew" if service.is_brew else "Launchd"


@click.command()
@click.argument("name", required=False)
@click.option("-b", "--brew", is_flag=True, help="Include brew services, or treat NAME as one")
@click.pass_context
def start(ctx: click.Context, name: str | None, brew: bool) -> None:
    """Start a service.

    NAME is a launchd label (or plist path) or, with --brew, a formula name.
    Without NAME, pick from the services that are not running.

    Examples:
        service-manager start
        service-manager start --brew
        service-manager start postgresql@16 --brew
    """
    dispatcher = ServiceDispatcher(ctx.obj["launchd"], ctx.obj["brew"])

    try:
        if name:
            service = _direct_record(name, brew, ServiceStatus.STOPPED)
        else:
            candidates = _candidates(ctx, brew, running=False)
            if not candidates:
                console.print("[green]✅ All services are already running![/green]")
                return
            service = select_service(candidates, "🚀 Select the service you want to start:")

        dispatcher.start(service)
    except SelectionCancelledError:
        info("Cancelled")
        return
    except ServiceManagerError as e:
        error(f"Failed to start service: {e}")
        raise click.Abort() from None

    success(f"{_source_name(service)} service '{service.name}' started")


@click.command()
@click.argument("name", required=False)
@click.option("-b", "--brew", is_flag=True, help="Include brew services, or treat NAME as one")
@click.pass_context
def stop(ctx: click.Context, name: str | None, brew: bool) -> None:
    """Stop a service.

    NAME is a launchd label (or plist path) or, with --brew, a formula name.
    Without NAME, pick from the running services.

    Examples:
        service-manager stop
        service-manager stop --brew
        service-manager stop redis --brew
    """
    dispatcher = ServiceDispatcher(ctx.obj["launchd"], ctx.obj["brew"])

    try:
        if name:
            service = _direct_record(name, brew, ServiceStatus.RUNNING)
        else:
            candidates = _candidates(ctx, brew, running=True)
            if not candidates:
                console.print("[red]🛑 No running services found![/red]")
                return
            service = select_service(candidates, "🛑 Select the service you want to stop:")

        dispatcher.stop(service)
    except SelectionCancelledError:
        info("Cancelled")
        return
    except ServiceManagerError as e:
        error(f"Failed to stop service: {e}")
        raise click.Abort() from None

    console.print(f"[red]🛑 {_source_name(service)} service '{escape(service.name)}' stopped[/red]")
