"""Colored, symbol-prefixed rendering of service records."""

from rich.console import Console
from rich.markup import escape

from svcmgr.models.service import ServiceRecord, ServiceSource, ServiceStatus

console = Console()

STATUS_ICONS = {
    ServiceStatus.RUNNING: "🟢",
    ServiceStatus.STOPPED: "🔴",
    ServiceStatus.UNKNOWN: "🟡",
}

STATUS_COLORS = {
    ServiceStatus.RUNNING: "green",
    ServiceStatus.STOPPED: "red",
    ServiceStatus.UNKNOWN: "yellow",
}

SOURCE_BADGES = {
    ServiceSource.LAUNCHD: "[cyan]\\[LAUNCHD][/cyan]",
    ServiceSource.BREW: "[magenta]\\[BREW][/magenta]",
}

RULE_WIDTH = 80


def error(msg: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error:[/red] {escape(msg)}")


def warning(msg: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {escape(msg)}")


def info(msg: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{escape(msg)}[/dim]")


def success(msg: str) -> None:
    """Print a success message."""
    console.print(f"[green]✅[/green] {escape(msg)}")


def format_status(service: ServiceRecord) -> str:
    """Color the status word by its normalized status."""
    color = STATUS_COLORS[service.status]
    return f"[{color}]{escape(service.display_status)}[/{color}]"


def format_service_line(service: ServiceRecord) -> str:
    """Format one service as a rich markup line.

    Args:
        service: Record to format.

    Returns:
        Markup like ``🟢 [LAUNCHD] com.apple.Finder - running (PID: 42)``.
    """
    pid_info = f" [dim](PID: {service.pid})[/dim]" if service.pid is not None else ""
    return (
        f"{STATUS_ICONS[service.status]} {SOURCE_BADGES[service.source]} "
        f"[bold]{escape(service.name)}[/bold] - {format_status(service)}{pid_info}"
    )


def print_services(services: list[ServiceRecord]) -> None:
    """Print a framed list of services.

    Args:
        services: Records to print, in display order.
    """
    if not services:
        console.print("[yellow]📭 No services found[/yellow]")
        return

    console.print("[bold blue]🔧 System Services:[/bold blue]")
    console.print(f"[blue]{'─' * RULE_WIDTH}[/blue]")
    for service in services:
        console.print(format_service_line(service))
    console.print(f"[blue]{'─' * RULE_WIDTH}[/blue]")
    console.print(f"[bold]📊 Total {len(services)} services listed[/bold]")


def print_service_status(service: ServiceRecord) -> None:
    """Print the status line for a single service."""
    name = f"[blue]{escape(service.name)}[/blue]"
    if service.is_brew:
        user_info = f" - User: [cyan]{escape(service.user)}[/cyan]" if service.user else ""
        console.print(f"📋 Brew Service: {name} - Status: {format_status(service)}{user_info}")
        return

    pid_info = str(service.pid) if service.pid is not None else "N/A"
    console.print(
        f"📋 Launchd Service: {name} - Status: {format_status(service)}"
        f" - PID: [cyan]{pid_info}[/cyan]"
    )
    if service.last_exit is not None:
        console.print(f"   Last exit status: [cyan]{service.last_exit}[/cyan]")
