"""Interactive service picker."""

from rich.markup import escape
from rich.prompt import IntPrompt
from rich.table import Table

from svcmgr.cli.output import STATUS_ICONS, console
from svcmgr.exceptions import NoServicesFoundError, SelectionCancelledError
from svcmgr.models.service import ServiceRecord


def select_service(services: list[ServiceRecord], prompt: str) -> ServiceRecord:
    """Ask the user to pick one service from a numbered table.

    Entering 0 cancels the selection.

    Args:
        services: Candidates, shown in the given order.
        prompt: Question shown above the input.

    Returns:
        The chosen record.

    Raises:
        NoServicesFoundError: If there are no candidates.
        SelectionCancelledError: On 0, Ctrl-C or end of input.
    """
    if not services:
        raise NoServicesFoundError("No services to choose from")

    table = Table(title=prompt, show_header=False)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Service")
    for number, service in enumerate(services, start=1):
        table.add_row(str(number), f"{STATUS_ICONS[service.status]} {escape(service.label())}")
    console.print(table)

    choices = [str(n) for n in range(len(services) + 1)]
    try:
        choice = IntPrompt.ask(
            "Service number (0 to cancel)",
            console=console,
            choices=choices,
            show_choices=False,
        )
    except (KeyboardInterrupt, EOFError):
        raise SelectionCancelledError() from None

    if choice == 0:
        raise SelectionCancelledError()
    return services[choice - 1]
