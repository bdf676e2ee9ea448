"""macOS launchd backend driven through launchctl."""

import logging

from svcmgr.models.service import ServiceRecord, ServiceSource, ServiceStatus
from svcmgr.services.base import CommandRunner, ServiceBackend
from svcmgr.services.runner import command_exists

logger = logging.getLogger(__name__)

# launchctl prints "-" in place of a PID or exit status that doesn't exist
EMPTY_COLUMN = "-"


def _parse_column(value: str) -> int | None:
    """Parse a numeric launchctl column.

    Raises:
        ValueError: If the column is neither a number nor "-".
    """
    if value == EMPTY_COLUMN:
        return None
    return int(value)


def _is_pid_column(value: str) -> bool:
    return value == EMPTY_COLUMN or value.isdigit()


def parse_launchctl_line(line: str) -> ServiceRecord | None:
    """Parse one line of ``launchctl list`` output.

    The usual layout is ``PID  Status  Label``. Lines whose first column
    is not numeric are read label first, as ``Label  Status  PID``.

    Args:
        line: A single output line.

    Returns:
        The parsed record, or None for blank, header or malformed lines.
    """
    stripped = line.strip()
    if not stripped:
        return None

    parts = stripped.split()
    if len(parts) < 3 or parts[0] == "PID":
        return None

    if _is_pid_column(parts[0]):
        pid_col, exit_col, name = stripped.split(maxsplit=2)
    else:
        name, exit_col, pid_col = stripped.rsplit(maxsplit=2)

    if not _is_pid_column(pid_col):
        return None

    try:
        pid = _parse_column(pid_col)
        last_exit = _parse_column(exit_col)
    except ValueError:
        return None

    return ServiceRecord(
        name=name,
        status=ServiceStatus.RUNNING if pid is not None else ServiceStatus.STOPPED,
        source=ServiceSource.LAUNCHD,
        pid=pid,
        last_exit=last_exit,
    )


def parse_launchctl_list(output: str) -> list[ServiceRecord]:
    """Parse the full output of ``launchctl list``.

    Args:
        output: Raw stdout text.

    Returns:
        Records for every line that could be parsed, in output order.
    """
    services = []
    for line in output.splitlines():
        record = parse_launchctl_line(line)
        if record is None:
            if line.strip():
                logger.debug("Skipping launchctl line: %r", line)
            continue
        services.append(record)
    return services


class LaunchdBackend(ServiceBackend):
    """macOS launchd service backend."""

    source = ServiceSource.LAUNCHD

    def __init__(self, executable: str = "launchctl", runner: CommandRunner | None = None) -> None:
        super().__init__(executable, runner)

    def is_available(self) -> bool:
        """Check if launchctl is installed.

        Returns:
            True if launchctl is on PATH.
        """
        return command_exists(self.executable)

    def list_services(self) -> list[ServiceRecord]:
        """List launchd jobs.

        Returns:
            Parsed records for every loaded job.
        """
        output = self._run([self.executable, "list"])
        services = parse_launchctl_list(output)
        logger.debug("Found %d launchd services", len(services))
        return services

    def start(self, name: str) -> None:
        """Load and enable a launchd job.

        Args:
            name: Job label or plist path.
        """
        self._run([self.executable, "load", "-w", name])

    def stop(self, name: str) -> None:
        """Unload and disable a launchd job.

        Args:
            name: Job label or plist path.
        """
        self._run([self.executable, "unload", "-w", name])
