"""Homebrew services backend."""

import logging

from svcmgr.models.service import ServiceRecord, ServiceSource, ServiceStatus
from svcmgr.services.base import CommandRunner, ServiceBackend
from svcmgr.services.runner import command_exists

logger = logging.getLogger(__name__)

BREW_STATUS_MAP = {
    "started": ServiceStatus.RUNNING,
    "stopped": ServiceStatus.STOPPED,
    "none": ServiceStatus.STOPPED,
}


def parse_brew_services_line(line: str) -> ServiceRecord | None:
    """Parse one line of ``brew services list`` output.

    Columns are ``Name Status User File``; User and File are empty for
    services that have never been started.

    Args:
        line: A single output line.

    Returns:
        The parsed record, or None for blank, header or malformed lines.
    """
    parts = line.split()
    if len(parts) < 2 or parts[0] == "Name":
        return None

    name, raw_status = parts[0], parts[1]
    user = None
    # "error" rows carry an exit code column before the user
    rest = parts[2:]
    if rest and raw_status == "error" and rest[0].lstrip("-").isdigit():
        rest = rest[1:]
    if rest and not rest[0].startswith(("/", "~")):
        user = rest[0]

    return ServiceRecord(
        name=name,
        status=BREW_STATUS_MAP.get(raw_status, ServiceStatus.UNKNOWN),
        source=ServiceSource.BREW,
        raw_status=raw_status,
        user=user,
    )


def parse_brew_services_list(output: str) -> list[ServiceRecord]:
    """Parse the full output of ``brew services list``.

    Args:
        output: Raw stdout text.

    Returns:
        Records for every line that could be parsed, in output order.
    """
    services = []
    for line in output.splitlines():
        record = parse_brew_services_line(line)
        if record is None:
            if line.strip():
                logger.debug("Skipping brew services line: %r", line)
            continue
        services.append(record)
    return services


class BrewBackend(ServiceBackend):
    """Homebrew ``brew services`` backend."""

    source = ServiceSource.BREW

    def __init__(self, executable: str = "brew", runner: CommandRunner | None = None) -> None:
        super().__init__(executable, runner)
        self._available: bool | None = None

    def is_available(self) -> bool:
        """Check if brew is installed.

        Returns:
            True if brew is on PATH.
        """
        if self._available is None:
            self._available = command_exists(self.executable)
        return self._available

    def list_services(self) -> list[ServiceRecord]:
        """List Homebrew services.

        Returns:
            Parsed records for every formula with a service definition.
        """
        output = self._run([self.executable, "services", "list"])
        services = parse_brew_services_list(output)
        logger.debug("Found %d brew services", len(services))
        return services

    def start(self, name: str) -> None:
        """Start a Homebrew service.

        Args:
            name: Formula name.
        """
        self._run([self.executable, "services", "start", name])

    def stop(self, name: str) -> None:
        """Stop a Homebrew service.

        Args:
            name: Formula name.
        """
        self._run([self.executable, "services", "stop", name])
