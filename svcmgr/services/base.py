"""Base service backend interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from svcmgr.models.service import ServiceRecord, ServiceSource
from svcmgr.services.runner import run_command

CommandRunner = Callable[[list[str]], str]


class ServiceBackend(ABC):
    """Abstract base class for a subsystem that manages services."""

    source: ServiceSource

    def __init__(self, executable: str, runner: CommandRunner | None = None) -> None:
        """Initialize the backend.

        Args:
            executable: Name or path of the control command.
            runner: Function used to run commands, defaults to run_command.
        """
        self.executable = executable
        self._run = runner or run_command

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the subsystem can be used on this host.

        Returns:
            True if the control command is installed.
        """
        pass

    @abstractmethod
    def list_services(self) -> list[ServiceRecord]:
        """List every service the subsystem knows about.

        Returns:
            Parsed service records.
        """
        pass

    @abstractmethod
    def start(self, name: str) -> None:
        """Start a service.

        Args:
            name: Service name.
        """
        pass

    @abstractmethod
    def stop(self, name: str) -> None:
        """Stop a service.

        Args:
            name: Service name.
        """
        pass
