"""Service record model shared by the launchd and Homebrew backends."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class ServiceStatus(str, Enum):
    """Normalized service status."""

    RUNNING = "running"
    STOPPED = "stopped"
    UNKNOWN = "unknown"


class ServiceSource(str, Enum):
    """Subsystem a service record was discovered through."""

    LAUNCHD = "launchd"
    BREW = "brew"


class ServiceRecord(BaseModel):
    """One discovered service, regardless of where it came from."""

    name: str = Field(description="launchd label or Homebrew formula name")
    status: ServiceStatus = Field(default=ServiceStatus.UNKNOWN)
    source: ServiceSource
    pid: int | None = Field(default=None, description="Process ID of a running launchd job")

    # Extra columns from the subsystem output, display only
    raw_status: str | None = Field(
        default=None, description="Homebrew's own status word, e.g. 'started' or 'error'"
    )
    last_exit: int | None = Field(default=None, description="launchd last exit status")
    user: str | None = Field(default=None, description="User a Homebrew service runs as")

    @model_validator(mode="after")
    def _check_pid(self) -> "ServiceRecord":
        if self.pid is not None and (
            self.status != ServiceStatus.RUNNING or self.source != ServiceSource.LAUNCHD
        ):
            raise ValueError("pid is only valid for running launchd services")
        return self

    @property
    def is_running(self) -> bool:
        """Whether the service is currently running."""
        return self.status == ServiceStatus.RUNNING

    @property
    def is_brew(self) -> bool:
        """Whether the service is managed by Homebrew."""
        return self.source == ServiceSource.BREW

    @property
    def display_status(self) -> str:
        """Status word as the owning subsystem reports it."""
        return self.raw_status or self.status.value

    def label(self) -> str:
        """Format the record as a picker entry, e.g. ``redis [BREW]``.

        Returns:
            Name, upper-cased source and PID when known.
        """
        text = f"{self.name} [{self.source.value.upper()}]"
        if self.pid is not None:
            text += f" (PID: {self.pid})"
        return text


class ServiceListing(BaseModel):
    """Merged result of listing one or both subsystems."""

    services: list[ServiceRecord] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def running(self) -> list[ServiceRecord]:
        """Records that can be stopped."""
        return [s for s in self.services if s.is_running]

    def stopped(self) -> list[ServiceRecord]:
        """Records that can be started.

        Homebrew services in an error or scheduled state count as not
        running, so they are offered for starting too.
        """
        return [s for s in self.services if not s.is_running]

    def find(self, name: str) -> ServiceRecord | None:
        """Find a record by exact name.

        Args:
            name: Service name to look for.

        Returns:
            The first matching record, or None.
        """
        for service in self.services:
            if service.name == name:
                return service
        return None

    def __len__(self) -> int:
        return len(self.services)
