"""Custom exceptions for service-manager."""


class ServiceManagerError(Exception):
    """Base exception for service-manager errors."""

    pass


class CommandNotFoundError(ServiceManagerError):
    """Raised when an external program cannot be located."""

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f"Command not found: {program}")


class CommandFailedError(ServiceManagerError):
    """Raised when an external program exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr.strip()
        msg = f"'{' '.join(command)}' exited with status {returncode}"
        if self.stderr:
            msg += f": {self.stderr}"
        super().__init__(msg)


class BrewUnavailableError(ServiceManagerError):
    """Raised when a Homebrew operation is requested but brew is not installed."""

    def __init__(self) -> None:
        super().__init__("Brew is not available")


class ServiceNotFoundError(ServiceManagerError):
    """Raised when a service cannot be found by name."""

    def __init__(self, name: str, source: str) -> None:
        self.name = name
        self.source = source
        super().__init__(f"{source.capitalize()} service '{name}' not found")


class NoServicesFoundError(ServiceManagerError):
    """Raised when there is nothing to choose from."""

    pass


class SelectionCancelledError(ServiceManagerError):
    """Raised when the user backs out of an interactive selection."""

    def __init__(self) -> None:
        super().__init__("Selection cancelled")


class ConfigError(ServiceManagerError):
    """Raised when the configuration file is unreadable or invalid."""

    pass
