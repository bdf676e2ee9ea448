"""Start, stop and status operations routed to the owning subsystem."""

import logging

from svcmgr.exceptions import BrewUnavailableError, ServiceNotFoundError
from svcmgr.models.service import ServiceListing, ServiceRecord, ServiceSource
from svcmgr.services.base import ServiceBackend
from svcmgr.services.brew import BrewBackend
from svcmgr.services.launchd import LaunchdBackend

logger = logging.getLogger(__name__)


class ServiceDispatcher:
    """Issues control commands for a chosen service."""

    def __init__(self, launchd: LaunchdBackend, brew: BrewBackend) -> None:
        self.launchd = launchd
        self.brew = brew

    def _backend(self, source: ServiceSource) -> ServiceBackend:
        if source == ServiceSource.BREW:
            if not self.brew.is_available():
                raise BrewUnavailableError()
            return self.brew
        return self.launchd

    def start(self, service: ServiceRecord) -> None:
        """Start a service through its subsystem.

        Args:
            service: Record to start.

        Raises:
            BrewUnavailableError: If the record is a brew service and brew is missing.
            CommandFailedError: If the control command fails.
        """
        logger.debug("Starting %s service %s", service.source.value, service.name)
        self._backend(service.source).start(service.name)

    def stop(self, service: ServiceRecord) -> None:
        """Stop a service through its subsystem.

        Args:
            service: Record to stop.

        Raises:
            BrewUnavailableError: If the record is a brew service and brew is missing.
            CommandFailedError: If the control command fails.
        """
        logger.debug("Stopping %s service %s", service.source.value, service.name)
        self._backend(service.source).stop(service.name)

    def status(self, name: str, brew: bool = False) -> ServiceRecord:
        """Look up one service in a single subsystem.

        Only the subsystem selected by ``brew`` is queried; there is no
        fallback to the other one.

        Args:
            name: Exact service name.
            brew: Query Homebrew instead of launchd.

        Returns:
            The matching record.

        Raises:
            BrewUnavailableError: If brew is requested but not installed.
            ServiceNotFoundError: If no service has that name.
        """
        source = ServiceSource.BREW if brew else ServiceSource.LAUNCHD
        backend = self._backend(source)
        service = ServiceListing(services=backend.list_services()).find(name)
        if service is not None:
            return service
        raise ServiceNotFoundError(name, source.value)
