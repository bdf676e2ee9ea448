"""Merging of launchd and Homebrew service listings."""

import logging

from svcmgr.models.service import ServiceListing, ServiceRecord, ServiceSource
from svcmgr.services.brew import BrewBackend
from svcmgr.services.launchd import LaunchdBackend

logger = logging.getLogger(__name__)

BREW_MISSING_WARNING = "Brew not found. Only launchd services can be managed."

SOURCE_ORDER = {ServiceSource.LAUNCHD: 0, ServiceSource.BREW: 1}


def _sort_key(service: ServiceRecord) -> tuple[int, str]:
    return (SOURCE_ORDER[service.source], service.name.lower())


class ServiceAggregator:
    """Collects services from both subsystems into one listing."""

    def __init__(self, launchd: LaunchdBackend, brew: BrewBackend) -> None:
        """Initialize the aggregator.

        Args:
            launchd: Backend for native launchd jobs.
            brew: Backend for Homebrew services.
        """
        self.launchd = launchd
        self.brew = brew

    def collect(
        self,
        running_only: bool = False,
        include_brew: bool = False,
        sort: bool = False,
    ) -> ServiceListing:
        """Build a merged service listing.

        launchd services are always listed. Homebrew services are added
        only when requested and brew is installed; a missing brew adds a
        warning to the listing instead of failing.

        Args:
            running_only: Drop every service that is not running.
            include_brew: Add Homebrew services.
            sort: Order by source, then name.

        Returns:
            ServiceListing with the merged records and any warnings.
        """
        listing = ServiceListing()
        listing.services.extend(self.launchd.list_services())

        if include_brew:
            if self.brew.is_available():
                listing.services.extend(self.brew.list_services())
            else:
                logger.info("brew requested but not found on PATH")
                listing.warnings.append(BREW_MISSING_WARNING)

        if running_only:
            listing.services = [s for s in listing.services if s.is_running]

        if sort:
            listing.services.sort(key=_sort_key)

        logger.debug("Collected %d services", len(listing.services))
        return listing
