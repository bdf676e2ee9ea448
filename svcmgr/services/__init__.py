"""Service discovery and control."""

from svcmgr.services.aggregator import ServiceAggregator
from svcmgr.services.brew import BrewBackend
from svcmgr.services.config import ConfigService
from svcmgr.services.dispatcher import ServiceDispatcher
from svcmgr.services.launchd import LaunchdBackend

__all__ = [
    "BrewBackend",
    "ConfigService",
    "LaunchdBackend",
    "ServiceAggregator",
    "ServiceDispatcher",
]
