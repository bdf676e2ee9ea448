"""Pydantic data models."""

from svcmgr.models.config import ManagerConfig
from svcmgr.models.service import (
    ServiceListing,
    ServiceRecord,
    ServiceSource,
    ServiceStatus,
)

__all__ = ["ManagerConfig", "ServiceListing", "ServiceRecord", "ServiceSource", "ServiceStatus"]
