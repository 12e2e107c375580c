"""Application services."""

from .farm_monitor_service import FarmMonitorService

__all__ = ["FarmMonitorService"]
