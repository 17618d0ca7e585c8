"""
SLA Monitoring Dashboard
"""

__version__ = "1.0.0"
__description__ = "Purchase order fulfillment SLA dashboard"

from sla_monitor.main import load_records, refresh_store, export_report
from sla_monitor.state import RecordStore
from sla_monitor.schemas.output import LoadResult, SummaryStatistics

__all__ = [
    "load_records",
    "refresh_store",
    "export_report",
    "RecordStore",
    "LoadResult",
    "SummaryStatistics",
]
