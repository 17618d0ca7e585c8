"""
Data models for fulfillment records, queries and pipeline output.
"""

from sla_monitor.schemas.record import PurchaseOrderRecord, EnrichedRecord
from sla_monitor.schemas.query import ColumnKind, FilterSpec, SortColumn, SortDirection, SortSpec
from sla_monitor.schemas.output import LoadResult, SummaryStatistics

__all__ = [
    "ColumnKind",
    "EnrichedRecord",
    "FilterSpec",
    "LoadResult",
    "PurchaseOrderRecord",
    "SortColumn",
    "SortDirection",
    "SortSpec",
    "SummaryStatistics",
]
