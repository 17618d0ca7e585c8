"""
Record store for the dashboard.
Owns the enriched record set, the current filter and sort, and the active view
derived from them.
"""

from typing import Optional, List, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone

from sla_monitor.schemas.record import EnrichedRecord
from sla_monitor.schemas.query import FilterSpec, SortColumn, SortSpec
from sla_monitor.schemas.output import SummaryStatistics
from sla_monitor.pipeline.ingestion import ingest
from sla_monitor.pipeline.filters import apply_filters
from sla_monitor.pipeline.sorting import sort_records
from sla_monitor.pipeline.statistics import summarize
from sla_monitor.pipeline.exporter import to_delimited_text


MAX_EVENTS = 200


class StoreEvent(BaseModel):
    """A single entry in the store activity log."""
    timestamp: datetime
    action: str
    message: str


class RecordStore(BaseModel):
    """
    Mutable holder of dashboard data.

    The raw set is only replaced through ``load``/``load_payload``. The
    active view is rebuilt in full (filter, then sort) whenever the data,
    the filter or the sort changes; callers get a fresh list each time and
    should treat it as read-only.
    """

    raw: List[EnrichedRecord] = Field(default_factory=list)
    filter_spec: FilterSpec = Field(default_factory=FilterSpec)
    sort_spec: Optional[SortSpec] = None
    active_view: List[EnrichedRecord] = Field(default_factory=list)

    loaded_at: Optional[datetime] = None
    source: Optional[str] = None
    last_error: Optional[str] = None
    events: List[StoreEvent] = Field(default_factory=list)

    def add_event(self, action: str, message: str) -> None:
        """Add an entry to the activity log."""
        self.events.append(
            StoreEvent(
                timestamp=datetime.now(timezone.utc),
                action=action,
                message=message,
            )
        )
        del self.events[:-MAX_EVENTS]

    def _recompute(self) -> List[EnrichedRecord]:
        self.active_view = sort_records(apply_filters(self.raw, self.filter_spec), self.sort_spec)
        return self.active_view

    def load(self, records: List[EnrichedRecord], source: Optional[str] = None) -> List[EnrichedRecord]:
        """Replace the raw record set and rebuild the view."""
        self.raw = list(records)
        self.source = source
        self.loaded_at = datetime.now(timezone.utc)
        self.last_error = None
        self.add_event("load", f"Loaded {len(self.raw)} records")
        return self._recompute()

    def load_payload(self, payload: Any, source: Optional[str] = None) -> List[EnrichedRecord]:
        """Ingest a decoded endpoint payload and load it."""
        return self.load(ingest(payload), source=source)

    def record_error(self, message: str) -> None:
        """Remember a failed refresh; data and view stay as they were."""
        self.last_error = message
        self.add_event("error", message)

    def apply_filters(self, spec: FilterSpec) -> List[EnrichedRecord]:
        """Set the filter and rebuild the view."""
        self.filter_spec = spec
        self.add_event("filter", "Filters applied" if not spec.is_empty() else "Filters cleared")
        return self._recompute()

    def clear_filters(self) -> List[EnrichedRecord]:
        """Remove every filter constraint."""
        return self.apply_filters(FilterSpec())

    def sort_by(self, column: SortColumn) -> List[EnrichedRecord]:
        """
        Sort by ``column``.

        Choosing the current column again flips the direction; a new
        column starts ascending.
        """
        column = SortColumn(column)
        if self.sort_spec is None:
            self.sort_spec = SortSpec(column=column)
        else:
            self.sort_spec = self.sort_spec.toggled(column)

        self.add_event("sort", f"Sorted by {self.sort_spec.column.value} {self.sort_spec.direction.value}")
        return self._recompute()

    def summary(self) -> SummaryStatistics:
        """Summary statistics of the active view."""
        return summarize(self.active_view)

    def export_text(self, escape_quotes: bool = False) -> str:
        """CSV text of the active view."""
        return to_delimited_text(self.active_view, escape_quotes=escape_quotes)
