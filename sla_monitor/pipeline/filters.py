"""
Filter Engine
Evaluates a FilterSpec against enriched records.
"""

from typing import Iterable, List, Optional
from datetime import datetime

from sla_monitor.schemas.record import EnrichedRecord
from sla_monitor.schemas.query import FilterSpec


def within_bounds(
    value: Optional[datetime],
    lower: Optional[datetime],
    upper: Optional[datetime],
) -> bool:
    """
    Check a parsed date against optional inclusive bounds.

    A record without a parsed date has nothing to compare and always passes.
    """
    if value is None:
        return True
    if lower is not None and value < lower:
        return False
    if upper is not None and value > upper:
        return False
    return True


def contains_needle(haystack: Optional[str], needle: Optional[str]) -> bool:
    """Case-insensitive substring test; an empty needle always matches."""
    if not needle:
        return True
    return needle.lower() in (haystack or "").lower()


def matches(record: EnrichedRecord, spec: FilterSpec) -> bool:
    """Return whether a record satisfies every active constraint."""
    return (
        within_bounds(record.purchase_order_date_value, spec.po_date_from, spec.po_date_to)
        and within_bounds(record.received_date_value, spec.received_date_from, spec.received_date_to)
        and contains_needle(record.supplier_name, spec.supplier)
        and contains_needle(record.contract, spec.contract)
        and contains_needle(record.item_code, spec.item_code)
    )


def apply_filters(records: Iterable[EnrichedRecord], spec: Optional[FilterSpec] = None) -> List[EnrichedRecord]:
    """Return the records passing ``spec``, in their original order."""
    if spec is None:
        return list(records)
    return [record for record in records if matches(record, spec)]
