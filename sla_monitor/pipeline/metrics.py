"""
Metric Calculator
Derives the fulfillment ratio and elapsed days for each purchase order line.
"""

import math
from typing import Any, Iterable, List, Mapping, Optional, Union
from datetime import datetime

from sla_monitor.schemas.record import PurchaseOrderRecord, EnrichedRecord
from sla_monitor.pipeline.dates import parse_date
from sla_monitor.utils import safe_divide


SECONDS_PER_DAY = 24 * 60 * 60

RecordInput = Union[PurchaseOrderRecord, Mapping[str, Any]]


def calculate_fulfillment_ratio(order_value: float, received_value: float) -> float:
    """Received value as a percentage of order value, rounded to 2 decimals."""
    if order_value <= 0:
        return 0.0
    return round(safe_divide(received_value, order_value) * 100, 2)


def calculate_elapsed_days(ordered_on: Optional[datetime], received_on: Optional[datetime]) -> int:
    """
    Whole days from order to receipt, rounded up.

    Returns 0 unless both dates are known. Receipts dated before the order
    give a negative count.
    """
    if ordered_on is None or received_on is None:
        return 0
    return math.ceil((received_on - ordered_on).total_seconds() / SECONDS_PER_DAY)


def enrich(record: RecordInput) -> EnrichedRecord:
    """
    Build an EnrichedRecord from a raw record.

    Never fails: missing or malformed fields fall back to zero metrics and
    unset date values.
    """
    if not isinstance(record, PurchaseOrderRecord):
        record = PurchaseOrderRecord.model_validate(dict(record))

    ordered_on = parse_date(record.purchase_order_date)
    received_on = parse_date(record.received_date)

    return EnrichedRecord.model_validate({
        **record.field_values(),
        "fulfillment_ratio": calculate_fulfillment_ratio(record.order_value, record.received_value),
        "elapsed_days": calculate_elapsed_days(ordered_on, received_on),
        "purchase_order_date_value": ordered_on,
        "received_date_value": received_on,
    })


def enrich_all(records: Iterable[RecordInput]) -> List[EnrichedRecord]:
    """Enrich every record, preserving order."""
    return [enrich(record) for record in records]
