"""
Sort Engine
Orders enriched records by a chosen column and direction.
"""

from datetime import datetime
from functools import cmp_to_key, partial
from typing import Any, Callable, Dict, Iterable, List, Optional

from sla_monitor.schemas.record import EnrichedRecord
from sla_monitor.schemas.query import ColumnKind, SortColumn, SortDirection, SortSpec
from sla_monitor.utils import coerce_numeric


# Field each column compares; date columns compare the parsed value
_ACCESSORS: Dict[SortColumn, Callable[[EnrichedRecord], Any]] = {
    SortColumn.PURCHASE_ORDER_NUMBER: lambda r: r.purchase_order_number,
    SortColumn.ITEM_CODE: lambda r: r.item_code,
    SortColumn.ITEM_NAME: lambda r: r.item_name,
    SortColumn.SUPPLIER_NAME: lambda r: r.supplier_name,
    SortColumn.CONTRACT: lambda r: r.contract,
    SortColumn.PURCHASE_ORDER_DATE: lambda r: r.purchase_order_date_value,
    SortColumn.RECEIVED_DATE: lambda r: r.received_date_value,
    SortColumn.QUANTITY_ORDERED: lambda r: r.quantity_ordered,
    SortColumn.QUANTITY_RECEIVED: lambda r: r.quantity_received,
    SortColumn.ORDER_VALUE: lambda r: r.order_value,
    SortColumn.RECEIVED_VALUE: lambda r: r.received_value,
    SortColumn.FULFILLMENT_RATIO: lambda r: r.fulfillment_ratio,
    SortColumn.ELAPSED_DAYS: lambda r: r.elapsed_days,
}


def _text(value: Optional[str]) -> str:
    return value or ""


def _date(value: Optional[datetime]) -> datetime:
    # Unparsed dates sort before every real date
    return value or datetime.min


_NORMALIZERS: Dict[ColumnKind, Callable[[Any], Any]] = {
    ColumnKind.TEXT: _text,
    ColumnKind.DATE: _date,
    ColumnKind.NUMERIC: coerce_numeric,
}


def _sort_key(column: SortColumn) -> Callable[[EnrichedRecord], Any]:
    accessor = _ACCESSORS[column]
    normalize = _NORMALIZERS[column.kind]
    return lambda record: normalize(accessor(record))


SORT_KEYS: Dict[SortColumn, Callable[[EnrichedRecord], Any]] = {
    column: _sort_key(column) for column in SortColumn
}


def compare_records(a: EnrichedRecord, b: EnrichedRecord, spec: SortSpec) -> int:
    """Three-way comparison of two records under ``spec``."""
    key = SORT_KEYS[spec.column]
    a_val, b_val = key(a), key(b)
    ascending = spec.direction is SortDirection.ASCENDING

    if a_val < b_val:
        return -1 if ascending else 1
    if a_val > b_val:
        return 1 if ascending else -1
    return 0


def sort_records(records: Iterable[EnrichedRecord], spec: Optional[SortSpec] = None) -> List[EnrichedRecord]:
    """Return a new list ordered by ``spec``; tie order is not guaranteed."""
    if spec is None:
        return list(records)
    return sorted(records, key=cmp_to_key(partial(compare_records, spec=spec)))
