"""
Filter and sort specifications for the active record view.
"""

from enum import Enum
from typing import Any, Optional
from datetime import date, datetime, time
from pydantic import BaseModel, field_validator

from sla_monitor.pipeline.dates import parse_date


class ColumnKind(str, Enum):
    """How values of a column are compared."""
    NUMERIC = "numeric"
    DATE = "date"
    TEXT = "text"


# Column names used by the dashboard table headers
_WIRE_COLUMN_NAMES = {
    "nomorPO": "purchase_order_number",
    "itemCode": "item_code",
    "itemName": "item_name",
    "supplierName": "supplier_name",
    "contract": "contract",
    "poDate": "purchase_order_date",
    "qtyPO": "quantity_ordered",
    "poValue": "order_value",
    "receivedDate": "received_date",
    "qtyReceived": "quantity_received",
    "receivedValue": "received_value",
    "sla": "fulfillment_ratio",
    "avgDays": "elapsed_days",
}


class SortColumn(str, Enum):
    """Sortable columns of an enriched record."""
    PURCHASE_ORDER_NUMBER = "purchase_order_number"
    ITEM_CODE = "item_code"
    ITEM_NAME = "item_name"
    SUPPLIER_NAME = "supplier_name"
    CONTRACT = "contract"
    PURCHASE_ORDER_DATE = "purchase_order_date"
    QUANTITY_ORDERED = "quantity_ordered"
    ORDER_VALUE = "order_value"
    RECEIVED_DATE = "received_date"
    QUANTITY_RECEIVED = "quantity_received"
    RECEIVED_VALUE = "received_value"
    FULFILLMENT_RATIO = "fulfillment_ratio"
    ELAPSED_DAYS = "elapsed_days"

    @classmethod
    def _missing_(cls, value: object) -> Optional["SortColumn"]:
        if isinstance(value, str) and value in _WIRE_COLUMN_NAMES:
            return cls(_WIRE_COLUMN_NAMES[value])
        return None

    @property
    def kind(self) -> ColumnKind:
        if self in _NUMERIC_COLUMNS:
            return ColumnKind.NUMERIC
        if self in _DATE_COLUMNS:
            return ColumnKind.DATE
        return ColumnKind.TEXT


_NUMERIC_COLUMNS = frozenset({
    SortColumn.QUANTITY_ORDERED,
    SortColumn.QUANTITY_RECEIVED,
    SortColumn.ORDER_VALUE,
    SortColumn.RECEIVED_VALUE,
    SortColumn.FULFILLMENT_RATIO,
    SortColumn.ELAPSED_DAYS,
})
_DATE_COLUMNS = frozenset({
    SortColumn.PURCHASE_ORDER_DATE,
    SortColumn.RECEIVED_DATE,
})


class SortDirection(str, Enum):
    """Sort order."""
    ASCENDING = "asc"
    DESCENDING = "desc"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


class SortSpec(BaseModel):
    """Column and direction the active view is ordered by."""
    column: SortColumn
    direction: SortDirection = SortDirection.ASCENDING

    @field_validator("column", mode="before")
    @classmethod
    def _resolve_column(cls, value: Any) -> Any:
        # Lets dashboard header names such as "sla" resolve through SortColumn._missing_
        if isinstance(value, str) and not isinstance(value, SortColumn):
            return SortColumn(value)
        return value

    def toggled(self, column: SortColumn) -> "SortSpec":
        """Flip direction for the same column, otherwise sort the new column ascending."""
        column = SortColumn(column)
        if column == self.column:
            return SortSpec(column=column, direction=self.direction.flipped())
        return SortSpec(column=column)


class FilterSpec(BaseModel):
    """
    Constraints applied to the raw record set.

    Every field is optional; an unset bound or empty needle always passes.
    Bounds accept datetimes, dates (read as midnight) or date text.
    """
    po_date_from: Optional[datetime] = None
    po_date_to: Optional[datetime] = None
    received_date_from: Optional[datetime] = None
    received_date_to: Optional[datetime] = None
    supplier: Optional[str] = None
    contract: Optional[str] = None
    item_code: Optional[str] = None

    @field_validator(
        "po_date_from",
        "po_date_to",
        "received_date_from",
        "received_date_to",
        mode="before",
    )
    @classmethod
    def _coerce_bound(cls, value: Any) -> Optional[datetime]:
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return parse_date(value)
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        return parse_date(value)

    def is_empty(self) -> bool:
        """Return whether no constraint is active."""
        bounds = (self.po_date_from, self.po_date_to, self.received_date_from, self.received_date_to)
        needles = (self.supplier, self.contract, self.item_code)
        return all(bound is None for bound in bounds) and not any(needles)
