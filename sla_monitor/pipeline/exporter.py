"""
Exporter
Serializes the active view to comma-delimited text for the SLA report download.
"""

from datetime import date
from typing import Iterable, List, Optional

from sla_monitor.schemas.record import EnrichedRecord
from sla_monitor.config import get_config


config = get_config()

EXPORT_HEADERS = [
    "Nomor PO", "Item Code", "Item Name", "Supplier Name", "Contract/Principal",
    "PO Date", "Qty PO", "PO Value", "Received Date", "Qty Received",
    "Received Value", "SLA (%)", "Avg Days",
]


def _source_number(record: EnrichedRecord, field: str) -> str:
    # Quantities and values are exported as received, like the dates
    return record.source_numbers.get(field, "")


def record_to_cells(record: EnrichedRecord) -> List[str]:
    """Cells of one export row, in header order."""
    return [
        record.purchase_order_number or "",
        record.item_code or "",
        record.item_name or "",
        record.supplier_name or "",
        record.contract or "",
        record.purchase_order_date or "",
        _source_number(record, "quantity_ordered"),
        _source_number(record, "order_value"),
        record.received_date or "",
        _source_number(record, "quantity_received"),
        _source_number(record, "received_value"),
        f"{record.fulfillment_ratio:.2f}",
        str(record.elapsed_days),
    ]


def _quote(cell: str, escape_quotes: bool) -> str:
    if escape_quotes:
        cell = cell.replace('"', '""')
    return f'"{cell}"'


def to_delimited_text(records: Iterable[EnrichedRecord], *, escape_quotes: bool = False) -> str:
    """
    Build the CSV text for a sequence of records.

    Rows follow the input order, so the export mirrors the current filter
    and sort state. Every data cell is quoted. Embedded quote characters
    are left as-is unless ``escape_quotes`` is set, in which case they are
    doubled as in RFC 4180.
    """
    lines = [",".join(EXPORT_HEADERS)]
    for record in records:
        lines.append(",".join(_quote(cell, escape_quotes) for cell in record_to_cells(record)))
    return "\n".join(lines)


def export_filename(day: Optional[date] = None) -> str:
    """File name for a report generated on ``day`` (default today)."""
    day = day or date.today()
    return f"{config.EXPORT_PREFIX}_{day.isoformat()}.csv"
