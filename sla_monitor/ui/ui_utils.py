"""
UI Utility Functions

Helper functions for Streamlit visualization.
These are purely for presentation - no business logic.
"""

import math
from typing import Any, Dict
from enum import Enum

from sla_monitor.config import get_config
from sla_monitor.schemas.record import EnrichedRecord
from sla_monitor.schemas.output import SummaryStatistics
from sla_monitor.utils import coerce_numeric


config = get_config()


class SLALevel(Enum):
    """SLA badge classification."""
    EXCELLENT = ("sla-excellent", "Excellent", "🟢")
    GOOD = ("sla-good", "Good", "🟡")
    AVERAGE = ("sla-average", "Average", "🟠")
    POOR = ("sla-poor", "Poor", "🔴")

    def __init__(self, css_class: str, label: str, emoji: str):
        self.css_class = css_class
        self.label = label
        self.emoji = emoji


def get_sla_level(ratio: float) -> SLALevel:
    """
    Classify a fulfillment ratio into a badge level.

    Args:
        ratio: Fulfillment ratio in percent

    Returns:
        SLALevel enum
    """
    if ratio >= config.SLA_EXCELLENT:
        return SLALevel.EXCELLENT
    elif ratio >= config.SLA_GOOD:
        return SLALevel.GOOD
    elif ratio >= config.SLA_AVERAGE:
        return SLALevel.AVERAGE
    else:
        return SLALevel.POOR


def format_sla_display(ratio: float) -> str:
    """Format a fulfillment ratio with its badge emoji."""
    return f"{get_sla_level(ratio).emoji} {ratio:.2f}%"


def _group_thousands(integer_part: str) -> str:
    """Insert '.' every three digits from the right."""
    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)
    return ".".join(groups)


def format_number(value: Any, max_fraction_digits: int = 3) -> str:
    """
    Format a number the Indonesian way: '.' groups thousands, ',' marks decimals.

    >>> format_number(1234567.5)
    '1.234.567,5'
    """
    number = coerce_numeric(value)
    text = f"{abs(number):.{max_fraction_digits}f}"
    integer_part, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")

    formatted = _group_thousands(integer_part)
    if fraction:
        formatted = f"{formatted},{fraction}"
    if number < 0 and formatted.strip("0.,"):
        formatted = f"-{formatted}"
    return formatted


def format_currency(value: Any) -> str:
    """Format a value as whole Rupiah, e.g. 'Rp 1.500.000'."""
    return "Rp " + format_number(coerce_numeric(value), max_fraction_digits=0)


def format_record_count(count: int) -> str:
    """'1 record' / 'n records'."""
    return f"{count} record{'s' if count != 1 else ''}"


def format_summary_display(summary: SummaryStatistics) -> Dict[str, str]:
    """
    Format summary statistics for the metric tiles.

    Args:
        summary: Statistics of the active view

    Returns:
        Display strings keyed by tile
    """
    return {
        "total_po": str(summary.distinct_order_count),
        "total_items": str(summary.record_count),
        "avg_sla": f"{summary.average_fulfillment_ratio:.2f}%",
        "avg_days": f"{math.floor(summary.average_elapsed_days + 0.5)} days",
    }


def record_to_display_row(record: EnrichedRecord) -> Dict[str, str]:
    """One table row, formatted for display."""
    return {
        "Nomor PO": record.purchase_order_number or "",
        "Item Code": record.item_code or "",
        "Item Name": record.item_name or "",
        "Supplier Name": record.supplier_name or "",
        "Contract/Principal": record.contract or "",
        "PO Date": record.purchase_order_date or "",
        "Qty PO": format_number(record.quantity_ordered),
        "PO Value": format_currency(record.order_value),
        "Received Date": record.received_date or "",
        "Qty Received": format_number(record.quantity_received),
        "Received Value": format_currency(record.received_value),
        "SLA (%)": format_sla_display(record.fulfillment_ratio),
        "Avg Days": f"{record.elapsed_days} days",
    }
