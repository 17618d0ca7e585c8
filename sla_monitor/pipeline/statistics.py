"""
Statistics Aggregator
Summary figures over the active view.
"""

from typing import Sequence

from sla_monitor.schemas.record import EnrichedRecord
from sla_monitor.schemas.output import SummaryStatistics
from sla_monitor.utils import safe_divide


def summarize(records: Sequence[EnrichedRecord]) -> SummaryStatistics:
    """
    Count distinct orders and lines, and average both SLA metrics.

    Averages are 0 for an empty sequence.
    """
    record_count = len(records)

    return SummaryStatistics(
        distinct_order_count=len({record.purchase_order_number for record in records}),
        record_count=record_count,
        average_fulfillment_ratio=safe_divide(sum(r.fulfillment_ratio for r in records), record_count),
        average_elapsed_days=safe_divide(sum(r.elapsed_days for r in records), record_count),
    )
