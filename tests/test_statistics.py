"""
Tests for summary statistics.
"""

from sla_monitor.pipeline.metrics import enrich
from sla_monitor.pipeline.filters import apply_filters
from sla_monitor.pipeline.statistics import summarize
from sla_monitor.schemas.query import FilterSpec


def test_summarize_empty_sequence():
    """Averages fall back to zero without records."""
    summary = summarize([])
    assert summary.model_dump() == {
        "distinct_order_count": 0,
        "record_count": 0,
        "average_fulfillment_ratio": 0,
        "average_elapsed_days": 0,
    }


def test_summarize_counts_distinct_orders(enriched_records):
    """PO numbers are counted once; lines are counted individually."""
    summary = summarize(enriched_records)
    assert summary.distinct_order_count == 3
    assert summary.record_count == 4


def test_summarize_averages(enriched_records):
    """Averages are plain arithmetic means over the view."""
    summary = summarize(enriched_records)
    assert summary.average_fulfillment_ratio == (80.0 + 100.0 + 30.0 + 0.0) / 4
    assert summary.average_elapsed_days == (4 + 10 + 0 + 0) / 4


def test_end_to_end_single_record():
    """Enrich, filter and summarize the reference record."""
    records = [enrich({
        "nomorPO": "PO1", "poValue": "100", "receivedValue": "80",
        "poDate": "01/01/2024", "receivedDate": "05/01/2024",
        "supplierName": "Acme", "contract": "C1", "itemCode": "X1",
    })]

    assert apply_filters(records, FilterSpec(supplier="zzz")) == []

    view = apply_filters(records, FilterSpec(supplier="ACM"))
    assert view == records

    summary = summarize(view)
    assert summary.distinct_order_count == 1
    assert summary.record_count == 1
    assert summary.average_fulfillment_ratio == 80
    assert summary.average_elapsed_days == 4


def test_missing_order_numbers_count_as_one_group():
    """Records without a PO number share a single distinct value."""
    summary = summarize([enrich({}), enrich({}), enrich({"nomorPO": "PO1"})])
    assert summary.distinct_order_count == 2
