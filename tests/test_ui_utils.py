"""
Tests for dashboard presentation helpers.
"""

import pytest

from sla_monitor.pipeline.metrics import enrich
from sla_monitor.schemas.output import SummaryStatistics
from sla_monitor.ui.ui_utils import (
    SLALevel,
    format_currency,
    format_number,
    format_record_count,
    format_sla_display,
    format_summary_display,
    get_sla_level,
    record_to_display_row,
)


@pytest.mark.parametrize(
    "ratio, level",
    [
        (100.0, SLALevel.EXCELLENT),
        (80.0, SLALevel.EXCELLENT),
        (79.99, SLALevel.GOOD),
        (60.0, SLALevel.GOOD),
        (40.0, SLALevel.AVERAGE),
        (39.99, SLALevel.POOR),
        (0.0, SLALevel.POOR),
    ],
)
def test_sla_levels(ratio, level):
    """Badge thresholds are 80/60/40."""
    assert get_sla_level(ratio) is level


def test_sla_level_css_classes():
    assert SLALevel.EXCELLENT.css_class == "sla-excellent"
    assert SLALevel.POOR.css_class == "sla-poor"
    assert format_sla_display(80) == "🟢 80.00%"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1234567.5, "1.234.567,5"),
        ("1500", "1.500"),
        (999, "999"),
        (0.1234, "0,123"),
        (-1500, "-1.500"),
        ("abc", "0"),
        (None, "0"),
    ],
)
def test_format_number(value, expected):
    """Indonesian digit grouping."""
    assert format_number(value) == expected


def test_format_currency():
    """Whole Rupiah with grouped thousands."""
    assert format_currency(1500000) == "Rp 1.500.000"
    assert format_currency("250") == "Rp 250"
    assert format_currency(None) == "Rp 0"


def test_format_record_count():
    assert format_record_count(1) == "1 record"
    assert format_record_count(0) == "0 records"
    assert format_record_count(12) == "12 records"


def test_format_summary_display():
    """Average SLA keeps 2 decimals; average days is rounded half up."""
    display = format_summary_display(SummaryStatistics(
        distinct_order_count=3,
        record_count=4,
        average_fulfillment_ratio=52.5,
        average_elapsed_days=3.5,
    ))
    assert display == {
        "total_po": "3",
        "total_items": "4",
        "avg_sla": "52.50%",
        "avg_days": "4 days",
    }


def test_record_to_display_row():
    """Rows are formatted for the table."""
    row = record_to_display_row(enrich({
        "nomorPO": "PO1", "poValue": "1500000", "receivedValue": "1200000",
        "qtyPO": "1000", "poDate": "01/01/2024", "receivedDate": "05/01/2024",
    }))
    assert row["Nomor PO"] == "PO1"
    assert row["PO Value"] == "Rp 1.500.000"
    assert row["Qty PO"] == "1.000"
    assert row["SLA (%)"] == "🟢 80.00%"
    assert row["Avg Days"] == "4 days"
    assert row["Supplier Name"] == ""
