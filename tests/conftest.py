"""
Pytest configuration: run against the test configuration.
"""

import os
import tempfile
from pathlib import Path

# Must be set before sla_monitor.config is imported
os.environ["ENV"] = "test"
os.environ["SLA_API_URL"] = ""
os.environ["SLA_SETTINGS_FILE"] = str(Path(tempfile.mkdtemp()) / "settings.json")

import pytest

from sla_monitor.pipeline.metrics import enrich


@pytest.fixture
def raw_records():
    """Raw endpoint rows using the dashboard wire keys."""
    return [
        {
            "nomorPO": "PO1", "itemCode": "X1", "itemName": "Widget", "supplierName": "Acme",
            "contract": "C1", "poDate": "01/01/2024", "receivedDate": "05/01/2024",
            "qtyPO": "10", "qtyReceived": "8", "poValue": "100", "receivedValue": "80",
        },
        {
            "nomorPO": "PO1", "itemCode": "X2", "itemName": "Gadget", "supplierName": "Acme",
            "contract": "C2", "poDate": "01/01/2024", "receivedDate": "11/01/2024",
            "qtyPO": 5, "qtyReceived": 5, "poValue": 200, "receivedValue": 200,
        },
        {
            "nomorPO": "PO2", "itemCode": "Y1", "itemName": "Bolt", "supplierName": "Bolt Bros",
            "contract": "C1", "poDate": "15/02/2024", "receivedDate": "",
            "qtyPO": "100", "qtyReceived": "30", "poValue": "1000", "receivedValue": "300",
        },
        {
            "nomorPO": "PO3", "itemCode": "Z9", "itemName": "Nut", "supplierName": "Zeta Supply",
            "contract": "K7", "poDate": None, "receivedDate": "2024-03-10",
            "qtyPO": "abc", "qtyReceived": None, "poValue": "0", "receivedValue": "50",
        },
    ]


@pytest.fixture
def enriched_records(raw_records):
    """The raw rows after enrichment."""
    return [enrich(record) for record in raw_records]
