"""
Ingestion
Normalizes the decoded endpoint payload into a list of enriched records.
"""

from typing import Any, Dict, List, Mapping

from sla_monitor.schemas.record import EnrichedRecord
from sla_monitor.pipeline.metrics import enrich_all
from sla_monitor.utils.logging import setup_logging, log_pipeline_event


logger = setup_logging(__name__)


def extract_records(payload: Any) -> List[Dict[str, Any]]:
    """
    Pull the record list out of a decoded JSON payload.

    Accepts a bare list of objects or an object with a ``data`` list.
    Any other shape yields an empty list. List entries that are not
    objects are skipped.
    """
    if isinstance(payload, Mapping):
        items = payload.get("data")
    else:
        items = payload

    if not isinstance(items, list):
        logger.warning(f"Unexpected payload shape ({type(payload).__name__}); treating as no records")
        return []

    records = [dict(item) for item in items if isinstance(item, Mapping)]

    skipped = len(items) - len(records)
    if skipped:
        logger.warning(f"Skipped {skipped} payload entries that are not objects")

    return records


def ingest(payload: Any) -> List[EnrichedRecord]:
    """Extract and enrich every record in a decoded payload."""
    records = enrich_all(extract_records(payload))
    log_pipeline_event(logger, "ingestion", "enriched records", {"record_count": len(records)})
    return records
