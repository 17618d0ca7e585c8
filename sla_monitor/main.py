"""
Main entry point for the SLA monitoring dashboard pipeline.
"""

import json
import sys
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional, Union

from sla_monitor.state import RecordStore
from sla_monitor.client import DataSourceError, fetch_payload
from sla_monitor.config_store import ConfigManager
from sla_monitor.pipeline.ingestion import ingest
from sla_monitor.pipeline.exporter import export_filename
from sla_monitor.schemas.output import LoadResult, SummaryStatistics
from sla_monitor.utils.logging import setup_logging
from sla_monitor.utils import dict_to_json_string
from sla_monitor.config import get_config


logger = setup_logging(__name__)
config = get_config()


def _failure_message(reason: str) -> str:
    return f"Failed to load data: {reason}. Please check your API URL configuration."


def resolve_api_url(api_url: Optional[str] = None, config_manager: Optional[ConfigManager] = None) -> str:
    """Pick the explicit URL, else the persisted one, else the environment default."""
    if api_url and api_url.strip():
        return api_url.strip()

    manager = config_manager or ConfigManager()
    if manager.has_api_url():
        return manager.api_url

    return config.API_URL


def load_records(
    api_url: Optional[str] = None,
    config_manager: Optional[ConfigManager] = None,
) -> LoadResult:
    """
    Fetch and enrich records from the configured endpoint.

    Transport failures are reported through ``LoadResult.error`` instead of
    being raised.
    """
    url = resolve_api_url(api_url, config_manager)

    try:
        payload = fetch_payload(url)
    except DataSourceError as e:
        logger.error(f"Error loading data from {url or '<unset>'}: {e}")
        return LoadResult(
            source=url,
            loaded_at=datetime.now(timezone.utc),
            error=_failure_message(str(e)),
        )

    records = ingest(payload)
    logger.info(f"Loaded {len(records)} records from {url}")

    return LoadResult(source=url, loaded_at=datetime.now(timezone.utc), records=records)


def load_records_from_file(payload_file: Union[str, Path]) -> LoadResult:
    """Load records from a local JSON payload file."""
    path = Path(payload_file)

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Payload file not found: {path}")
        return LoadResult(
            source=str(path),
            loaded_at=datetime.now(timezone.utc),
            error=_failure_message(f"file not found: {path}"),
        )
    except (OSError, ValueError) as e:
        logger.error(f"Error reading payload file: {e}")
        return LoadResult(
            source=str(path),
            loaded_at=datetime.now(timezone.utc),
            error=_failure_message(str(e)),
        )

    records = ingest(payload)
    logger.info(f"Loaded {len(records)} records from {path}")
    return LoadResult(source=str(path), loaded_at=datetime.now(timezone.utc), records=records)


def apply_load_result(store: RecordStore, result: LoadResult) -> LoadResult:
    """Load a successful result into the store, or record its error."""
    if result.ok:
        store.load(result.records, source=result.source)
    else:
        store.record_error(result.error)
    return result


def refresh_store(
    store: RecordStore,
    api_url: Optional[str] = None,
    config_manager: Optional[ConfigManager] = None,
) -> LoadResult:
    """
    Reload the store from the endpoint.

    On failure the store keeps its previous data and view.
    """
    return apply_load_result(store, load_records(api_url, config_manager))


def export_report(store: RecordStore, directory: Union[str, Path] = ".", escape_quotes: bool = False) -> Path:
    """
    Write the active view as ``SLA_Report_<date>.csv`` into ``directory``.

    Raises:
        ValueError: if the active view is empty.
    """
    if not store.active_view:
        raise ValueError("No data to export")

    output_dir = Path(directory)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / export_filename()
    output_path.write_text(store.export_text(escape_quotes=escape_quotes), encoding="utf-8")

    logger.info(f"Exported {len(store.active_view)} records to {output_path}")
    return output_path


def format_summary_json(summary: SummaryStatistics) -> str:
    """Format summary statistics as a JSON string."""
    return dict_to_json_string(summary.model_dump())


def main(argv: Optional[list] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        print("Usage: python -m sla_monitor.main <api_url | payload.json> [export_dir]")
        return 1

    source = argv[0]
    if Path(source).is_file():
        result = load_records_from_file(source)
    else:
        result = load_records(source)

    store = RecordStore()
    apply_load_result(store, result)

    if not result.ok:
        print(result.error, file=sys.stderr)
        return 1

    print(format_summary_json(store.summary()))

    if len(argv) > 1 and store.active_view:
        print(f"Wrote report: {export_report(store, argv[1])}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
