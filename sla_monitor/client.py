"""
HTTP client for the fulfillment records endpoint.
"""

from typing import Any, Optional

import requests

from sla_monitor.config import get_config
from sla_monitor.utils.logging import setup_logging


logger = setup_logging(__name__)
config = get_config()


class DataSourceError(Exception):
    """Raised when records cannot be fetched from the endpoint."""


def fetch_payload(url: str, timeout: Optional[float] = None) -> Any:
    """
    GET the endpoint and return its decoded JSON body.

    Raises:
        DataSourceError: on a missing URL, network failure, non-success
            status or a body that is not JSON.
    """
    if not url or not url.strip():
        raise DataSourceError("API URL is not configured")

    timeout = timeout or config.REQUEST_TIMEOUT
    logger.info(f"Fetching records from {url}")

    try:
        response = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
    except requests.RequestException as e:
        raise DataSourceError(str(e)) from e

    if not response.ok:
        raise DataSourceError(f"HTTP error! status: {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise DataSourceError(f"Response is not valid JSON: {e}") from e
