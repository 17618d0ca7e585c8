"""
Persisted endpoint settings.
Stores the records API URL the user configured in the dashboard.
"""

import json
from pathlib import Path
from typing import Optional, Union

from sla_monitor.config import get_config
from sla_monitor.utils.logging import setup_logging


logger = setup_logging(__name__)
config = get_config()

CONFIG_KEY = "sla_monitoring_api_url"


class ConfigManager:
    """Reads and writes the API URL in a small JSON settings file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or config.SETTINGS_FILE)
        self.api_url = self.get_api_url()

    def _read_settings(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write_settings(self, settings: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings, indent=2) + "\n", encoding="utf-8")

    def get_api_url(self) -> str:
        url = self._read_settings().get(CONFIG_KEY)
        return url if isinstance(url, str) else ""

    def set_api_url(self, url: str) -> None:
        url = (url or "").strip()
        if not url:
            raise ValueError("Please enter a valid API URL")

        settings = self._read_settings()
        settings[CONFIG_KEY] = url
        self._write_settings(settings)
        self.api_url = url
        logger.info(f"Saved API URL to {self.path}")

    def has_api_url(self) -> bool:
        return bool(self.api_url and self.api_url.strip())

    def clear_api_url(self) -> None:
        settings = self._read_settings()
        if settings.pop(CONFIG_KEY, None) is not None:
            self._write_settings(settings)
        self.api_url = ""
