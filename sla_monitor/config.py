"""
Configuration for the SLA monitoring dashboard.
"""

# Load environment variables FIRST
from dotenv import load_dotenv
load_dotenv()

import os
from pathlib import Path
from typing import Optional


_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Base configuration."""

    # Data source
    API_URL: str = os.getenv("SLA_API_URL", "")  # Fallback when no URL is persisted
    REQUEST_TIMEOUT: float = float(os.getenv("SLA_REQUEST_TIMEOUT", "30"))
    SETTINGS_FILE: str = os.getenv(
        "SLA_SETTINGS_FILE",
        str(Path.home() / ".sla_monitor" / "settings.json"),
    )

    # Export
    EXPORT_PREFIX: str = "SLA_Report"

    # SLA badge thresholds (percent)
    SLA_EXCELLENT: float = 80.0
    SLA_GOOD: float = 60.0
    SLA_AVERAGE: float = 40.0

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE", "sla_monitor.log")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration."""
        if cls.REQUEST_TIMEOUT <= 0:
            raise ValueError(f"SLA_REQUEST_TIMEOUT must be positive, got {cls.REQUEST_TIMEOUT}")

        if cls.LOG_LEVEL.upper() not in _VALID_LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL: {cls.LOG_LEVEL}")

        if not (cls.SLA_EXCELLENT >= cls.SLA_GOOD >= cls.SLA_AVERAGE >= 0):
            raise ValueError("SLA thresholds must be ordered excellent >= good >= average >= 0")


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration."""
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    REQUEST_TIMEOUT = float(os.getenv("SLA_REQUEST_TIMEOUT", "15"))


class TestConfig(Config):
    """Test configuration."""
    LOG_LEVEL = "DEBUG"
    LOG_FILE = ""
    REQUEST_TIMEOUT = 5.0


def get_config(env: str = None) -> Config:
    """Get configuration based on environment."""
    if env is None:
        env = os.getenv("ENV", "development").lower()

    if env == "production":
        config = ProductionConfig()
    elif env == "test":
        config = TestConfig()
    else:
        config = DevelopmentConfig()

    # Validate configuration on creation
    config.validate()
    return config
