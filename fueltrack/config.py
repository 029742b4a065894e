"""
Runtime configuration for the tracker.
Values come from the environment, optionally seeded from a .env file.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_COMPANY_NAME = "Codac Logistics"
DEFAULT_LOG_LEVEL = "WARNING"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TrackerConfig:
    """Settings that shape a session but not its arithmetic."""

    company_name: str = DEFAULT_COMPANY_NAME
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}. "
                f"Expected one of: {', '.join(VALID_LOG_LEVELS)}"
            )


def load_config(
    company_name: Optional[str] = None,
    log_level: Optional[str] = None,
    dotenv_path: Optional[str] = None,
) -> TrackerConfig:
    """
    Build configuration from arguments and environment.

    Explicit arguments win over FUELTRACK_COMPANY_NAME and
    FUELTRACK_LOG_LEVEL, which win over the defaults.

    Args:
        company_name: Company shown on the report
        log_level: Logging level name
        dotenv_path: Optional .env file to load (defaults to searching cwd)

    Returns:
        TrackerConfig
    """
    load_dotenv(dotenv_path)

    config = TrackerConfig(
        company_name=company_name or os.getenv("FUELTRACK_COMPANY_NAME") or DEFAULT_COMPANY_NAME,
        log_level=log_level or os.getenv("FUELTRACK_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
    )
    logger.debug(f"Loaded config: {config}")
    return config
