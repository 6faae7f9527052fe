"""
Course advisor configuration: environment settings with defaults.

Environment Variables:
    COURSE_ADVISOR_DATA_FILE: Default course file used when the load prompt is left blank
    COURSE_ADVISOR_LOG_LEVEL: Logging level name (default: WARNING)
    VERBOSE: "true", "1" or "yes" forces DEBUG logging
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load .env file early
load_dotenv(override=True)

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class AdvisorSettings:
    data_file: Optional[str]
    log_level: int
    verbose: bool


def parse_log_level(name: str) -> int:
    """
    Convert a level name such as "info" or "DEBUG" to a logging level.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def load_settings() -> AdvisorSettings:
    """
    Read settings from the current environment.

    Raises:
        ValueError: If COURSE_ADVISOR_LOG_LEVEL is not a valid level name
    """
    data_file = os.getenv("COURSE_ADVISOR_DATA_FILE") or None
    verbose = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")

    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = parse_log_level(os.getenv("COURSE_ADVISOR_LOG_LEVEL", DEFAULT_LOG_LEVEL))

    return AdvisorSettings(data_file=data_file, log_level=log_level, verbose=verbose)


if __name__ == "__main__":
    settings = load_settings()
    print(f"COURSE_ADVISOR_DATA_FILE: {settings.data_file}")
    print(f"LOG_LEVEL: {logging.getLevelName(settings.log_level)}")
    print(f"VERBOSE: {settings.verbose}")
