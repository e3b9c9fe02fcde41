import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from crp.models.errors import InvalidConfig

# Load environment variables
load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError as err:
        raise InvalidConfig(f"{name} must be an integer, got {raw!r}") from err
    if value < minimum:
        raise InvalidConfig(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    workers: int = 1             # threads used by the substitution pass
    rows_per_band: int = 256     # rows handed to one worker at a time
    log_level: str = "INFO"
    imread_timeout: int = 5      # seconds, 0 disables the alarm


def get_settings() -> Settings:
    """
    Read and validate the CRP_* environment variables.

    Raises InvalidConfig on the first bad value. Read on every call so
    nothing is evaluated at import time.
    """
    log_level = os.getenv("CRP_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise InvalidConfig(f"CRP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                            f"got {log_level!r}")
    return Settings(
        workers=_int_env("CRP_WORKERS", 1, minimum=1),
        rows_per_band=_int_env("CRP_ROWS_PER_BAND", 256, minimum=1),
        log_level=log_level,
        imread_timeout=_int_env("CRP_IMREAD_TIMEOUT", 5, minimum=0),
    )


def configure_logging(level=logging.INFO) -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
