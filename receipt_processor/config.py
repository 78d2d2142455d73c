import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    reload: bool = False


def load_settings() -> Settings:
    """Read settings from RECEIPT_PROCESSOR_* environment variables (or a .env file)."""
    host = os.environ.get("RECEIPT_PROCESSOR_HOST", "0.0.0.0")

    raw_port = os.environ.get("RECEIPT_PROCESSOR_PORT", "8080")
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"RECEIPT_PROCESSOR_PORT must be an integer, got {raw_port!r}") from None

    log_level = os.environ.get("RECEIPT_PROCESSOR_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"RECEIPT_PROCESSOR_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    reload = os.environ.get("RECEIPT_PROCESSOR_RELOAD", "false").lower() in ("1", "true", "yes")

    return Settings(host=host, port=port, log_level=log_level, reload=reload)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level, format=LOG_FORMAT)
