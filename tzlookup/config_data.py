import logging
import os

CONFIG = {
    # Lookup behaviour
    "default_tz": "Etc/UTC",

    # Logging
    "LOG_LEVEL": os.environ.get("TZLOOKUP_LOG_LEVEL", "INFO"),
    "LOG_FORMAT": "%(asctime)s - %(levelname)s - %(message)s",
}


def configure_logging(level=None):
    """Configure root logging from CONFIG, for scripts and interactive use."""
    level = level or CONFIG["LOG_LEVEL"]
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, format=CONFIG["LOG_FORMAT"])
