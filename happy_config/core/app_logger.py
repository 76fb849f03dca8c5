"""
Logging setup for happy-config.
Writes a rotating log under the application directory; mirrors to the console when debugging.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path


def get_log_directory(app_dir: Path) -> Path:
    """Get or create the logs directory under the application directory."""
    log_dir = Path(app_dir) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def setup_logger(app_dir: Path, debug: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Creates:
    - happy-config.log: validation, probe and persistence events (1MB, 3 backups)
    - console output when debug is set or HAPPY_CONFIG_DEBUG is present
    """
    logger = logging.getLogger("happy_config")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        handler.flush()
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        log_dir = get_log_directory(app_dir)
        file_handler = RotatingFileHandler(log_dir / "happy-config.log", maxBytes=1024 * 1024, backupCount=3)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        # Read-only app dir
        logger.addHandler(logging.NullHandler())
        logger.warning(f"File logging disabled: {e}")

    if debug or os.getenv("HAPPY_CONFIG_DEBUG"):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
