# infra/logging_config.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.path import user_data_dir
from infra.version import get_app_version


def setup_logging(level: int = logging.INFO, log_dir: Path | None = None) -> Path:
    """
    Configure application logging.
    Logs go to the per-user data directory unless ``log_dir`` is given.
    """
    log_dir = log_dir or (user_data_dir() / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "siteledger.log"

    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear any existing handlers so repeated setup does not duplicate output
    logger.handlers.clear()

    # File handler (rotating)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1_000_000,  # 1 MB per file
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
    )
    logger.addHandler(file_handler)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console)

    # matplotlib is chatty at INFO about font discovery
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

    logger.info("Logging initialized (v%s). Log file at %s", get_app_version(), log_file)
    return log_file
