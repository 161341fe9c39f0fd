"""Logging setup shared by the API, the demo and the scripts."""
from __future__ import annotations

import logging
import os
from pathlib import Path

_NOISY_LOGGERS = ("urllib3", "watchdog", "multipart")


def setup_logging(level: str | None = None) -> None:
    """Log to the console and, unless ``STORESEARCH_LOG_FILE`` is empty, to a file."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level_name = (level or os.getenv("STORESEARCH_LOG_LEVEL", "INFO")).upper()
    resolved = getattr(logging, level_name, logging.INFO)
    log_file = os.getenv("STORESEARCH_LOG_FILE", "storesearch.log")

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root_logger.setLevel(resolved)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
