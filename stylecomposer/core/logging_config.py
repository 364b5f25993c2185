from __future__ import annotations

import logging
import logging.config
from pathlib import Path

from stylecomposer.core import config

PROJECT_ROOT = Path(__file__).resolve().parents[2]
LOG_DIR = PROJECT_ROOT / "logs"


def configure_logging(*, level: str | None = None, log_dir: Path | None = LOG_DIR) -> None:
    """Configure engine logging with a console handler and an optional rotating file.

    Passing ``log_dir=None`` keeps the output on the console only.
    """

    logging.captureWarnings(True)
    level = (level or config.settings.LOG_LEVEL).upper()

    handlers: dict[str, dict[str, object]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "verbose",
        },
    }
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers["engine_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": str(log_dir / "stylecomposer.log"),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 5,
            "encoding": "utf-8",
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            }
        },
        "handlers": handlers,
        "loggers": {
            "stylecomposer": {
                "handlers": list(handlers),
                "level": "DEBUG" if log_dir is not None else level,
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)


__all__ = ["configure_logging", "LOG_DIR"]
