# contactform/logging_config.py
import logging
import logging.config
from pathlib import Path

from contactform.config import Settings

STANDARD_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def build_logging_config(settings: Settings) -> dict:
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": settings.LOG_LEVEL,
        },
    }
    if settings.LOG_FILE:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": settings.LOG_FILE,
            "maxBytes": 5 * 1024 * 1024,  # 5 MB
            "backupCount": 5,
            "encoding": "utf-8",
            "level": settings.LOG_LEVEL,
        }
    names = list(handlers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": STANDARD_FORMAT},
        },
        "handlers": handlers,
        "loggers": {
            # Uvicorn core logs
            "uvicorn": {"handlers": names, "level": "INFO", "propagate": False},
            "uvicorn.error": {"handlers": names, "level": "INFO", "propagate": False},
            "uvicorn.access": {"handlers": names, "level": "INFO", "propagate": False},
            # FastAPI / app logs
            "fastapi": {"handlers": names, "level": settings.LOG_LEVEL, "propagate": False},
            "contactform": {"handlers": names, "level": settings.LOG_LEVEL, "propagate": False},
        },
        "root": {"handlers": names, "level": settings.LOG_LEVEL},
    }


def setup_logging(settings: Settings) -> None:
    if settings.LOG_FILE:
        Path(settings.LOG_FILE).resolve().parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(settings))
    logging.getLogger("contactform").info("Logging initialized (env=%s)", settings.ENV)
