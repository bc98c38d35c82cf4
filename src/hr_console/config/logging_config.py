from __future__ import annotations

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"


def build_logging_config(level: str = "INFO") -> dict:
    """dictConfig payload: one console handler, root and package loggers at ``level``."""
    level = (level or "INFO").upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
        },
        "loggers": {
            "hr_console": {"level": level},
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }
