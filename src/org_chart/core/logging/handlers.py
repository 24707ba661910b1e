# org_chart/core/logging/handlers.py
"""
Handler configuration factories for logging.dictConfig.

Each function returns a dict for the "handlers" section of the config built in
builder.py. They are pure functions of the settings, which keeps them easy to test.
"""

from org_chart.config.settings import Settings
from pathlib import Path

# Every handler runs the request id and redaction filters declared in builder.py
_FILTERS = ["request_id", "redact"]


def _formatter_name(settings: Settings) -> str:
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def get_console_handler(settings: Settings) -> dict:
    """
    Stream handler (stderr) at LOG_LEVEL, json or text depending on LOG_FORMAT.
    """
    return {
        "class": "logging.StreamHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filters": _FILTERS,
    }


def get_file_handler(settings: Settings) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filename": str(Path(settings.LOG_DIR) / "app.log"),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": _FILTERS,
    }


# Error-specific rotating file to separate errors (useful for alerting/archival).
def get_error_file_handler(settings: Settings) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json",  # keep error files structured for easier ingestion
        "level": "ERROR",
        "filename": str(Path(settings.LOG_DIR) / "errors.log"),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": _FILTERS,
    }


def get_error_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": "json",
        "level": "ERROR",
        "filters": _FILTERS,
    }
