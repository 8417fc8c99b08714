import json
import logging
from datetime import datetime, timezone

from debtbook import config

LOGGER_NAME = "debtbook"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; extra_data keys are merged at the top level."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.module}:{record.lineno}",
            "message": record.getMessage(),
        }
        if hasattr(record, "extra_data"):
            log_entry.update(record.extra_data)
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        # Dates and enums in extra_data are written as strings
        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(level: str | None = None):
    debtbook_logger = logging.getLogger(LOGGER_NAME)

    # Calling twice must not duplicate output
    if not any(isinstance(h.formatter, JSONFormatter) for h in debtbook_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        debtbook_logger.addHandler(handler)

    debtbook_logger.setLevel(level or config.LOG_LEVEL)

    return debtbook_logger
