"""
Logging setup for askguard.

Log records may carry structured data under ``extra_fields`` (a dict passed
through ``extra={"extra_fields": {...}}``). The JSON formatter merges it into
the payload and the text formatter appends it as ``key=value`` pairs.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict

from askguard.core.config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    fields = getattr(record, "extra_fields", None)
    return fields if isinstance(fields, dict) else {}


class JSONFormatter(logging.Formatter):
    """
    Render each record as a single JSON object.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        log_obj.update(_extra_fields(record))

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


class KeyValueFormatter(logging.Formatter):
    """
    Standard text format with structured fields appended as key=value.
    """
    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _extra_fields(record)
        if fields:
            line += " | " + " ".join(f"{key}={value!r}" for key, value in fields.items())
        return line


def setup_logging() -> None:
    """
    Configure the root logger from settings.

    Output goes to stdout, as JSON when LOG_FORMAT is "json" and as text
    otherwise. Existing root handlers are replaced.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if settings.LOG_FORMAT.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(KeyValueFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)

    logging.getLogger("askguard").setLevel(log_level)
