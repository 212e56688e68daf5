"""Structured Logging — record-aware log formatting for the school records API.

Invariants:
    - Every line carries timestamp, level, logger name and message
    - Record context (entity, record_id, affected) and request context
      (error_code, path) are emitted only when the call site passed them
    - setup_logging is idempotent: calling it again replaces our handler, never stacks it

Design Decisions:
    - JSON for log shippers, a compact key=value suffix for terminals; both read
      the same extras so call sites never care which format is active
"""

import logging
import json
from datetime import datetime, timezone

RECORD_FIELDS = ("entity", "record_id", "affected")
REQUEST_FIELDS = ("error_code", "path")

_HANDLER_NAME = "school_admin"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in RECORD_FIELDS + REQUEST_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Plain line with the record context appended, e.g. `[entity=courses affected=2]`."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items())
            line = f"{line} [{pairs}]"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the app's root handler; fmt is "json" or "text"."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # SQL echo stays off unless explicitly asked for
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
