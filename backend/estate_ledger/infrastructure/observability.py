"""Structured Logging — ledger-aware JSON formatter and root handler setup.

Invariants:
    - Every line carries timestamp, level, logger name and message
    - Ledger extras (operation, entity_id, error_kind, caller, path)
      appear only when the record sets them
    - At most one ledger handler sits on the root logger, however many apps
      run their lifespan in one process

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - The ledger handler is found by name and replaced, so create_app() can
      be called repeatedly (tests, workers) without duplicating output
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("operation", "entity_id", "error_kind", "caller", "path")
HANDLER_NAME = "estate_ledger"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key])
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def _build_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(operation)s] - %(message)s",
            defaults={"operation": "-"},
        ))
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the ledger handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
        existing.close()
    handler = _build_handler(fmt)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
