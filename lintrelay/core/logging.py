"""JSON log lines for lint runs.

Adapters and the run service attach their context through ``extra={}``
(which linter, the command it ran, the exit status, how many files were
matched) and the formatter lifts those attributes into top-level keys so
CI log collectors can filter on them without parsing ``msg``::

    {"ts": "...", "level": "DEBUG", "logger": "lintrelay.linters.base",
     "msg": "Command finished", "linter": "Flake8", "command": "flake8 .",
     "status": 1, "stdout_chars": 240, "stderr_chars": 0}
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

# Record attributes emitted as JSON keys when set through extra={}
CONTEXT_FIELDS = (
    "linter",
    "command",
    "cwd",
    "status",
    "stdout_chars",
    "stderr_chars",
    "files",
    "errors",
    "warnings",
)

QUIET_LOGGERS = ("uvicorn.access", "httpcore", "httpx")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({key: getattr(record, key) for key in CONTEXT_FIELDS if hasattr(record, key)})

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(level: str | None = None) -> None:
    """Send every log record to stdout as one JSON line.

    ``level`` falls back to the ``LOG_LEVEL`` env var, then ``INFO``.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
