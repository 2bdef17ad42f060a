"""
JSONL logging bootstrap.
Initializes a single JSONL file sink early in CLI startup when a log path is configured.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

PATH_ENV = "SVSEEDS_LOG_PATH"
LEVEL_ENV = "SVSEEDS_LOG_LEVEL"

# Standard LogRecord attributes that are not copied into the payload
_RECORD_FIELDS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
        "message",
    }
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "schema": {"name": "svseeds.log", "ver": "1.0.0"},
                "logger": record.name,
                "message": record.getMessage(),
            }
            # Attach any extra fields on the record
            for k, v in record.__dict__.items():
                if k not in _RECORD_FIELDS:
                    payload.setdefault(k, v)
            if record.exc_info:
                payload["exc"] = logging.Formatter().formatException(record.exc_info)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str | None = None, level: str | None = None) -> JsonlHandler | None:
    """Attach a JSONL handler to the root logger.

    Without ``path`` or ``$SVSEEDS_LOG_PATH`` only a NullHandler is attached,
    and log records are never printed to stderr.

    Returns:
        The installed handler, or None
    """
    root = logging.getLogger()
    path = path or os.environ.get(PATH_ENV)
    if not path:
        if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
            root.addHandler(logging.NullHandler())
        return None
    level = (level or os.environ.get(LEVEL_ENV, "INFO")).upper()

    root.setLevel(getattr(logging, level, logging.INFO))
    # Remove existing handlers of the same kind to avoid duplicates
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
    handler = JsonlHandler(path)
    root.addHandler(handler)
    return handler
