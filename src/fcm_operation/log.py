"""Structured JSON logging setup."""

import json
import logging
import sys
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone

# Attributes every LogRecord has; anything else came in via `extra={...}`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime"}
)

_NOISY_LOGGERS = ("google", "urllib3", "werkzeug")


class JsonFormatter(logging.Formatter):
    """One JSON object per line.

    *static_fields* are stamped on every entry (e.g. the operation id) so
    a host that aggregates logs from many operations can filter on them;
    per-call ``extra`` values win on key clashes.
    """

    def __init__(self, static_fields: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self._static_fields = dict(static_fields or {})

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self._static_fields,
        }
        entry.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS
        )
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    static_fields: Mapping[str, str] | None = None,
    suppress: Sequence[str] = _NOISY_LOGGERS,
) -> None:
    """Send root logging to stdout as JSON.

    Loggers named in *suppress* (the Google auth / HTTP client stack by
    default) are raised to WARNING.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(static_fields))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in suppress:
        logging.getLogger(name).setLevel(logging.WARNING)
