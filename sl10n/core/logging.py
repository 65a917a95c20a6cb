"""Structured JSON logging for sl10n.

Provides a JSON formatter that outputs one object per line.  Extra
fields (``event``, ``table``, ``message_key``, ``lang``, ...) are merged
into each log record automatically.

The library itself only emits records through ``logging.getLogger``;
host programs and the bundled examples call ``setup_logging`` once.

Usage::

    from sl10n.core.logging import setup_logging
    setup_logging("DEBUG")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

# Record attributes set through ``extra=`` by sl10n, grouped by event:
# table_built / lazy_table_init carry table, keys, languages;
# message_miss carries table, message_key, lang.
SL10N_FIELDS = ("event", "table", "message_key", "lang", "languages", "keys")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Args:
        fields: Extra record attributes copied into the payload when set.
            Host programs can pass their own names alongside
            ``SL10N_FIELDS``.
    """

    def __init__(self, fields: tuple[str, ...] = SL10N_FIELDS) -> None:
        super().__init__()
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **{
                name: getattr(record, name)
                for name in self.fields
                if getattr(record, name, None) is not None
            },
        }
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(log_level: str | None = None) -> None:
    """Configure the root logger to emit JSON lines to stdout.

    Args:
        log_level: Minimum log level name.  Defaults to
            ``Settings.LOG_LEVEL``.
    """
    if log_level is None:
        from sl10n.core.config import get_settings

        log_level = get_settings().LOG_LEVEL

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level.upper())
