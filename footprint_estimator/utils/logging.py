"""
Root logger setup for the ``footprint-estimator`` CLI.

Library modules log through ``logging.getLogger(__name__)`` and leave
handler setup to the CLI, which calls ``configure_logging`` once per
command. Console records go to stderr; stdout carries only report output
(tables, ``--json``).

With ``[logging] json_format = true`` each record is a single JSON line::

    {"ts": "2026-10-19T09:00:00Z", "level": "INFO", "logger": "...", "msg": "..."}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from footprint_estimator.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Instance attributes of a bare LogRecord; anything beyond these came from extra=.
_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``, extras."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict = {
            "ts": created.strftime(LOG_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        payload.update(
            (key, val)
            for key, val in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
        )
        return json.dumps(payload, default=str)


def build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return _JsonFormatter()
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def _make_handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(config: "LoggingConfig") -> None:
    """Install the stderr handler (and the optional log file) on the root logger.

    Replaces any handlers already on the root logger.

    Args:
        config: The ``[logging]`` section of ``AppConfig``.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = build_formatter(config.json_format)

    handlers = [_make_handler(logging.StreamHandler(sys.stderr), level, formatter)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _make_handler(logging.FileHandler(log_path, encoding="utf-8"), level, formatter)
        )

    logging.basicConfig(level=level, handlers=handlers, force=True)
