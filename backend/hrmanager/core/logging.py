"""Logging utilities with command ID support."""

from __future__ import annotations

import json
import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

command_id_ctx: ContextVar[str | None] = ContextVar("command_id", default=None)


class CommandIDFilter(logging.Filter):
    """Attach the ID of the command being executed to log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.command_id = command_id_ctx.get()
        return True


class JsonFormatter(logging.Formatter):
    """Format logs as JSON."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        log_record = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if getattr(record, "command_id", None):
            log_record["command_id"] = record.command_id
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def init_logging(level: str) -> None:
    """Initialize application logging."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    handler.addFilter(CommandIDFilter())
    logging.basicConfig(level=level.upper(), handlers=[handler])


@contextmanager
def command_context(command_id: str | None = None) -> Iterator[str]:
    """Bind a command ID to every log record emitted inside the block."""
    command_id = command_id or str(uuid.uuid4())
    token = command_id_ctx.set(command_id)
    try:
        yield command_id
    finally:
        command_id_ctx.reset(token)
