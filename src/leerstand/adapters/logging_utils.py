# src/leerstand/adapters/logging_utils.py
import json
import logging
import sys
import time
from typing import Any

from .config import config

# LogRecord attributes that are never copied into the JSON line
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "context"}


class JsonLogFormatter(logging.Formatter):
    """
    One JSON object per line: event name, level, logger, env, plus whatever
    context the call site attached (German text stays readable, no \\u escapes).
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": round(time.time(), 3),
            "level": record.levelname,
            "logger": record.name,
            "env": config.ENV,
            "event": record.getMessage(),
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            payload.update(ctx)
        # plain extra={...} keys are kept too
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                payload.setdefault(key, value)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def log_context(**fields: Any) -> dict[str, Any]:
    """extra= payload for get_logger() loggers: logger.info("event", extra=log_context(a=1))."""
    return {"context": fields}


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL.upper())
        logger.propagate = False
    return logger
