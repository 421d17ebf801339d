from __future__ import annotations

import json
import logging
import os
import socket
import sys
import time

from .types import LoggingExtra


class JsonFormatter(logging.Formatter):
    def format(self: JsonFormatter, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "instance": os.getenv("APP_INSTANCE_ID", _compute_instance_id()),
        }

        # Dynamically include all extra fields defined in LoggingExtra TypedDict
        for field_name in LoggingExtra.__annotations__:
            if hasattr(record, field_name):
                value: object = getattr(record, field_name)
                payload[field_name] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _compute_instance_id() -> str:
    host = socket.gethostname().split(".")[0]
    pid = os.getpid()
    return f"{host}-{pid}"


def setup_logging(level: str = "WARNING") -> None:
    levels: dict[str, int] = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    lvl = levels.get(level.upper(), logging.WARNING)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(lvl)

    # Output files and stdout carry results; diagnostics go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
