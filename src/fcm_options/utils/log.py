from __future__ import annotations

import logging
import sys
from contextlib import suppress
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog

from fcm_options.config import Settings, get_settings

LOGGER_NAME = "fcm_options"


def _log_path(s: Settings) -> Path | None:
    if s.log_dir is None:
        return None
    return Path(s.log_dir) / "fcm_options.log"


def rename_event_to_msg(_, __, event_dict: dict[str, Any]) -> dict[str, Any]:
    if "msg" not in event_dict and "event" in event_dict:
        event_dict["msg"] = event_dict.pop("event")
    return event_dict


# Bound to the `fcm_options` stdlib logger only; the process-wide structlog
# configuration is left to the host application. Records reach stdlib handlers
# as rendered JSON strings.
logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
    logging.getLogger(LOGGER_NAME),
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
        rename_event_to_msg,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
)


def configure_logging(settings: Settings | None = None, *, force: bool = False) -> structlog.stdlib.BoundLogger:
    """
    Attach handlers to the `fcm_options` logger (JSON lines).

    Not called on import; the CLI calls it, applications may.
    Handlers: stderr always, plus a rotating file when `FCM_LOG_DIR` is set.
    Repeated calls only update the level unless `force=True`.
    """
    s = settings if settings is not None else get_settings()
    base = logging.getLogger(LOGGER_NAME)
    base.setLevel(str(s.log_level).upper())

    # Avoid duplicate handlers on repeated calls
    if getattr(base, "_fcm_options_configured", False) and not force:
        return logger

    for h in list(base.handlers):
        base.removeHandler(h)
        with suppress(Exception):
            h.close()

    fmt = logging.Formatter("%(message)s")

    log_path = _log_path(s)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=int(s.log_max_bytes),
            backupCount=int(s.log_backup_count),
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        base.addHandler(file_handler)

    # stdout belongs to command output
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(fmt)
    base.addHandler(stream_handler)
    base.propagate = False

    base._fcm_options_configured = True
    return logger


def set_log_level(level: str) -> None:
    """
    Best-effort runtime log level override (CLI convenience).
    """
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    base = logging.getLogger(LOGGER_NAME)
    base.setLevel(lvl)
    for h in base.handlers:
        h.setLevel(lvl)
