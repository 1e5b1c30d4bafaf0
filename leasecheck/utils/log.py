# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Structured event logging shared by the CLI, workflow and HTTP service."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from .json_utils import json_ready

__all__ = ["configure_logger", "log_event", "LOGGER_NAME"]

LOGGER_NAME = "leasecheck"

# format per logger name, set by configure_logger
_FORMATS: Dict[str, str] = {}


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def configure_logger(
    name: str = LOGGER_NAME,
    *,
    level: str = "INFO",
    fmt: str = "json",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Return ``name`` with exactly one stream handler attached.

    Calling it again swaps the handler, so a CLI can move logs to stderr while
    its JSON result goes to stdout.
    """

    logger = logging.getLogger(name)
    for existing in list(logger.handlers):
        if getattr(existing, "_leasecheck", False):
            logger.removeHandler(existing)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._leasecheck = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    logger.propagate = False
    _FORMATS[name] = fmt
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    payload: Optional[Dict[str, Any]] = None,
    *,
    level: str = "info",
) -> None:
    record = {"ts": _utc_now_iso(), "event": event, **(payload or {})}
    if _FORMATS.get(logger.name, "json") == "json":
        msg = json.dumps(json_ready(record), ensure_ascii=False)
    else:
        msg = f"{record['ts']} {event} {payload or {}}"
    fn = getattr(logger, level, logger.info)
    fn(msg)
