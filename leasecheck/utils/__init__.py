# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Utility helpers shared across the leasecheck package."""

from .json_utils import json_ready
from .log import configure_logger, log_event

__all__ = ["json_ready", "configure_logger", "log_event"]
