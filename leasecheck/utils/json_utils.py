# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""JSON serialization helpers."""

from __future__ import annotations

import dataclasses
import re
from enum import Enum
from pathlib import PurePath
from typing import Any, Mapping

from pydantic import BaseModel


def json_ready(obj: Any):
    """Return a JSON-serializable representation of ``obj``.

    Handles pydantic models, dataclasses, enums, compiled patterns, mappings
    (including read-only proxies), sequences and sets. Sets are emitted sorted
    so shingle sets and label sets dump deterministically.
    """

    if isinstance(obj, Enum):
        return json_ready(obj.value)

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: json_ready(getattr(obj, f.name)) for f in dataclasses.fields(obj)}

    if isinstance(obj, Mapping):
        return {str(json_ready(k)): json_ready(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [json_ready(v) for v in obj]

    if isinstance(obj, (set, frozenset)):
        return sorted((json_ready(v) for v in obj), key=str)

    if isinstance(obj, re.Pattern):
        return obj.pattern

    if isinstance(obj, PurePath):
        return obj.as_posix()

    if isinstance(obj, (bytes, bytearray)):
        return obj.decode("utf-8", errors="replace")

    return str(obj)


__all__ = ["json_ready"]
