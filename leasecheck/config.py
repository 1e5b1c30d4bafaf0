# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Environment-driven settings.

Every knob falls back to its default when the variable is unset, blank or
unparsable, so a bad deployment value never prevents a comparison from
running.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

__all__ = ["Settings", "DEFAULT_APT_TITLE_HINTS"]

DEFAULT_APT_TITLE_HINTS: Tuple[str, ...] = ("아파트전세계약서",)


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    return raw or default


def _env_int(environ: Mapping[str, str], name: str, default: int, *, minimum: int = 0) -> int:
    raw = environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


def _env_list(environ: Mapping[str, str], name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = environ.get(name)
    if raw is None:
        return default
    items = tuple(part.strip() for part in raw.split(",") if part.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    shingle_k: int = 3
    standard_threshold: int = 4
    apt_threshold: int = 4
    apt_title_hints: Tuple[str, ...] = field(default=DEFAULT_APT_TITLE_HINTS)
    diff_preview_chars: int = 6000
    page_separator: str = "\n\n"
    ocr_lang: str = "kor+eng"
    log_level: str = "INFO"
    log_format: str = "json"
    reference_path: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``LEASECHECK_*`` environment variables."""

        env = os.environ if environ is None else environ
        log_format = _env_str(env, "LEASECHECK_LOG_FORMAT", "json").lower()
        if log_format not in {"json", "text"}:
            log_format = "json"
        reference_path = env.get("LEASECHECK_REFERENCE_PATH")
        return cls(
            shingle_k=_env_int(env, "LEASECHECK_SHINGLE_K", 3, minimum=1),
            standard_threshold=_env_int(env, "LEASECHECK_STANDARD_THRESHOLD", 4),
            apt_threshold=_env_int(env, "LEASECHECK_APT_THRESHOLD", 4),
            apt_title_hints=_env_list(env, "LEASECHECK_APT_TITLE_HINTS", DEFAULT_APT_TITLE_HINTS),
            diff_preview_chars=_env_int(env, "LEASECHECK_DIFF_PREVIEW_CHARS", 6000),
            ocr_lang=_env_str(env, "LEASECHECK_OCR_LANG", "kor+eng"),
            log_level=_env_str(env, "LEASECHECK_LOG_LEVEL", "INFO").upper(),
            log_format=log_format,
            reference_path=reference_path.strip() if reference_path and reference_path.strip() else None,
        )
