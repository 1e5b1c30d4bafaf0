# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Repair common OCR artifacts before any comparison runs.

The cleaner is applied once to the concatenated text of every captured page,
so duplicate-line suppression also removes headers and footers repeated
across photographs.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .normalize import COMPARABLE_CHAR_CLASS

__all__ = [
    "MIN_SPACED_RUN",
    "MIN_LINE_KEY_LENGTH",
    "clean",
    "collapse_spaced_letters",
    "dedupe_lines",
]

MIN_SPACED_RUN = 4
MIN_LINE_KEY_LENGTH = 2

_PARAGRAPH_MARK_RE = re.compile("[\u00b6\u2029]")
_LINE_ENDING_RE = re.compile("\r\n|\r|\u2028")
_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_WHITESPACE_RE = re.compile(r"\s+")
_SPACED_RUN_RE = re.compile(
    rf"(?<!\S)({COMPARABLE_CHAR_CLASS}(?: {COMPARABLE_CHAR_CLASS}){{{MIN_SPACED_RUN - 1},}})(?!\S)"
)


def collapse_spaced_letters(line: str) -> str:
    """Join runs of four or more single-character tokens.

    ``"본 아 파 트 에 대 하 여 본건"`` becomes ``"본아파트에대하여 본건"`` while
    shorter runs such as ``"가 나 다"`` are left alone.
    """

    return _SPACED_RUN_RE.sub(lambda m: m.group(1).replace(" ", ""), line)


def dedupe_lines(lines: Iterable[str]) -> List[str]:
    """Keep the first occurrence of each line, keyed with whitespace removed.

    Lines whose key is shorter than two characters are treated as noise.
    """

    seen = set()
    kept: List[str] = []
    for line in lines:
        key = _WHITESPACE_RE.sub("", line)
        if len(key) < MIN_LINE_KEY_LENGTH or key in seen:
            continue
        seen.add(key)
        kept.append(line)
    return kept


def clean(raw: Optional[str]) -> str:
    text = raw or ""
    text = _PARAGRAPH_MARK_RE.sub("\n", text)
    text = _LINE_ENDING_RE.sub("\n", text)
    text = _HORIZONTAL_WS_RE.sub(" ", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)

    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]
    lines = [collapse_spaced_letters(line) for line in lines]
    return "\n".join(dedupe_lines(lines))
