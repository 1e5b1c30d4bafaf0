# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Text canonicalization and k-shingling for document comparison."""
from __future__ import annotations

import re
from typing import FrozenSet, Optional

__all__ = ["COMPARABLE_CHAR_CLASS", "DEFAULT_SHINGLE_K", "normalize", "shingle"]

# Hangul syllables, ASCII Latin letters and decimal digits.
COMPARABLE_CHAR_CLASS = r"[가-힣A-Za-z0-9]"
DEFAULT_SHINGLE_K = 3

_WHITESPACE_RE = re.compile(r"\s+")
_NON_COMPARABLE_RE = re.compile(r"[^가-힣A-Za-z0-9]")


def normalize(text: Optional[str]) -> str:
    """Drop whitespace and anything outside the comparable alphabet, then lowercase.

    Whitespace is removed rather than collapsed, so ``"계약 내용"`` and
    ``"계약내용"`` normalize identically. The function is idempotent.
    """

    text = text or ""
    text = _WHITESPACE_RE.sub("", text)
    text = _NON_COMPARABLE_RE.sub("", text)
    return text.lower()


def shingle(text: Optional[str], k: int = DEFAULT_SHINGLE_K) -> FrozenSet[str]:
    """Return the set of length-``k`` windows over ``normalize(text)``.

    Texts shorter than ``k`` after normalization yield an empty set.
    """

    k = max(1, int(k))
    norm = normalize(text)
    if len(norm) < k:
        return frozenset()
    return frozenset(norm[i : i + k] for i in range(len(norm) - k + 1))
