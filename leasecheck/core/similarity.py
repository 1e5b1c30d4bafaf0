# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Set-overlap scores between a captured document and its reference."""
from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Dict, Optional

from .normalize import DEFAULT_SHINGLE_K, shingle

__all__ = ["SimilarityScores", "containment", "jaccard", "score_texts"]


def containment(a: Optional[AbstractSet[str]], b: Optional[AbstractSet[str]]) -> float:
    """Fraction of ``a`` found in ``b``; 0.0 when ``a`` is empty."""

    a = a or frozenset()
    b = b or frozenset()
    if not a:
        return 0.0
    return len(a & b) / len(a)


def jaccard(a: Optional[AbstractSet[str]], b: Optional[AbstractSet[str]]) -> float:
    """Symmetric overlap ``|a & b| / |a | b|``; two empty sets score 1.0."""

    a = a or frozenset()
    b = b or frozenset()
    if not a and not b:
        return 1.0
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


@dataclass(frozen=True)
class SimilarityScores:
    """The three scores reported together for every comparison.

    ``actual_in_reference`` tolerates partial captures, ``reference_in_actual``
    penalizes missing sections and ``jaccard`` is the symmetric overall score.
    """

    actual_in_reference: float
    reference_in_actual: float
    jaccard: float

    def as_percentages(self, digits: int = 1) -> Dict[str, float]:
        return {
            "actual_in_reference": round(self.actual_in_reference * 100.0, digits),
            "reference_in_actual": round(self.reference_in_actual * 100.0, digits),
            "jaccard": round(self.jaccard * 100.0, digits),
        }


def score_texts(actual: Optional[str], reference: Optional[str], k: int = DEFAULT_SHINGLE_K) -> SimilarityScores:
    actual_set = shingle(actual, k)
    reference_set = shingle(reference, k)
    return SimilarityScores(
        actual_in_reference=containment(actual_set, reference_set),
        reference_in_actual=containment(reference_set, actual_set),
        jaccard=jaccard(actual_set, reference_set),
    )
