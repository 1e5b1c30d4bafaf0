# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Anchor-phrase template classification and missing-section checks.

Every lease layout is described by a :class:`TemplateProfile`; detection and
anchor checks iterate over profiles generically, so adding a layout means
adding a profile, not a branch.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .normalize import normalize

__all__ = [
    "DEFAULT_ANCHOR_THRESHOLD",
    "TemplateDetection",
    "TemplateProfile",
    "TemplateVariant",
    "count_anchor_hits",
    "detect",
    "find_profile",
    "has_title_hint",
    "missing_anchors",
]

DEFAULT_ANCHOR_THRESHOLD = 4


class TemplateVariant(str, Enum):
    STANDARD = "standard"
    APT = "apt"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TemplateProfile:
    """Anchors (in document order), hit threshold and title hints for one layout."""

    variant: TemplateVariant
    anchors: Tuple[str, ...]
    threshold: int = DEFAULT_ANCHOR_THRESHOLD
    title_hints: Tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class TemplateDetection:
    variant: TemplateVariant
    hits: Dict[TemplateVariant, int]


def _contains_each(norm_text: str, phrases: Sequence[str]) -> List[bool]:
    return [normalize(phrase) in norm_text for phrase in phrases]


def count_anchor_hits(text: Optional[str], anchors: Sequence[str]) -> int:
    """Number of anchors present in ``text``; repeats count once."""

    return sum(_contains_each(normalize(text), anchors))


def has_title_hint(text: Optional[str], hints: Sequence[str]) -> bool:
    return any(_contains_each(normalize(text), hints))


def missing_anchors(text: Optional[str], anchors: Optional[Sequence[str]]) -> List[str]:
    """Anchors absent from ``text``, in their original order."""

    anchors = list(anchors or ())
    present = _contains_each(normalize(text), anchors)
    return [anchor for anchor, hit in zip(anchors, present) if not hit]


def find_profile(
    profiles: Sequence[TemplateProfile], variant: TemplateVariant
) -> Optional[TemplateProfile]:
    for profile in profiles:
        if profile.variant == variant:
            return profile
    return None


def detect(text: Optional[str], profiles: Sequence[TemplateProfile]) -> TemplateDetection:
    """Classify ``text`` against ``profiles`` as an ordered decision list.

    A profile wins when its hits reach its threshold and are not below the
    hits of any profile listed after it, or when one of its title hints is
    present. With the default Standard-then-Apt ordering this reads:
    Standard if ``std >= 4 and std >= apt``; else Apt if ``apt >= 4`` or the
    Apt title appears; else Unknown.
    """

    profiles = list(profiles or ())
    norm = normalize(text)
    hits: Dict[TemplateVariant, int] = {
        profile.variant: sum(_contains_each(norm, profile.anchors)) for profile in profiles
    }

    for idx, profile in enumerate(profiles):
        own = hits[profile.variant]
        later = [hits[other.variant] for other in profiles[idx + 1 :]]
        if own >= profile.threshold and all(own >= other for other in later):
            return TemplateDetection(variant=profile.variant, hits=hits)
        if profile.title_hints and any(_contains_each(norm, profile.title_hints)):
            return TemplateDetection(variant=profile.variant, hits=hits)

    return TemplateDetection(variant=TemplateVariant.UNKNOWN, hits=hits)
