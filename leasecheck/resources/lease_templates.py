# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Built-in lease templates and risk rules.

These tables are read-only configuration: build them once at startup and pass
them into every comparison call.
"""
from __future__ import annotations

from typing import Optional, Tuple

from ..config import DEFAULT_APT_TITLE_HINTS, Settings
from ..core.risks import RiskRule, build_risk_rules
from ..core.templates import DEFAULT_ANCHOR_THRESHOLD, TemplateProfile, TemplateVariant

STANDARD_ANCHORS: Tuple[str, ...] = (
    "임차주택의 표시",
    "계약내용",
    "특약사항",
    "제1조",
    "제2조",
    "제3조",
)

APT_ANCHORS: Tuple[str, ...] = (
    "아파트의 표시",
    "계약내용",
    "특약사항",
    "제1조",
    "제2조",
    "제3조",
)

APT_TITLE_HINTS: Tuple[str, ...] = DEFAULT_APT_TITLE_HINTS

# (label, pattern); evaluated on cleaned text, case-sensitive.
RISK_RULE_TABLE: Tuple[Tuple[str, str], ...] = (
    ("면책/책임제한", r"(면책|책임\s*없|일체\s*책임|책임\s*제한)"),
    (
        "일방 해지/해제",
        r"(일방적(으로)?\s*(해지|해제)|임의\s*(해지|해제)|즉시\s*(해지|해제))",
    ),
    ("과도한 위약금/배상", r"(위약금|손해배상|배상금).{0,30}(전액|2배|배액|3배|삼배)"),
    ("권리 포기 강요", r"(포기한다|권리를\s*포기|이의\s*제기\s*하지\s*않)"),
    (
        "전속관할",
        r"(전속\s*관할|관할\s*법원.{0,20}한정|임대인\s*(의\s*)?주소지\s*(관할\s*)?법원)",
    ),
    (
        "중개사 책임 전면 부인",
        r"(공인\s*)?중개(사|업자|인).{0,30}(일체|모든|어떠한)\s*(의\s*)?책임.{0,10}(없|지지\s*않|부담하지\s*않)",
    ),
)


def default_profiles(settings: Optional[Settings] = None) -> Tuple[TemplateProfile, ...]:
    """Standard then Apt, with thresholds and title hints from ``settings``."""

    if settings is None:
        std_threshold = apt_threshold = DEFAULT_ANCHOR_THRESHOLD
        title_hints = APT_TITLE_HINTS
    else:
        std_threshold = settings.standard_threshold
        apt_threshold = settings.apt_threshold
        title_hints = tuple(settings.apt_title_hints)
    return (
        TemplateProfile(
            variant=TemplateVariant.STANDARD,
            anchors=STANDARD_ANCHORS,
            threshold=std_threshold,
        ),
        TemplateProfile(
            variant=TemplateVariant.APT,
            anchors=APT_ANCHORS,
            threshold=apt_threshold,
            title_hints=title_hints,
        ),
    )


def default_risk_rules() -> Tuple[RiskRule, ...]:
    return build_risk_rules(RISK_RULE_TABLE)


__all__ = [
    "APT_ANCHORS",
    "APT_TITLE_HINTS",
    "RISK_RULE_TABLE",
    "STANDARD_ANCHORS",
    "default_profiles",
    "default_risk_rules",
]
