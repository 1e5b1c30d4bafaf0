# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Comparison core: normalization, shingling, scoring, cleanup, anchors, risks."""

from .cleaner import clean, collapse_spaced_letters, dedupe_lines
from .normalize import COMPARABLE_CHAR_CLASS, DEFAULT_SHINGLE_K, normalize, shingle
from .similarity import SimilarityScores, containment, jaccard, score_texts
from .templates import (
    TemplateDetection,
    TemplateProfile,
    TemplateVariant,
    count_anchor_hits,
    detect,
    find_profile,
    has_title_hint,
    missing_anchors,
)
from .risks import RiskRule, build_risk_rules, scan_risks
from .models import ComparisonResult
from .engine import compare_documents, normalize_line_endings

__all__ = [
    "COMPARABLE_CHAR_CLASS",
    "ComparisonResult",
    "DEFAULT_SHINGLE_K",
    "RiskRule",
    "SimilarityScores",
    "TemplateDetection",
    "TemplateProfile",
    "TemplateVariant",
    "build_risk_rules",
    "clean",
    "collapse_spaced_letters",
    "compare_documents",
    "containment",
    "count_anchor_hits",
    "dedupe_lines",
    "detect",
    "find_profile",
    "has_title_hint",
    "jaccard",
    "missing_anchors",
    "normalize",
    "normalize_line_endings",
    "scan_risks",
    "score_texts",
    "shingle",
]
