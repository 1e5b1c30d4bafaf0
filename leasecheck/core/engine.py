# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Run every comparison component over one capture and merge the outputs."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Sequence, TypeVar

from ..utils.log import LOGGER_NAME, log_event
from .cleaner import clean
from .models import ComparisonResult
from .normalize import DEFAULT_SHINGLE_K
from .risks import RiskRule, scan_risks
from .similarity import SimilarityScores, score_texts
from .templates import (
    TemplateDetection,
    TemplateProfile,
    TemplateVariant,
    detect,
    find_profile,
    missing_anchors,
)

__all__ = ["compare_documents", "normalize_line_endings"]

T = TypeVar("T")

logger = logging.getLogger(LOGGER_NAME)


def normalize_line_endings(text: Optional[str]) -> str:
    return (text or "").replace("\r\n", "\n").replace("\r", "\n")


def _run_stage(name: str, fn: Callable[[], T], errors: Dict[str, str]) -> Optional[T]:
    try:
        return fn()
    except Exception as exc:
        errors[name] = f"{type(exc).__name__}: {exc}"
        log_event(logger, "stage_failed", {"stage": name, "error": errors[name]}, level="warning")
        return None


def compare_documents(
    raw_text: Optional[str],
    reference_text: Optional[str],
    *,
    profiles: Optional[Sequence[TemplateProfile]] = None,
    risk_rules: Optional[Sequence[RiskRule]] = None,
    reference_variant: TemplateVariant = TemplateVariant.STANDARD,
    shingle_k: int = DEFAULT_SHINGLE_K,
    input_count: int = 1,
) -> ComparisonResult:
    """Clean ``raw_text`` once, then score, classify and scan it.

    Each downstream component runs independently on the cleaned text. A
    failing component leaves its fields ``None`` and is reported in
    ``errors``; the others still contribute to the result. If cleaning itself
    fails the raw text is used as-is.
    """

    # resources imports core.risks, so it cannot be imported at module load
    from ..resources.lease_templates import default_profiles, default_risk_rules

    profiles = tuple(default_profiles() if profiles is None else profiles)
    risk_rules = tuple(default_risk_rules() if risk_rules is None else risk_rules)
    errors: Dict[str, str] = {}

    cleaned = _run_stage("clean", lambda: clean(raw_text), errors)
    if cleaned is None:
        cleaned = normalize_line_endings(raw_text)
    reference = normalize_line_endings(reference_text)

    detection: Optional[TemplateDetection] = _run_stage(
        "detect", lambda: detect(cleaned, profiles), errors
    )

    reference_profile = find_profile(profiles, reference_variant)
    reference_anchors = reference_profile.anchors if reference_profile else ()
    missing_reference = _run_stage(
        "missing_reference_anchors", lambda: missing_anchors(cleaned, reference_anchors), errors
    )

    detected_profile = find_profile(profiles, detection.variant) if detection else None
    detected_anchors = detected_profile.anchors if detected_profile else reference_anchors
    missing_detected = _run_stage(
        "missing_detected_anchors", lambda: missing_anchors(cleaned, detected_anchors), errors
    )

    risks = _run_stage("scan_risks", lambda: scan_risks(cleaned, risk_rules), errors)
    scores: Optional[SimilarityScores] = _run_stage(
        "similarity", lambda: score_texts(cleaned, reference, shingle_k), errors
    )

    fields: Dict[str, Any] = {
        "variant": detection.variant if detection else None,
        "anchor_hits": dict(detection.hits) if detection else {},
        "missing_reference_anchors": tuple(missing_reference) if missing_reference is not None else None,
        "missing_detected_anchors": tuple(missing_detected) if missing_detected is not None else None,
        "risk_labels": tuple(risks) if risks is not None else None,
        "cleaned_length": len(cleaned),
        "input_count": max(0, int(input_count)),
        "errors": errors,
        "cleaned_text": cleaned,
    }
    if scores is not None:
        fields.update(
            containment_actual_in_reference=scores.actual_in_reference,
            containment_reference_in_actual=scores.reference_in_actual,
            jaccard=scores.jaccard,
        )

    result = ComparisonResult(**fields)
    log_event(
        logger,
        "comparison_completed",
        {
            "variant": result.variant,
            "anchor_hits": result.anchor_hits,
            "risk_count": len(result.risk_labels or ()),
            "scores": result.percentages(),
            "cleaned_length": result.cleaned_length,
            "input_count": result.input_count,
            "failed_stages": sorted(errors),
        },
        level="debug",
    )
    return result
