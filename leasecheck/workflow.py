# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""End-to-end verification of a captured lease against its reference.

The workflow wires the collaborators around the comparison core:

1. recognize every photographed page sequentially and join the raw text,
2. load the reference text,
3. clean once and run :func:`~leasecheck.core.engine.compare_documents`,
4. optionally render the side-by-side diff.

Failures of the OCR engine, the reference loader or the diff renderer are
captured on the returned :class:`LeaseVerification` so callers can retry or
degrade (for example, show scores without the diff view).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import Settings
from .core.engine import compare_documents
from .core.models import ComparisonResult
from .core.risks import RiskRule
from .core.templates import TemplateProfile
from .diff.render import render_html_diff
from .errors import ReferenceLoadError, VisualizationError
from .ocr.collector import ProgressCallback, collect_text
from .ocr.input_handler import ImageInputHandler
from .ocr.interfaces import ImageSource, InputHandler, TextRecognizer
from .ocr.models import RecognitionFailure
from .reference import ReferenceSource, StaticReferenceSource
from .resources.lease_templates import default_profiles, default_risk_rules
from .utils.log import LOGGER_NAME, log_event

__all__ = ["LeaseVerification", "verify_images", "verify_text"]

logger = logging.getLogger(LOGGER_NAME)

ReferenceInput = Union[str, ReferenceSource]


class LeaseVerification(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: ComparisonResult
    recognition_failures: List[RecognitionFailure] = Field(default_factory=list)
    reference_error: Optional[str] = None
    diff_error: Optional[str] = None
    diff_html: Optional[str] = Field(None, exclude=True, repr=False)

    @property
    def degraded(self) -> bool:
        return bool(
            self.recognition_failures or self.reference_error or self.diff_error or self.result.errors
        )

    def notes(self) -> List[str]:
        notes = [
            f"page {failure.page_number}: recognition failed ({failure.message})"
            for failure in self.recognition_failures
        ]
        if self.reference_error:
            notes.append(f"reference unavailable: {self.reference_error}")
        if self.diff_error:
            notes.append(f"diff view unavailable: {self.diff_error}")
        return notes

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(mode="json")
        payload["percentages"] = self.result.percentages()
        payload["degraded"] = self.degraded
        return payload


def _load_reference(reference: ReferenceInput) -> tuple[str, Optional[str]]:
    source = StaticReferenceSource(reference) if isinstance(reference, str) else reference
    try:
        return source.load(), None
    except ReferenceLoadError as exc:
        log_event(logger, "reference_load_failed", {"error": str(exc)}, level="warning")
        return "", str(exc)


def verify_text(
    raw_text: Optional[str],
    reference: ReferenceInput,
    *,
    settings: Optional[Settings] = None,
    profiles: Optional[Sequence[TemplateProfile]] = None,
    risk_rules: Optional[Sequence[RiskRule]] = None,
    input_count: int = 1,
    recognition_failures: Sequence[RecognitionFailure] = (),
    render_diff: bool = True,
) -> LeaseVerification:
    """Compare already-recognized text against ``reference``."""

    settings = settings or Settings()
    reference_text, reference_error = _load_reference(reference)

    result = compare_documents(
        raw_text,
        reference_text,
        profiles=default_profiles(settings) if profiles is None else profiles,
        risk_rules=default_risk_rules() if risk_rules is None else risk_rules,
        shingle_k=settings.shingle_k,
        input_count=input_count,
    )
    if reference_error is not None:
        # scores against an empty stand-in would read as a real mismatch
        result = result.model_copy(
            update={
                "containment_actual_in_reference": None,
                "containment_reference_in_actual": None,
                "jaccard": None,
            }
        )

    diff_html: Optional[str] = None
    diff_error: Optional[str] = None
    if render_diff and reference_error is None:
        try:
            diff_html = render_html_diff(
                result.cleaned_text, reference_text, max_chars=settings.diff_preview_chars
            )
        except VisualizationError as exc:
            diff_error = str(exc)
            log_event(logger, "diff_render_failed", {"error": diff_error}, level="warning")

    verification = LeaseVerification(
        result=result,
        recognition_failures=list(recognition_failures),
        reference_error=reference_error,
        diff_error=diff_error,
        diff_html=diff_html,
    )
    log_event(
        logger,
        "verification_completed",
        {
            "variant": result.variant,
            "risk_labels": result.risk_labels,
            "scores": result.percentages(),
            "pages": input_count,
            "failed_pages": [failure.page_number for failure in recognition_failures],
            "degraded": verification.degraded,
        },
    )
    return verification


def verify_images(
    sources: Sequence[ImageSource],
    reference: ReferenceInput,
    recognizer: TextRecognizer,
    *,
    settings: Optional[Settings] = None,
    input_handler: Optional[InputHandler] = None,
    on_progress: Optional[ProgressCallback] = None,
    document_id: str = "lease",
    profiles: Optional[Sequence[TemplateProfile]] = None,
    risk_rules: Optional[Sequence[RiskRule]] = None,
    render_diff: bool = True,
) -> LeaseVerification:
    """Recognize ``sources`` page by page, then verify the joined text once."""

    settings = settings or Settings()
    handler = input_handler or ImageInputHandler()
    pages = handler.load(sources, document_id=document_id)
    collected = collect_text(
        pages,
        recognizer,
        separator=settings.page_separator,
        on_progress=on_progress,
    )
    return verify_text(
        collected.raw_text,
        reference,
        settings=settings,
        profiles=profiles,
        risk_rules=risk_rules,
        input_count=collected.page_count,
        recognition_failures=collected.failures,
        render_diff=render_diff,
    )
