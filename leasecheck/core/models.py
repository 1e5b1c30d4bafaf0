# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Aggregate comparison output.

The record is frozen: every field is computed once per comparison call and
the instance is never updated afterwards. Pydantic gives validation of the
score ranges and a stable JSON shape for the CLI and HTTP surfaces.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .templates import TemplateVariant

__all__ = ["ComparisonResult"]


class ComparisonResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    variant: Optional[TemplateVariant] = None
    anchor_hits: Dict[TemplateVariant, int] = Field(default_factory=dict)
    missing_reference_anchors: Optional[Tuple[str, ...]] = None
    missing_detected_anchors: Optional[Tuple[str, ...]] = None
    risk_labels: Optional[Tuple[str, ...]] = None
    containment_actual_in_reference: Optional[float] = Field(None, ge=0.0, le=1.0)
    containment_reference_in_actual: Optional[float] = Field(None, ge=0.0, le=1.0)
    jaccard: Optional[float] = Field(None, ge=0.0, le=1.0)
    cleaned_length: int = Field(0, ge=0)
    input_count: int = Field(0, ge=0)
    errors: Dict[str, str] = Field(default_factory=dict)
    cleaned_text: str = Field("", exclude=True, repr=False)

    @property
    def complete(self) -> bool:
        return not self.errors

    def percentages(self, digits: int = 1) -> Dict[str, Optional[float]]:
        """Scores scaled to 0..100 for display; ``None`` stays ``None``."""

        def _pct(value: Optional[float]) -> Optional[float]:
            return None if value is None else round(value * 100.0, digits)

        return {
            "actual_in_reference": _pct(self.containment_actual_in_reference),
            "reference_in_actual": _pct(self.containment_reference_in_actual),
            "jaccard": _pct(self.jaccard),
        }
