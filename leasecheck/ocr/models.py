# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Data models exchanged with the OCR engine.

Keeping inputs and outputs explicit lets the recognizer be swapped (Tesseract,
a cloud engine, a mock) without touching the comparison workflow.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PageImage(BaseModel):
    """One photographed page: a Pillow image or a path the recognizer can open."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    document_id: str = "lease"
    page_number: int = Field(..., ge=1)
    image: object
    source: Optional[str] = None


class RecognitionResult(BaseModel):
    page_number: int = Field(..., ge=1)
    text: str = ""
    confidence: Optional[float] = Field(None, ge=0.0, le=1.0)
    language: Optional[str] = None


class RecognitionFailure(BaseModel):
    page_number: int = Field(..., ge=1)
    source: Optional[str] = None
    message: str


class CollectedText(BaseModel):
    """Raw text accumulated over every page, before the single clean pass."""

    raw_text: str = ""
    page_count: int = Field(0, ge=0)
    results: List[RecognitionResult] = Field(default_factory=list)
    failures: List[RecognitionFailure] = Field(default_factory=list)

    @property
    def recognized_count(self) -> int:
        return len(self.results)
