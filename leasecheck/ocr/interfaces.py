# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Interfaces for the OCR collaborator."""
from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Sequence, Union

from .models import PageImage, RecognitionResult

ImageSource = Union[str, Path, object]


class InputHandler(Protocol):
    def load(self, sources: Sequence[ImageSource], document_id: str = "lease") -> List[PageImage]:
        ...


class TextRecognizer(Protocol):
    """Turn one page into text or raise :class:`~leasecheck.errors.RecognitionError`."""

    def recognize(self, page: PageImage) -> RecognitionResult:
        ...
