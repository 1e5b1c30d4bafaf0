# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Mock OCR components for tests and dependency-free smoke runs."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from ..errors import RecognitionError
from .interfaces import ImageSource, InputHandler, TextRecognizer
from .models import PageImage, RecognitionResult


class MockRecognizer(TextRecognizer):
    """Return canned text per page number, or raise for ``fail_pages``."""

    def __init__(
        self,
        texts: Optional[Dict[int, str]] = None,
        fail_pages: Iterable[int] = (),
    ) -> None:
        self.texts = dict(texts or {})
        self.fail_pages = set(fail_pages)
        self.calls: List[PageImage] = []

    def recognize(self, page: PageImage) -> RecognitionResult:
        self.calls.append(page)
        if page.page_number in self.fail_pages:
            raise RecognitionError(
                f"mock failure for page {page.page_number}", page_number=page.page_number
            )
        text = self.texts.get(page.page_number, f"mock text for page {page.page_number}")
        return RecognitionResult(page_number=page.page_number, text=text, confidence=0.95, language="kor")


class MockInputHandler(InputHandler):
    def __init__(self) -> None:
        self.calls: List[Sequence[ImageSource]] = []

    def load(self, sources: Sequence[ImageSource], document_id: str = "lease") -> List[PageImage]:
        self.calls.append(sources)
        return [
            PageImage(document_id=document_id, page_number=idx + 1, image=source)
            for idx, source in enumerate(sources)
        ]
