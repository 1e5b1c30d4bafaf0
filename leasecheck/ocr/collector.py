# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Sequential multi-page recognition.

Pages are recognized one at a time, in order, and their texts are joined
with a boundary. The caller cleans the joined text once afterwards so
duplicate-line suppression sees every page together.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from ..errors import RecognitionError
from ..utils.log import LOGGER_NAME, log_event
from .interfaces import TextRecognizer
from .models import CollectedText, PageImage, RecognitionFailure, RecognitionResult

__all__ = ["DEFAULT_PAGE_SEPARATOR", "ProgressCallback", "collect_text"]

DEFAULT_PAGE_SEPARATOR = "\n\n"

ProgressCallback = Callable[[int, int], None]

logger = logging.getLogger(LOGGER_NAME)


def collect_text(
    pages: Sequence[PageImage],
    recognizer: TextRecognizer,
    *,
    separator: str = DEFAULT_PAGE_SEPARATOR,
    on_progress: Optional[ProgressCallback] = None,
) -> CollectedText:
    """Recognize ``pages`` in order and concatenate their raw text.

    A :class:`RecognitionError` on one page is recorded as a failure and the
    remaining pages are still processed. ``on_progress(done, total)`` is
    called after every page, successful or not.
    """

    total = len(pages)
    results: List[RecognitionResult] = []
    failures: List[RecognitionFailure] = []
    for done, page in enumerate(pages, start=1):
        try:
            results.append(recognizer.recognize(page))
        except RecognitionError as exc:
            failures.append(
                RecognitionFailure(
                    page_number=exc.page_number or page.page_number,
                    source=page.source,
                    message=str(exc),
                )
            )
            log_event(
                logger,
                "recognition_failed",
                {"page": page.page_number, "source": page.source, "error": str(exc)},
                level="warning",
            )
        if on_progress is not None:
            on_progress(done, total)

    raw_text = separator.join(result.text for result in results)
    return CollectedText(raw_text=raw_text, page_count=total, results=results, failures=failures)
