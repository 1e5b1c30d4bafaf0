# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""OCR collaborator: page inputs, recognizers and sequential collection."""

from .collector import DEFAULT_PAGE_SEPARATOR, collect_text
from .input_handler import ImageInputHandler
from .interfaces import InputHandler, TextRecognizer
from .mocks import MockInputHandler, MockRecognizer
from .models import CollectedText, PageImage, RecognitionFailure, RecognitionResult
from .tesseract import TesseractRecognizer

__all__ = [
    "CollectedText",
    "DEFAULT_PAGE_SEPARATOR",
    "ImageInputHandler",
    "InputHandler",
    "MockInputHandler",
    "MockRecognizer",
    "PageImage",
    "RecognitionFailure",
    "RecognitionResult",
    "TesseractRecognizer",
    "TextRecognizer",
    "collect_text",
]
