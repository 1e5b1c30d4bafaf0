# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Failure conditions raised by the external collaborators.

The comparison core never raises for malformed text; only the OCR engine,
the reference loader and the diff renderer surface these, and callers are
expected to degrade rather than abort when they do.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "LeaseCheckError",
    "RecognitionError",
    "ReferenceLoadError",
    "VisualizationError",
]


class LeaseCheckError(Exception):
    """Base class for recoverable collaborator failures."""


class RecognitionError(LeaseCheckError):
    """The OCR engine could not produce text for one page."""

    def __init__(self, message: str, *, page_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.page_number = page_number


class ReferenceLoadError(LeaseCheckError):
    """The canonical reference text could not be loaded."""


class VisualizationError(LeaseCheckError):
    """The diff view could not be rendered."""
