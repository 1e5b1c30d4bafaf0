# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Text recognizer backed by pytesseract.

Defaults to Korean plus English with Tesseract's LSTM engine (``--oem 3``)
and block page segmentation (``--psm 6``). Words are regrouped into lines
using Tesseract's block/paragraph/line numbering so the cleaner downstream
sees the same line structure as the photographed page.
"""
from __future__ import annotations

import os
from pathlib import Path
from statistics import mean
from typing import Dict, List, Tuple

import pytesseract
from PIL import Image, UnidentifiedImageError
from pytesseract import Output

from ..errors import RecognitionError
from .interfaces import TextRecognizer
from .models import PageImage, RecognitionResult


def _pytesseract_allowed() -> bool:
    raw = os.environ.get("LEASECHECK_ALLOW_PYTESSERACT")
    if raw is None:
        return True
    return raw.strip().lower() not in {"0", "false", "no", "off"}


class TesseractRecognizer(TextRecognizer):
    """Run Tesseract on one page image.

    Args:
        lang: Language pack(s) passed to Tesseract, e.g. ``"kor+eng"``.
        oem: OCR Engine Mode; ``3`` selects the default LSTM engine.
        psm: Page segmentation mode; ``6`` assumes a uniform block of text.
        timeout: Seconds before pytesseract aborts a call (0 disables).
        extra_config: Additional flags forwarded to Tesseract.
    """

    def __init__(
        self,
        lang: str = "kor+eng",
        oem: int = 3,
        psm: int = 6,
        timeout: float = 0,
        extra_config: str = "",
    ) -> None:
        if not _pytesseract_allowed():
            raise RuntimeError(
                "pytesseract is disabled by LEASECHECK_ALLOW_PYTESSERACT; set it to 1/true to enable"
            )
        self.lang = lang
        self.timeout = timeout
        base_config = f"--oem {oem} --psm {psm}"
        self.config = f"{base_config} {extra_config}".strip()

    def _open(self, page: PageImage) -> Image.Image:
        image = page.image
        if isinstance(image, Image.Image):
            # uploads are opened lazily; decode now so a truncated file fails on its own page
            try:
                image.load()
            except (OSError, SyntaxError, ValueError) as exc:
                raise RecognitionError(
                    f"cannot decode image for page {page.page_number}: {exc}", page_number=page.page_number
                ) from exc
            return image
        if isinstance(image, (str, Path)):
            try:
                with Image.open(Path(image).as_posix()) as handle:
                    handle.load()
                    return handle.copy()
            except (OSError, UnidentifiedImageError) as exc:
                raise RecognitionError(
                    f"cannot open image {image}: {exc}", page_number=page.page_number
                ) from exc
        if image is None:
            raise RecognitionError("page has no image", page_number=page.page_number)
        return image  # let pytesseract decide (numpy arrays are accepted)

    def recognize(self, page: PageImage) -> RecognitionResult:
        image = self._open(page)
        try:
            data = pytesseract.image_to_data(
                image,
                lang=self.lang,
                config=self.config,
                output_type=Output.DICT,
                timeout=self.timeout,
            )
        except (
            pytesseract.TesseractError,
            pytesseract.TesseractNotFoundError,
            RuntimeError,
            OSError,
            ValueError,
        ) as exc:
            raise RecognitionError(
                f"tesseract failed on page {page.page_number}: {exc}", page_number=page.page_number
            ) from exc

        lines: Dict[Tuple[int, int, int], List[str]] = {}
        confidences: List[float] = []
        for text, conf_str, block, par, line in zip(
            data.get("text", []),
            data.get("conf", []),
            data.get("block_num", []),
            data.get("par_num", []),
            data.get("line_num", []),
        ):
            if not text or not str(text).strip():
                continue
            try:
                conf = float(conf_str)
            except (TypeError, ValueError):
                continue
            if conf < 0:
                continue
            lines.setdefault((int(block), int(par), int(line)), []).append(str(text))
            confidences.append(conf / 100.0)

        text_content = "\n".join(" ".join(words) for _, words in sorted(lines.items()))
        return RecognitionResult(
            page_number=page.page_number,
            text=text_content,
            confidence=min(1.0, mean(confidences)) if confidences else None,
            language=self.lang,
        )
