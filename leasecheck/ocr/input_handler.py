# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Turn photographed pages into numbered :class:`PageImage` inputs."""
from __future__ import annotations

import io
from pathlib import Path
from typing import List, Sequence

from PIL import Image

from .interfaces import ImageSource, InputHandler
from .models import PageImage

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp"}


class ImageInputHandler(InputHandler):
    """Number pages in the order given.

    * Pillow images are passed through.
    * ``bytes`` are decoded with Pillow (HTTP uploads).
    * Paths are kept as paths; the recognizer opens them lazily so one
      unreadable photo becomes a per-page recognition failure instead of
      aborting the batch.
    """

    def __init__(self, allowed_suffixes: Sequence[str] = tuple(sorted(IMAGE_SUFFIXES))) -> None:
        self.allowed_suffixes = {suffix.lower() for suffix in allowed_suffixes}

    def load(self, sources: Sequence[ImageSource], document_id: str = "lease") -> List[PageImage]:
        pages: List[PageImage] = []
        for idx, source in enumerate(sources, start=1):
            label = None
            image: object = source
            if isinstance(source, (bytes, bytearray)):
                image = Image.open(io.BytesIO(bytes(source)))
            elif isinstance(source, (str, Path)):
                path = Path(source)
                if path.suffix.lower() not in self.allowed_suffixes:
                    raise ValueError(f"unsupported image type: {path.name}")
                label = path.as_posix()
                image = label
            pages.append(PageImage(document_id=document_id, page_number=idx, image=image, source=label))
        return pages
