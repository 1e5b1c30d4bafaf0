# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Reference-text loading.

The canonical lease text is consumed as-is apart from line-ending
normalization. File sources re-read the file on every ``load()`` so an
edited reference is picked up without restarting.
"""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, Union

from .core.engine import normalize_line_endings
from .errors import ReferenceLoadError

__all__ = ["FileReferenceSource", "ReferenceSource", "StaticReferenceSource"]


class ReferenceSource(Protocol):
    def load(self) -> str:
        ...


class StaticReferenceSource(ReferenceSource):
    def __init__(self, text: str) -> None:
        self.text = text

    def load(self) -> str:
        return normalize_line_endings(self.text)


class FileReferenceSource(ReferenceSource):
    def __init__(self, path: Union[str, Path], encoding: str = "utf-8-sig") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def load(self) -> str:
        try:
            raw = self.path.read_text(encoding=self.encoding)
        except FileNotFoundError as exc:
            raise ReferenceLoadError(f"reference file '{self.path}' does not exist") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ReferenceLoadError(f"cannot read reference file '{self.path}': {exc}") from exc
        return normalize_line_endings(raw)
