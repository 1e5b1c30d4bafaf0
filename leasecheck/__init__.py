# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""LeaseCheck public package surface.

Attributes resolve lazily so ``import leasecheck`` stays cheap and does not
pull Pillow or pytesseract until the OCR side is actually used.
"""

from __future__ import annotations

from importlib import import_module as _import_module
from typing import Any, Dict

from ._version import __version__

__all__ = [
    "ComparisonResult",
    "LeaseVerification",
    "Settings",
    "TemplateVariant",
    "clean",
    "compare_documents",
    "containment",
    "detect",
    "jaccard",
    "normalize",
    "scan_risks",
    "shingle",
    "verify_images",
    "verify_text",
    "__version__",
]

# public attribute -> defining module
_ATTR_TO_SPEC: Dict[str, str] = {
    "ComparisonResult": ".core.models",
    "TemplateVariant": ".core.templates",
    "clean": ".core.cleaner",
    "compare_documents": ".core.engine",
    "containment": ".core.similarity",
    "detect": ".core.templates",
    "jaccard": ".core.similarity",
    "normalize": ".core.normalize",
    "scan_risks": ".core.risks",
    "shingle": ".core.normalize",
    "Settings": ".config",
    "LeaseVerification": ".workflow",
    "verify_images": ".workflow",
    "verify_text": ".workflow",
}


def __getattr__(name: str) -> Any:
    spec = _ATTR_TO_SPEC.get(name)
    if spec is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    value = getattr(_import_module(spec, __name__), name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(__all__ + list(globals().keys())))
