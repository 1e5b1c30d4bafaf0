# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Rendering helpers for the reference-vs-capture diff and the result digest.

Both texts may be clipped to a bounded prefix before diffing. Clipping only
affects what is drawn; scores are always computed on the full texts.
"""
from __future__ import annotations

import difflib
from typing import Iterable, List, Optional, Sequence

from ..core.models import ComparisonResult
from ..errors import VisualizationError

__all__ = [
    "DEFAULT_PREVIEW_CHARS",
    "clip_preview",
    "render_html_diff",
    "render_markdown_report",
    "render_unified_diff",
]

DEFAULT_PREVIEW_CHARS = 6000


def clip_preview(text: Optional[str], limit: Optional[int] = DEFAULT_PREVIEW_CHARS) -> str:
    text = text or ""
    if limit is None or limit <= 0 or len(text) <= limit:
        return text
    return text[:limit]


def _lines(text: str) -> List[str]:
    return text.replace("\r\n", "\n").split("\n") if text else []


def render_unified_diff(
    actual: Optional[str],
    reference: Optional[str],
    *,
    context_lines: int = 3,
    max_chars: Optional[int] = DEFAULT_PREVIEW_CHARS,
) -> str:
    """Git-style diff from the reference (``-``) to the capture (``+``)."""

    try:
        diff_iter = difflib.unified_diff(
            _lines(clip_preview(reference, max_chars)),
            _lines(clip_preview(actual, max_chars)),
            fromfile="reference",
            tofile="actual",
            lineterm="",
            n=max(0, int(context_lines)),
        )
        return "\n".join(diff_iter)
    except Exception as exc:
        raise VisualizationError(f"unified diff failed: {exc}") from exc


def render_html_diff(
    actual: Optional[str],
    reference: Optional[str],
    *,
    max_chars: Optional[int] = DEFAULT_PREVIEW_CHARS,
    context: bool = True,
    context_lines: int = 3,
    wrap_column: int = 60,
) -> str:
    """Side-by-side HTML table of the reference and the cleaned capture."""

    try:
        differ = difflib.HtmlDiff(wrapcolumn=wrap_column)
        return differ.make_file(
            _lines(clip_preview(reference, max_chars)),
            _lines(clip_preview(actual, max_chars)),
            fromdesc="reference",
            todesc="actual",
            context=context,
            numlines=max(0, int(context_lines)),
            charset="utf-8",
        )
    except Exception as exc:
        raise VisualizationError(f"html diff failed: {exc}") from exc


def _fmt_pct(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.1f}%"


def _bullets(items: Optional[Iterable[str]], empty: str) -> List[str]:
    if items is None:
        return ["- (not computed)"]
    items = list(items)
    if not items:
        return [f"- {empty}"]
    return [f"- {item}" for item in items]


def render_markdown_report(
    result: ComparisonResult,
    *,
    notes: Sequence[str] = (),
) -> str:
    """Human-readable digest of one comparison.

    ``notes`` carries collaborator failures (unreadable pages, missing diff
    view) so a degraded run still reads as one report.
    """

    pct = result.percentages()
    variant = result.variant.value if result.variant is not None else "n/a"
    lines: List[str] = ["# Lease comparison", ""]
    lines.append(f"- Template: **{variant}**")
    if result.anchor_hits:
        hits = ", ".join(f"{v.value}={n}" for v, n in result.anchor_hits.items())
        lines.append(f"- Anchor hits: {hits}")
    lines.append(f"- Pages: {result.input_count} / cleaned characters: {result.cleaned_length}")
    lines.append("")
    lines.append("## Similarity")
    lines.append("")
    lines.append("| score | value |")
    lines.append("| --- | --- |")
    lines.append(f"| capture covered by reference | {_fmt_pct(pct['actual_in_reference'])} |")
    lines.append(f"| reference covered by capture | {_fmt_pct(pct['reference_in_actual'])} |")
    lines.append(f"| jaccard | {_fmt_pct(pct['jaccard'])} |")
    lines.append("")
    lines.append("## Missing anchors (detected template)")
    lines.extend(_bullets(result.missing_detected_anchors, "none"))
    lines.append("")
    lines.append("## Missing anchors (reference template)")
    lines.extend(_bullets(result.missing_reference_anchors, "none"))
    lines.append("")
    lines.append("## Risk clauses")
    lines.extend(_bullets(result.risk_labels, "none found"))
    if result.errors or notes:
        lines.append("")
        lines.append("## Warnings")
        for stage, message in sorted(result.errors.items()):
            lines.append(f"- {stage}: {message}")
        for note in notes:
            lines.append(f"- {note}")
    return "\n".join(lines) + "\n"
