# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

from .render import (
    DEFAULT_PREVIEW_CHARS,
    clip_preview,
    render_html_diff,
    render_markdown_report,
    render_unified_diff,
)

__all__ = [
    "DEFAULT_PREVIEW_CHARS",
    "clip_preview",
    "render_html_diff",
    "render_markdown_report",
    "render_unified_diff",
]
