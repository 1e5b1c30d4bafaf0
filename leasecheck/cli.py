# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Command-line entry for verifying a captured lease against its reference.

Either recognized text (``--text``) or photographed pages (``--images``) are
compared with the reference file and the verification is emitted as JSON.
The HTML diff and the Markdown digest are optional side outputs; a failure
to write them is reported but never discards the comparison.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from .config import Settings
from .diff.render import render_markdown_report, render_unified_diff
from .errors import ReferenceLoadError, VisualizationError
from .ocr.mocks import MockRecognizer
from .ocr.tesseract import TesseractRecognizer
from .reference import FileReferenceSource, ReferenceSource
from .utils.log import configure_logger, log_event
from .workflow import LeaseVerification, verify_images, verify_text


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="leasecheck compare",
        description="Compare a photographed lease contract with its reference template",
    )
    parser.add_argument("--reference", required=True, help="Reference lease text file (UTF-8)")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Already-recognized text file to verify")
    source.add_argument(
        "--images",
        nargs="+",
        help="Photographed pages, recognized in the order given",
    )
    parser.add_argument("--out", default="-", help="Output JSON path or '-' for stdout")
    parser.add_argument("--out-html", default=None, help="Write the side-by-side HTML diff here")
    parser.add_argument("--out-markdown", default=None, help="Write a Markdown digest here")
    parser.add_argument("--out-diff", default=None, help="Write a unified (git-style) diff here")
    parser.add_argument("--lang", default=None, help="Tesseract language packs (default: kor+eng)")
    parser.add_argument(
        "--use-mocks",
        action="store_true",
        help="Use the mock recognizer (no Tesseract needed) for smoke tests",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress events")
    return parser.parse_args(list(argv) if argv is not None else None)


def _write_side_outputs(
    args: argparse.Namespace,
    verification: LeaseVerification,
    reference: ReferenceSource,
) -> list[str]:
    problems: list[str] = []
    if args.out_html:
        if verification.diff_html is None:
            problems.append(f"diff view not written: {verification.diff_error or 'reference unavailable'}")
        else:
            try:
                Path(args.out_html).write_text(verification.diff_html, encoding="utf-8")
            except OSError as exc:
                problems.append(f"diff view not written: cannot write '{args.out_html}': {exc}")
    if args.out_diff and verification.reference_error is None:
        try:
            Path(args.out_diff).write_text(
                render_unified_diff(
                    verification.result.cleaned_text,
                    reference.load(),
                    max_chars=None,
                ),
                encoding="utf-8",
            )
        except (OSError, ReferenceLoadError, VisualizationError) as exc:
            problems.append(f"unified diff not written: {exc}")
    if args.out_markdown:
        report = render_markdown_report(verification.result, notes=verification.notes() + problems)
        try:
            Path(args.out_markdown).write_text(report, encoding="utf-8")
        except OSError as exc:
            problems.append(f"markdown report not written: cannot write '{args.out_markdown}': {exc}")
    return problems


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = Settings.from_env()
    logger = configure_logger(
        level="ERROR" if args.quiet else settings.log_level,
        fmt=settings.log_format,
        stream=sys.stderr,
    )
    reference = FileReferenceSource(args.reference)

    if args.text:
        try:
            raw_text = Path(args.text).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise SystemExit(f"leasecheck compare: cannot read --text file '{args.text}': {exc}") from exc
        verification = verify_text(raw_text, reference, settings=settings)
    else:
        try:
            recognizer = (
                MockRecognizer() if args.use_mocks else TesseractRecognizer(lang=args.lang or settings.ocr_lang)
            )
        except RuntimeError as exc:
            raise SystemExit(f"leasecheck compare: {exc}") from exc

        def _progress(done: int, total: int) -> None:
            log_event(logger, "page_recognized", {"done": done, "total": total})

        try:
            verification = verify_images(
                args.images,
                reference,
                recognizer,
                settings=settings,
                on_progress=_progress,
            )
        except ValueError as exc:
            raise SystemExit(f"leasecheck compare: {exc}") from exc

    problems = _write_side_outputs(args, verification, reference)
    for problem in problems:
        log_event(logger, "side_output_failed", {"error": problem}, level="warning")

    payload = json.dumps(verification.to_payload(), ensure_ascii=False, indent=2)
    if args.out == "-":
        print(payload)
    else:
        Path(args.out).write_text(payload, encoding="utf-8")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
