# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Unified CLI entry point for LeaseCheck."""
from __future__ import annotations

import runpy
import sys
from textwrap import dedent

from ._version import __version__

_COMMAND_TO_MODULE = {
    "compare": "leasecheck.cli",
    "verify": "leasecheck.cli",
    "serve": "leasecheck.service.cli",
}

_DEFAULT_COMMAND = "compare"


def _print_help() -> None:
    msg = dedent(
        """
        Usage:
          python -m leasecheck [command] [args...]

        Commands:
          compare | verify    Compare recognized text or page photos with the reference (default)
          serve               Run the HTTP API (requires the 'api' extra)
          version             Print the package version
          help                Show this message

        Examples:
          python -m leasecheck compare --reference standard.txt --images p1.jpg p2.jpg
          python -m leasecheck compare --reference standard.txt --text ocr.txt --out-html diff.html
          python -m leasecheck serve --reference standard.txt --port 8000
        """
    ).strip()
    print(msg)


def _run_module(module: str, argv: list[str]) -> None:
    old_argv = sys.argv
    try:
        sys.argv = [module, *argv]
        runpy.run_module(module, run_name="__main__")
    finally:
        sys.argv = old_argv


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    if not argv or argv[0] in {"-h", "--help", "help"}:
        _print_help()
        return
    if argv[0] in {"--version", "version"}:
        print(__version__)
        return
    module = _COMMAND_TO_MODULE.get(argv[0])
    if module is None:
        module = _COMMAND_TO_MODULE[_DEFAULT_COMMAND]
        args = argv
    else:
        args = argv[1:]
    _run_module(module, args)


if __name__ == "__main__":
    main()
