# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

from __future__ import annotations

import argparse
import os
from typing import Sequence


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser("leasecheck serve")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--log-level", default="info")
    parser.add_argument("--reference", default=None, help="Reference lease text file")
    env_workers = os.environ.get("LEASECHECK_API_WORKERS")
    try:
        default_workers = int(env_workers) if env_workers else 1
    except ValueError:
        default_workers = 1
    parser.add_argument("--workers", type=int, default=default_workers)
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args(list(argv) if argv is not None else None)
    args.workers = max(1, int(args.workers))
    if args.reload and args.workers > 1:
        raise SystemExit("--reload cannot be used with --workers > 1")
    if args.reference:
        # workers build their own app, so hand the path over through the environment
        os.environ["LEASECHECK_REFERENCE_PATH"] = args.reference

    try:
        import uvicorn  # type: ignore
    except ImportError as exc:  # pragma: no cover
        raise SystemExit(
            "uvicorn is not installed. Install with `pip install -e '.[api]'`."
        ) from exc

    uvicorn.run(
        "leasecheck.service.app:create_app",
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=args.reload,
        workers=args.workers,
        factory=True,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
