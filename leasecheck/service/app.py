# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""FastAPI application exposing lease verification over HTTP.

Callers may inject a reference source and a recognizer for tests or to wrap
their own OCR engine; by default the reference comes from
``LEASECHECK_REFERENCE_PATH`` and pages are recognized with Tesseract.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from jsonschema import ValidationError
from PIL import UnidentifiedImageError

from .._version import __version__
from ..api_spec import get_api_schemas_v0, validate_compare_request_payload
from ..config import Settings
from ..ocr.interfaces import TextRecognizer
from ..reference import FileReferenceSource, ReferenceSource, StaticReferenceSource
from ..utils.log import configure_logger, log_event
from ..workflow import LeaseVerification, verify_images, verify_text

__all__ = ["create_app"]


def _response(verification: LeaseVerification, include_diff: bool) -> Dict[str, Any]:
    payload = verification.to_payload()
    if include_diff:
        payload["diff_html"] = verification.diff_html
    return payload


def create_app(
    *,
    settings: Optional[Settings] = None,
    reference_source: Optional[ReferenceSource] = None,
    recognizer: Optional[TextRecognizer] = None,
) -> FastAPI:
    """Return a FastAPI instance exposing ``/v1/compare`` and ``/v1/compare/images``."""

    settings = settings or Settings.from_env()
    if reference_source is None and settings.reference_path:
        reference_source = FileReferenceSource(settings.reference_path)
    logger = configure_logger(level=settings.log_level, fmt=settings.log_format)
    state: Dict[str, Optional[TextRecognizer]] = {"recognizer": recognizer}

    def _recognizer() -> TextRecognizer:
        if state["recognizer"] is None:
            from ..ocr.tesseract import TesseractRecognizer

            try:
                state["recognizer"] = TesseractRecognizer(lang=settings.ocr_lang)
            except RuntimeError as exc:
                raise HTTPException(status_code=503, detail=str(exc)) from exc
        return state["recognizer"]  # type: ignore[return-value]

    def _reference(inline: Optional[str]) -> ReferenceSource:
        if inline:
            return StaticReferenceSource(inline)
        if reference_source is None:
            raise HTTPException(
                status_code=503,
                detail="no reference text: pass 'reference' or set LEASECHECK_REFERENCE_PATH",
            )
        return reference_source

    app = FastAPI(title="LeaseCheck API", version=__version__)

    @app.get("/healthz")
    def healthcheck() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/v1/schemas")
    def schemas() -> Dict[str, Any]:
        return get_api_schemas_v0()

    @app.post("/v1/compare")
    def compare(payload: Dict[str, Any]):
        try:
            validate_compare_request_payload(payload)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=exc.message) from exc
        verification = verify_text(
            payload["text"],
            _reference(payload.get("reference")),
            settings=settings,
            input_count=payload.get("input_count", 1),
            render_diff=bool(payload.get("include_diff", False)),
        )
        return _response(verification, bool(payload.get("include_diff", False)))

    @app.post("/v1/compare/images")
    async def compare_images(
        files: List[UploadFile] = File(...),
        reference: Optional[str] = Form(None),
        include_diff: bool = Form(False),
    ):
        source = _reference(reference)
        blobs = [await upload.read() for upload in files]
        log_event(logger, "images_received", {"count": len(blobs)})
        try:
            verification = verify_images(
                blobs,
                source,
                _recognizer(),
                settings=settings,
                render_diff=include_diff,
            )
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise HTTPException(status_code=400, detail=f"unreadable image upload: {exc}") from exc
        return _response(verification, include_diff)

    return app
