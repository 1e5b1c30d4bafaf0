# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""JSON contracts for the comparison surface.

The schemas follow Draft 2020-12 and keep ``additionalProperties`` disabled
so the HTTP service, the CLI output and tests share one canonical v0 shape.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

from jsonschema import Draft202012Validator

__all__ = [
    "COMPARE_REQUEST_SCHEMA_V0",
    "COMPARISON_RESULT_SCHEMA_V0",
    "VERIFICATION_SCHEMA_V0",
    "get_api_schemas_v0",
    "validate_compare_request_payload",
    "validate_verification_payload",
]

_VARIANTS = ["standard", "apt", "unknown"]

_SCORE = {"type": ["number", "null"], "minimum": 0, "maximum": 1}
_LABELS = {"type": ["array", "null"], "items": {"type": "string"}}

COMPARE_REQUEST_SCHEMA_V0: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "CompareRequest",
    "type": "object",
    "additionalProperties": False,
    "required": ["text"],
    "properties": {
        "text": {
            "type": "string",
            "description": "Raw recognized text of the captured lease (all pages joined)",
        },
        "reference": {
            "type": "string",
            "description": "Reference lease text; defaults to the service's configured reference",
        },
        "input_count": {
            "type": "integer",
            "minimum": 0,
            "default": 1,
            "description": "Number of photographed pages the text came from",
        },
        "include_diff": {
            "type": "boolean",
            "default": False,
            "description": "Return the side-by-side HTML diff in the response",
        },
    },
}

COMPARISON_RESULT_SCHEMA_V0: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "ComparisonResult",
    "type": "object",
    "additionalProperties": False,
    "required": [
        "variant",
        "anchor_hits",
        "missing_reference_anchors",
        "missing_detected_anchors",
        "risk_labels",
        "containment_actual_in_reference",
        "containment_reference_in_actual",
        "jaccard",
        "cleaned_length",
        "input_count",
        "errors",
    ],
    "properties": {
        "variant": {"enum": _VARIANTS + [None]},
        "anchor_hits": {
            "type": "object",
            "propertyNames": {"enum": _VARIANTS},
            "additionalProperties": {"type": "integer", "minimum": 0},
        },
        "missing_reference_anchors": _LABELS,
        "missing_detected_anchors": _LABELS,
        "risk_labels": _LABELS,
        "containment_actual_in_reference": _SCORE,
        "containment_reference_in_actual": _SCORE,
        "jaccard": _SCORE,
        "cleaned_length": {"type": "integer", "minimum": 0},
        "input_count": {"type": "integer", "minimum": 0},
        "errors": {"type": "object", "additionalProperties": {"type": "string"}},
    },
}

VERIFICATION_SCHEMA_V0: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "LeaseVerification",
    "type": "object",
    "additionalProperties": False,
    "required": ["result", "recognition_failures", "reference_error", "diff_error"],
    "properties": {
        "result": {k: v for k, v in COMPARISON_RESULT_SCHEMA_V0.items() if k != "$schema"},
        "recognition_failures": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "required": ["page_number", "message"],
                "properties": {
                    "page_number": {"type": "integer", "minimum": 1},
                    "source": {"type": ["string", "null"]},
                    "message": {"type": "string"},
                },
            },
        },
        "reference_error": {"type": ["string", "null"]},
        "diff_error": {"type": ["string", "null"]},
        "diff_html": {"type": ["string", "null"]},
        "percentages": {
            "type": "object",
            "additionalProperties": {"type": ["number", "null"]},
        },
        "degraded": {"type": "boolean"},
    },
}


def get_api_schemas_v0() -> Dict[str, Dict[str, Any]]:
    return {
        "compare_request": deepcopy(COMPARE_REQUEST_SCHEMA_V0),
        "comparison_result": deepcopy(COMPARISON_RESULT_SCHEMA_V0),
        "verification": deepcopy(VERIFICATION_SCHEMA_V0),
    }


def validate_compare_request_payload(payload: Dict[str, Any]) -> None:
    """Raise :class:`jsonschema.ValidationError` when ``payload`` is malformed."""

    Draft202012Validator(COMPARE_REQUEST_SCHEMA_V0).validate(payload)


def validate_verification_payload(payload: Dict[str, Any]) -> None:
    Draft202012Validator(VERIFICATION_SCHEMA_V0).validate(payload)
