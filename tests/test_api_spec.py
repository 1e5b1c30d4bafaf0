# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

import pytest
from jsonschema import ValidationError

from leasecheck.api_spec import (
    get_api_schemas_v0,
    validate_compare_request_payload,
    validate_verification_payload,
)


def test_schema_catalogue_is_a_copy():
    schemas = get_api_schemas_v0()
    assert set(schemas) == {"compare_request", "comparison_result", "verification"}
    schemas["compare_request"]["required"].append("tampered")
    assert "tampered" not in get_api_schemas_v0()["compare_request"]["required"]


def test_compare_request_accepts_minimal_payload():
    validate_compare_request_payload({"text": "제1조"})
    validate_compare_request_payload(
        {"text": "", "reference": "제1조", "input_count": 2, "include_diff": True}
    )


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"text": 3},
        {"text": "제1조", "input_count": -1},
        {"text": "제1조", "unexpected": True},
    ],
)
def test_compare_request_rejects_malformed_payloads(payload):
    with pytest.raises(ValidationError):
        validate_compare_request_payload(payload)


def test_verification_schema_rejects_scores_out_of_range():
    payload = {
        "result": {
            "variant": "standard",
            "anchor_hits": {"standard": 6, "apt": 5},
            "missing_reference_anchors": [],
            "missing_detected_anchors": [],
            "risk_labels": [],
            "containment_actual_in_reference": 1.5,
            "containment_reference_in_actual": 1.0,
            "jaccard": 1.0,
            "cleaned_length": 10,
            "input_count": 1,
            "errors": {},
        },
        "recognition_failures": [],
        "reference_error": None,
        "diff_error": None,
    }
    with pytest.raises(ValidationError):
        validate_verification_payload(payload)

    payload["result"]["containment_actual_in_reference"] = 1.0
    validate_verification_payload(payload)
