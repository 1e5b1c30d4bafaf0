# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

import io

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient  # noqa: E402
from PIL import Image  # noqa: E402

from leasecheck.api_spec import validate_verification_payload  # noqa: E402
from leasecheck.config import Settings  # noqa: E402
from leasecheck.ocr import MockRecognizer  # noqa: E402
from leasecheck.reference import StaticReferenceSource  # noqa: E402
from leasecheck.resources import APT_ANCHORS, STANDARD_ANCHORS  # noqa: E402
from leasecheck.service.app import create_app  # noqa: E402

REFERENCE = "\n".join(STANDARD_ANCHORS)


def _png(color="white"):
    buf = io.BytesIO()
    Image.new("RGB", (32, 16), color).save(buf, format="PNG")
    return buf.getvalue()


def _client(**kwargs):
    kwargs.setdefault("settings", Settings())
    kwargs.setdefault("reference_source", StaticReferenceSource(REFERENCE))
    return TestClient(create_app(**kwargs))


def test_healthz_and_schemas():
    client = _client()
    assert client.get("/healthz").json() == {"status": "ok"}
    schemas = client.get("/v1/schemas").json()
    assert "compare_request" in schemas


def test_compare_text_against_configured_reference():
    resp = _client().post("/v1/compare", json={"text": REFERENCE + "\n위약금은 전액 배상한다"})

    assert resp.status_code == 200
    payload = resp.json()
    validate_verification_payload(payload)
    assert payload["result"]["variant"] == "standard"
    assert payload["result"]["risk_labels"] == ["과도한 위약금/배상"]
    assert "diff_html" not in payload


def test_compare_with_inline_reference_and_diff():
    resp = _client(reference_source=None).post(
        "/v1/compare",
        json={"text": "\n".join(APT_ANCHORS), "reference": REFERENCE, "include_diff": True},
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["result"]["variant"] == "apt"
    assert payload["result"]["missing_reference_anchors"] == ["임차주택의 표시"]
    assert "<table" in payload["diff_html"]


def test_invalid_compare_payload_returns_400():
    resp = _client().post("/v1/compare", json={})
    assert resp.status_code == 400
    assert "'text'" in resp.json()["detail"]


def test_missing_reference_returns_503():
    resp = _client(reference_source=None).post("/v1/compare", json={"text": "제1조"})
    assert resp.status_code == 503


def test_compare_images_uses_injected_recognizer():
    recognizer = MockRecognizer({1: "\n".join(STANDARD_ANCHORS[:3]), 2: "\n".join(STANDARD_ANCHORS[3:])})
    client = _client(recognizer=recognizer)

    resp = client.post(
        "/v1/compare/images",
        files=[
            ("files", ("page1.png", _png(), "image/png")),
            ("files", ("page2.png", _png("gray"), "image/png")),
        ],
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["result"]["input_count"] == 2
    assert payload["result"]["jaccard"] == 1.0
    assert [page.page_number for page in recognizer.calls] == [1, 2]


def test_compare_images_rejects_non_images():
    client = _client(recognizer=MockRecognizer())
    resp = client.post(
        "/v1/compare/images",
        files=[("files", ("page1.png", b"not an image", "image/png"))],
    )
    assert resp.status_code == 400
