# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Pytest configuration shared across the suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _allow_pytesseract(monkeypatch):
    # recognizers are faked per test; a developer's opt-out must not leak in
    monkeypatch.delenv("LEASECHECK_ALLOW_PYTESSERACT", raising=False)
