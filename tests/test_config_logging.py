# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

import io
import json

from leasecheck.config import DEFAULT_APT_TITLE_HINTS, Settings
from leasecheck.resources import default_profiles
from leasecheck.utils import configure_logger, json_ready, log_event
from leasecheck.core import TemplateVariant


def test_settings_defaults_from_empty_environment():
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.shingle_k == 3
    assert settings.standard_threshold == settings.apt_threshold == 4
    assert settings.apt_title_hints == DEFAULT_APT_TITLE_HINTS
    assert settings.diff_preview_chars == 6000
    assert settings.reference_path is None


def test_settings_read_overrides():
    settings = Settings.from_env(
        {
            "LEASECHECK_SHINGLE_K": "4",
            "LEASECHECK_STANDARD_THRESHOLD": "5",
            "LEASECHECK_APT_TITLE_HINTS": "아파트전세계약서, 아파트 임대차 계약서 ,",
            "LEASECHECK_OCR_LANG": "kor",
            "LEASECHECK_LOG_LEVEL": "debug",
            "LEASECHECK_LOG_FORMAT": "TEXT",
            "LEASECHECK_REFERENCE_PATH": " /srv/standard.txt ",
        }
    )
    assert settings.shingle_k == 4
    assert settings.standard_threshold == 5
    assert settings.apt_title_hints == ("아파트전세계약서", "아파트 임대차 계약서")
    assert settings.ocr_lang == "kor"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"
    assert settings.reference_path == "/srv/standard.txt"


def test_settings_ignore_unparsable_values():
    settings = Settings.from_env(
        {
            "LEASECHECK_SHINGLE_K": "0",
            "LEASECHECK_APT_THRESHOLD": "many",
            "LEASECHECK_DIFF_PREVIEW_CHARS": " ",
            "LEASECHECK_LOG_FORMAT": "xml",
            "LEASECHECK_REFERENCE_PATH": "  ",
        }
    )
    assert settings.shingle_k == 1
    assert settings.apt_threshold == 4
    assert settings.diff_preview_chars == 6000
    assert settings.log_format == "json"
    assert settings.reference_path is None


def test_profiles_follow_settings():
    std, apt = default_profiles(Settings(standard_threshold=2, apt_title_hints=("아파트",)))
    assert std.variant == TemplateVariant.STANDARD and std.threshold == 2
    assert apt.title_hints == ("아파트",)


def test_log_event_writes_one_json_line():
    stream = io.StringIO()
    logger = configure_logger("leasecheck.test.json", level="INFO", stream=stream)

    log_event(logger, "verification_completed", {"variant": TemplateVariant.APT, "labels": ("면책/책임제한",)})
    log_event(logger, "hidden", level="debug")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "verification_completed"
    assert record["variant"] == "apt"
    assert record["labels"] == ["면책/책임제한"]
    assert "ts" in record


def test_configure_logger_replaces_its_handler():
    first, second = io.StringIO(), io.StringIO()
    configure_logger("leasecheck.test.swap", stream=first)
    logger = configure_logger("leasecheck.test.swap", fmt="text", stream=second)

    log_event(logger, "page_recognized", {"done": 1, "total": 2})

    assert first.getvalue() == ""
    assert "page_recognized" in second.getvalue()
    assert len(logger.handlers) == 1


def test_json_ready_handles_sets_and_enums():
    assert json_ready({"b": {"z", "a"}, TemplateVariant.STANDARD: 1}) == {
        "b": ["a", "z"],
        "standard": 1,
    }
