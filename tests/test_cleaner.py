# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

from leasecheck.core import clean, collapse_spaced_letters, dedupe_lines


def test_spaced_letters_are_joined():
    assert clean("본 아 파 트 에 대 하 여 본건") == "본아파트에대하여 본건"


def test_short_spaced_run_is_left_alone():
    assert collapse_spaced_letters("가 나 다") == "가 나 다"
    assert clean("가 나 다") == "가 나 다"


def test_spaced_run_inside_a_line():
    assert collapse_spaced_letters("제1조 임 대 차 계 약 체결") == "제1조 임대차계약 체결"


def test_lines_differing_only_in_whitespace_collapse_to_first():
    assert clean("계약 내용\n계약내용\n특약사항") == "계약 내용\n특약사항"


def test_noise_lines_are_dropped():
    assert dedupe_lines(["가", "", "나다", "나다"]) == ["나다"]


def test_paragraph_marks_and_line_endings_become_newlines():
    assert clean("제1조\u00b6제2조\u2029제3조") == "제1조\n제2조\n제3조"
    assert clean("a1\r\nb2\rc3\u2028d4") == "a1\nb2\nc3\nd4"


def test_horizontal_whitespace_is_collapsed_and_lines_trimmed():
    assert clean("  계약 \t\u3000 내용  \n\n\n\n 보증금 ") == "계약 내용\n보증금"


def test_clean_treats_none_as_empty():
    assert clean(None) == ""
    assert clean("") == ""


def test_repeated_page_headers_are_removed_once_joined():
    pages = ["주택임대차표준계약서\n제1조", "주택임대차표준계약서\n제2조"]
    assert clean("\n\n".join(pages)) == "주택임대차표준계약서\n제1조\n제2조"
