# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Labelled risk-phrase detection over cleaned contract text."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

__all__ = ["RiskRule", "build_risk_rules", "scan_risks"]


@dataclass(frozen=True)
class RiskRule:
    """A label and the pattern whose presence flags it.

    Matching is case-sensitive and runs on the cleaned (not normalized) text,
    so patterns spell out their own whitespace tolerance with ``\\s*`` and
    bounded gaps such as ``.{0,30}``.
    """

    label: str
    pattern: "re.Pattern[str]"

    @classmethod
    def compile(cls, label: str, regex: str) -> "RiskRule":
        return cls(label=label, pattern=re.compile(regex))

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def build_risk_rules(table: Iterable[Tuple[str, str]]) -> Tuple[RiskRule, ...]:
    """Compile a ``(label, regex)`` table into rules, keeping table order."""

    return tuple(RiskRule.compile(label, regex) for label, regex in table)


def scan_risks(text: Optional[str], rules: Optional[Sequence[RiskRule]]) -> List[str]:
    """Labels whose pattern matches anywhere in ``text``.

    Each label appears once, in rule-table order, however often it matches.
    """

    text = text or ""
    found: List[str] = []
    for rule in rules or ():
        if rule.label in found:
            continue
        if rule.matches(text):
            found.append(rule.label)
    return found
