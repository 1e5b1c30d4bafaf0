# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 LeaseCheck contributors

"""Read-only configuration tables."""

from .lease_templates import (
    APT_ANCHORS,
    APT_TITLE_HINTS,
    RISK_RULE_TABLE,
    STANDARD_ANCHORS,
    default_profiles,
    default_risk_rules,
)

__all__ = [
    "APT_ANCHORS",
    "APT_TITLE_HINTS",
    "RISK_RULE_TABLE",
    "STANDARD_ANCHORS",
    "default_profiles",
    "default_risk_rules",
]
