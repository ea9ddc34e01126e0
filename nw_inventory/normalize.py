# Copyright 2025 nw-inventory contributors
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# This file was created or modified with the assistance of an AI (Large Language Model).
# Review required for correctness, security, and licensing.
"""Normalization utilities."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, Sequence

# Octets are intentionally not range-checked.
DOTTED_QUAD = re.compile(r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$")


def cell_text(value: Any) -> str:
    """Render a raw worksheet value as trimmed display text."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value).strip()


def cell(row: Sequence[str], index: int | None) -> str:
    """Return the cell at index, or an empty string when it is absent."""

    if index is None or index < 0 or index >= len(row):
        return ""
    return row[index]


def is_blank_row(row: Sequence[str]) -> bool:
    """Check whether every cell in a row is empty."""

    return all(value == "" for value in row)


def is_dotted_quad(value: str) -> bool:
    """Check whether a value has the shape of an IPv4 address."""

    return bool(DOTTED_QUAD.fullmatch(value))


def normalize_used_ip(raw_ip: str) -> str:
    """Reduce a device address to its first token without a prefix length.

    Ranges and lists contribute only their first literal token.
    """

    return raw_ip.split(" ")[0].split("/")[0]
