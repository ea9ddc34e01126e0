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
"""Header row detection for structured inventory sheets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from nw_inventory.models import HeaderMatch, RowTable

_HEADER_KEYWORDS: dict[str, tuple[str, ...]] = {
    "s_no": ("s.no.", "s.no"),
    "location": ("location",),
    "interface": ("interface",),
    "ip_address": ("ip address",),
    "description": ("description",),
    "status": ("status",),
}


@dataclass(frozen=True)
class HeaderSchema:
    """Keyword synonyms per semantic column plus the detection window."""

    keywords: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(_HEADER_KEYWORDS)
    )
    scan_rows: int = 15
    min_matches: int = 3


DEFAULT_HEADER_SCHEMA = HeaderSchema()


def detect_header(
    table: RowTable, schema: HeaderSchema = DEFAULT_HEADER_SCHEMA
) -> HeaderMatch | None:
    """Find the first row that names enough known columns.

    Cells are compared after lower-casing and trimming, and must equal a
    keyword exactly. Returns ``None`` when no row in the scan window qualifies.
    """

    for row_index, row in enumerate(table.rows[: schema.scan_rows]):
        lowered = [value.lower().strip() for value in row]
        columns: dict[str, int] = {}
        for key, keywords in schema.keywords.items():
            for col_index, value in enumerate(lowered):
                if value in keywords:
                    columns[key] = col_index
                    break
        if len(columns) >= schema.min_matches:
            return HeaderMatch(row_index=row_index, columns=columns)
    return None
