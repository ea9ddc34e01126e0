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
"""Candidate address extraction from serials workbooks."""

from __future__ import annotations

import logging
from typing import Iterable

from nw_inventory.models import RowTable
from nw_inventory.normalize import cell, is_dotted_quad
from nw_inventory.workbook import WorkbookSource, read_workbook

_LOGGER = logging.getLogger(__name__)

SERIAL_IP_MARKER = "serial ip"
FALLBACK_SCAN_COLUMNS = range(1, 15)


def find_serial_ip_column(table: RowTable) -> int | None:
    """Return the index of the first cell mentioning the serial ip marker."""

    for row in table.rows:
        for index, value in enumerate(row):
            if SERIAL_IP_MARKER in value.lower():
                return index
    return None


def extract_table_candidates(table: RowTable) -> list[str]:
    """Collect unique candidate addresses from one worksheet, in sheet order."""

    column = find_serial_ip_column(table)
    if column is None:
        _LOGGER.debug("No serial ip column in sheet %r; scanning columns", table.name)

    candidates: dict[str, None] = {}
    for row in table.rows:
        if column is not None:
            value = cell(row, column)
        else:
            value = _first_dotted_quad(row, table.width)
        if is_dotted_quad(value):
            candidates.setdefault(value, None)
    return list(candidates)


def _first_dotted_quad(row: tuple[str, ...], width: int) -> str:
    """Return the first address-shaped cell in the scanned columns."""

    for index in FALLBACK_SCAN_COLUMNS:
        if index >= width:
            break
        value = cell(row, index)
        if is_dotted_quad(value):
            return value
    return ""


def collect_serial_candidates(tables: Iterable[RowTable]) -> dict[str, list[str]]:
    """Map each trimmed sheet name to its candidate addresses."""

    by_region: dict[str, dict[str, None]] = {}
    for table in tables:
        merged = by_region.setdefault(table.name.strip(), {})
        for ip in extract_table_candidates(table):
            merged.setdefault(ip, None)
    return {region: list(ips) for region, ips in by_region.items()}


def extract_serial_candidates(source: WorkbookSource) -> dict[str, list[str]]:
    """Read a serials workbook and collect its candidate addresses per region."""

    candidates = collect_serial_candidates(read_workbook(source))
    _LOGGER.info(
        "Found %s candidate addresses across %s regions",
        sum(len(ips) for ips in candidates.values()),
        len(candidates),
    )
    return candidates
