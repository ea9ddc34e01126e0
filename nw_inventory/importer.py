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
"""Inventory workbook import."""

from __future__ import annotations

import logging
from typing import Iterable

from nw_inventory.header import DEFAULT_HEADER_SCHEMA, HeaderSchema
from nw_inventory.models import Region, RowTable
from nw_inventory.sheet_parser import build_strategies, parse_sheet
from nw_inventory.workbook import WorkbookSource, read_workbook

_LOGGER = logging.getLogger(__name__)


class NoDataExtractedError(ValueError):
    """Raised when a workbook yields no regions at all."""


def assemble_regions(
    tables: Iterable[RowTable], schema: HeaderSchema = DEFAULT_HEADER_SCHEMA
) -> list[Region]:
    """Build one region per non-empty worksheet, in workbook order."""

    strategies = build_strategies(schema)
    regions: list[Region] = []
    for table in tables:
        if not table.rows:
            _LOGGER.debug("Skipping empty sheet %r", table.name)
            continue
        locations = parse_sheet(table, strategies)
        if not locations:
            continue
        regions.append(Region(name=table.name.strip(), locations=locations))
    return regions


def import_workbook(
    source: WorkbookSource, schema: HeaderSchema = DEFAULT_HEADER_SCHEMA
) -> list[Region]:
    """Read an inventory workbook and extract its regions.

    Raises:
        WorkbookError: the workbook cannot be read.
        NoDataExtractedError: no worksheet produced a region.
    """

    regions = assemble_regions(read_workbook(source), schema)
    if not regions:
        raise NoDataExtractedError("could not extract any valid data from the workbook")
    _LOGGER.info(
        "Extracted %s regions, %s locations",
        len(regions),
        sum(len(region.locations) for region in regions),
    )
    return regions
