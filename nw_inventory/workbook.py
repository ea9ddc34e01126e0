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
"""Workbook loading into row tables."""

from __future__ import annotations

import logging
import zipfile
from io import BytesIO
from pathlib import Path
from typing import Any, Iterable, Sequence
from xml.etree.ElementTree import ParseError

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from nw_inventory.models import RowTable
from nw_inventory.normalize import cell_text

_LOGGER = logging.getLogger(__name__)

WorkbookSource = bytes | str | Path


class WorkbookError(ValueError):
    """Raised when workbook bytes cannot be read as a spreadsheet."""


def build_row_table(name: str, values: Iterable[Sequence[Any]]) -> RowTable:
    """Build a padded row table from raw worksheet values.

    Every row is padded to the widest populated row and trailing empty rows are
    dropped, so indexed access never sees ``None``.
    """

    rows = [[cell_text(value) for value in row] for row in values]
    width = 0
    for row in rows:
        populated = [index for index, value in enumerate(row) if value]
        if populated:
            width = max(width, populated[-1] + 1)
    while rows and not any(rows[-1]):
        rows.pop()
    padded = tuple(tuple(row[:width]) + ("",) * (width - len(row[:width])) for row in rows)
    return RowTable(name=name, rows=padded)


def read_workbook(source: WorkbookSource) -> list[RowTable]:
    """Read every worksheet of a workbook, in workbook order."""

    handle = BytesIO(source) if isinstance(source, bytes) else Path(source)
    try:
        workbook = openpyxl.load_workbook(handle, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        raise WorkbookError(f"unreadable workbook: {exc}") from exc

    # Read-only worksheets are parsed lazily, so sheet XML errors surface here.
    try:
        tables = [
            build_row_table(worksheet.title, worksheet.iter_rows(values_only=True))
            for worksheet in workbook.worksheets
        ]
    except (ParseError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise WorkbookError(f"unreadable workbook: {exc}") from exc
    finally:
        workbook.close()

    _LOGGER.debug("Read %s worksheets", len(tables))
    return tables
