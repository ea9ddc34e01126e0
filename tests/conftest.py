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
"""Shared fixtures."""

from __future__ import annotations

from io import BytesIO
from typing import Any, Callable

import pytest
from openpyxl import Workbook

WorkbookFactory = Callable[[dict[str, list[list[Any]]]], bytes]


@pytest.fixture
def make_workbook() -> WorkbookFactory:
    """Build xlsx bytes from a mapping of sheet title to rows."""

    def _make(sheets: dict[str, list[list[Any]]]) -> bytes:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            worksheet = workbook.create_sheet(title=title)
            for row in rows:
                worksheet.append(row)
        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    return _make
