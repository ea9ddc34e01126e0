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
"""Inventory rendering back into a workbook."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from openpyxl import Workbook

from nw_inventory.models import Region

_LOGGER = logging.getLogger(__name__)

EXPORT_HEADERS = ["S.No.", "Location", "Interface", "IP Address", "Description", "Status"]
SHEET_TITLE_LIMIT = 31


def build_export_rows(region: Region) -> list[list[Any]]:
    """Render a region as the flat row layout the importer reads back."""

    rows: list[list[Any]] = [list(EXPORT_HEADERS)]
    for number, location in enumerate(region.locations, start=1):
        rows.append([number, location.name, "Network ID", location.network_id, "", ""])
        for device in location.devices:
            rows.append(["", "", device.type, device.ip, device.description, device.status])
            for sub in device.sub_devices:
                rows.append(["", "", f"  - {sub.name}", sub.ip, "", ""])
        rows.append([])
    return rows


def write_inventory_workbook(path: str | Path, regions: list[Region]) -> None:
    """Write one worksheet per region."""

    workbook = Workbook()
    workbook.remove(workbook.active)
    for region in regions:
        worksheet = workbook.create_sheet(title=region.name[:SHEET_TITLE_LIMIT])
        for row in build_export_rows(region):
            worksheet.append(row)
    if not regions:
        workbook.create_sheet(title="Sheet1")
    workbook.save(Path(path))
    _LOGGER.info("Exported %s regions to %s", len(regions), path)
