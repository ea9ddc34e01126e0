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
"""Tests for inventory workbook import."""

import pytest

from nw_inventory.header import HeaderSchema
from nw_inventory.importer import NoDataExtractedError, assemble_regions, import_workbook
from nw_inventory.models import Device, Location, Region, RowTable
from nw_inventory.workbook import WorkbookError

HEADER = ["S.No.", "Location", "Interface", "IP Address", "Description", "Status"]


def test_import_workbook_structured_sheet(make_workbook) -> None:
    data = make_workbook(
        {
            "Sheet1": [
                HEADER,
                [1, "HQ", "Network ID", "10.0.0.0/24", "", ""],
                ["", "", "Router", "10.0.0.1", "Core", "Up"],
            ]
        }
    )

    regions = import_workbook(data)

    assert regions == [
        Region(
            name="Sheet1",
            locations=[
                Location(
                    name="HQ",
                    network_id="10.0.0.0/24",
                    devices=[
                        Device(type="Router", ip="10.0.0.1", description="Core", status="Up")
                    ],
                )
            ],
        )
    ]


def test_import_workbook_mixes_strategies_per_sheet(make_workbook) -> None:
    data = make_workbook(
        {
            " East ": [
                HEADER,
                ["1", "Site A", "Switch", "10.0.0.2", "", ""],
            ],
            "West": [
                ["Branch1"],
                ["", "Switch", "192.168.1.1", "Access"],
            ],
            "Empty": [],
            "Loose": [["", "AP", "172.16.0.5"]],
        }
    )

    regions = import_workbook(data)

    assert [region.name for region in regions] == ["East", "West", "Loose"]
    assert regions[1].locations[0].name == "Branch1"
    assert regions[2].locations == [
        Location(name="Loose", devices=[Device(type="AP", ip="172.16.0.5")])
    ]


def test_import_workbook_is_idempotent(make_workbook) -> None:
    data = make_workbook(
        {
            "North": [HEADER, ["1", "HQ", "Router", "10.0.0.1", "", ""]],
            "South": [["Branch"], ["", "Switch", "10.1.0.1"]],
        }
    )

    assert import_workbook(data) == import_workbook(data)


def test_import_workbook_all_sheets_empty(make_workbook) -> None:
    data = make_workbook({"Sheet1": [], "Sheet2": [[None, None]]})

    with pytest.raises(NoDataExtractedError, match="could not extract"):
        import_workbook(data)


def test_import_workbook_rejects_unreadable_bytes() -> None:
    with pytest.raises(WorkbookError):
        import_workbook(b"PK\x03\x04 truncated")


def test_assemble_regions_honours_header_schema() -> None:
    table = RowTable(
        "Sheet1",
        (
            ("S.No.", "Location", "Interface"),
            ("1", "HQ", "Router"),
        ),
    )

    default_regions = assemble_regions([table])
    strict_regions = assemble_regions([table], HeaderSchema(min_matches=4))

    assert default_regions[0].locations[0].name == "HQ"
    assert strict_regions[0].locations == [
        Location(
            name="Sheet1",
            devices=[
                Device(type="Location", ip="Interface"),
                Device(type="HQ", ip="Router"),
            ],
        ),
    ]
