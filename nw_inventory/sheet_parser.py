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
"""Location and device extraction strategies for a single worksheet."""

from __future__ import annotations

import logging
import re
from typing import Callable, Sequence

from nw_inventory.header import DEFAULT_HEADER_SCHEMA, HeaderSchema, detect_header
from nw_inventory.models import Device, Location, RowTable
from nw_inventory.normalize import cell, is_blank_row

_LOGGER = logging.getLogger(__name__)

NETWORK_ID_MARKER = "network id"
_SERIAL_NUMBER = re.compile(r"^\d+$")

SheetStrategy = Callable[[RowTable], list[Location]]


def parse_structured_sheet(
    table: RowTable, schema: HeaderSchema = DEFAULT_HEADER_SCHEMA
) -> list[Location]:
    """Parse a sheet laid out under a recognised header row.

    A row with an integer serial number and a location name opens a new
    location; the following rows list its interfaces. Returns an empty list
    when no header is found or no location is ever opened.
    """

    header = detect_header(table, schema)
    if header is None:
        _LOGGER.debug("No header row found in sheet %r", table.name)
        return []

    columns = header.columns
    locations: list[Location] = []
    current: Location | None = None
    for row in table.rows[header.row_index + 1 :]:
        if is_blank_row(row):
            continue

        serial = cell(row, columns.get("s_no"))
        location_name = cell(row, columns.get("location"))
        if serial and _SERIAL_NUMBER.fullmatch(serial) and location_name:
            current = Location(name=location_name)
            locations.append(current)

        if current is None:
            continue

        interface = cell(row, columns.get("interface"))
        if not interface:
            continue

        ip_address = cell(row, columns.get("ip_address"))
        if NETWORK_ID_MARKER in interface.lower():
            if current.network_id:
                _LOGGER.warning(
                    "Location %r in sheet %r has more than one network id; keeping %r",
                    current.name,
                    table.name,
                    ip_address,
                )
            current.network_id = ip_address
            continue

        current.devices.append(
            Device(
                type=interface,
                ip=ip_address,
                description=cell(row, columns.get("description")),
                status=cell(row, columns.get("status")),
            )
        )

    if not locations:
        _LOGGER.debug("Header found in sheet %r but no numbered location rows", table.name)
    return locations


def parse_grouped_sheet(table: RowTable) -> list[Location]:
    """Parse a header-less sheet grouped by lone cells in the first column."""

    locations: list[Location] = []
    current: Location | None = None
    for row in table.rows:
        if is_blank_row(row):
            continue
        if cell(row, 0) and not cell(row, 1) and not cell(row, 2):
            current = Location(name=cell(row, 0))
            locations.append(current)
        elif current is not None and cell(row, 1) and cell(row, 2):
            current.devices.append(_simple_device(row))
    return locations


def parse_single_location_sheet(table: RowTable) -> list[Location]:
    """Treat the whole sheet as one location named after the worksheet."""

    location = Location(name=table.name)
    for row in table.rows:
        if cell(row, 1) and cell(row, 2):
            location.devices.append(_simple_device(row))
    return [location]


def _simple_device(row: Sequence[str]) -> Device:
    """Build a device from the type/ip/description column positions."""

    return Device(type=cell(row, 1), ip=cell(row, 2), description=cell(row, 3))


def build_strategies(schema: HeaderSchema = DEFAULT_HEADER_SCHEMA) -> list[SheetStrategy]:
    """Return the ordered parsing strategies, most structured first."""

    return [
        lambda table: parse_structured_sheet(table, schema),
        parse_grouped_sheet,
        parse_single_location_sheet,
    ]


def parse_sheet(
    table: RowTable, strategies: Sequence[SheetStrategy] | None = None
) -> list[Location]:
    """Run strategies in order and return the first non-empty result."""

    for position, strategy in enumerate(strategies or build_strategies()):
        locations = strategy(table)
        if locations:
            _LOGGER.debug(
                "Sheet %r: strategy %s produced %s locations", table.name, position, len(locations)
            )
            return locations
    return []
