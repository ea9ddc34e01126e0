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
"""Substring search and prefix suggestions over the inventory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from nw_inventory.models import Device, Location, Region

SEARCH_FIELDS = ("global", "location", "ip", "type")
_GLOBAL_SUGGESTIONS_PER_SOURCE = 5


@dataclass(frozen=True)
class SearchHit:
    """Device matched by a search, with its position in the inventory."""

    region_name: str
    location_name: str
    device: Device


def search_devices(
    regions: Iterable[Region],
    term: str,
    field: str = "global",
    region_name: str | None = None,
) -> list[SearchHit]:
    """Find devices whose fields contain the term, ignoring case.

    Args:
        regions: Inventory to search
        term: Substring to look for
        field: One of "location", "ip", "type" or "global"
        region_name: Restrict to one region unless the field is "global"

    Returns:
        Matching devices in inventory order
    """

    needle = term.strip().lower()
    if not needle:
        raise ValueError("search term is required")
    _check_field(field)

    hits: list[SearchHit] = []
    for region, location, device in _walk_devices(regions, region_name, field):
        if field == "location":
            values = [location.name]
        elif field == "ip":
            values = [device.ip]
        elif field == "type":
            values = [device.type]
        else:
            values = [
                region.name,
                location.name,
                device.type,
                device.ip,
                device.description,
                device.status,
            ]
        if any(needle in value.lower() for value in values):
            hits.append(SearchHit(region.name, location.name, device))
    return hits


def suggest_terms(
    regions: Iterable[Region],
    term: str,
    field: str = "global",
    region_name: str | None = None,
    limit: int = 10,
) -> list[str]:
    """Suggest distinct inventory values starting with the term."""

    prefix = term.strip().lower()
    if not prefix:
        return []
    _check_field(field)
    regions = list(regions)

    if field == "global":
        sources = [
            [region.name for region in regions],
            [location.name for region in regions for location in region.locations],
            [device.ip for _, _, device in _walk_devices(regions, None, field)],
            [device.type for _, _, device in _walk_devices(regions, None, field)],
        ]
        merged: list[str] = []
        for values in sources:
            merged.extend(_distinct_prefixed(values, prefix)[:_GLOBAL_SUGGESTIONS_PER_SOURCE])
        return _distinct_prefixed(merged, prefix)[:limit]

    if field == "location":
        values = [
            location.name
            for region in regions
            if region_name is None or region.name == region_name
            for location in region.locations
        ]
    elif field == "ip":
        values = [device.ip for _, _, device in _walk_devices(regions, region_name, field)]
    else:
        values = [device.type for _, _, device in _walk_devices(regions, region_name, field)]
    return _distinct_prefixed(values, prefix)[:limit]


def _walk_devices(
    regions: Iterable[Region], region_name: str | None, field: str
) -> Iterator[tuple[Region, Location, Device]]:
    for region in regions:
        if region_name is not None and field != "global" and region.name != region_name:
            continue
        for location in region.locations:
            for device in location.devices:
                yield region, location, device


def _distinct_prefixed(values: Iterable[str], prefix: str) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        if value and value.lower().startswith(prefix):
            seen.setdefault(value, None)
    return list(seen)


def _check_field(field: str) -> None:
    if field not in SEARCH_FIELDS:
        raise ValueError(f"unknown search field: {field}")
