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
"""Data models for nw-inventory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

STATUS_USED = "Used"
STATUS_UNUSED = "Unused"


@dataclass
class SubDevice:
    """Hand-authored single-address breakdown of a device range."""

    name: str
    ip: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "ip": self.ip}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SubDevice:
        return cls(name=str(data.get("name") or ""), ip=str(data.get("ip") or ""))


@dataclass
class Device:
    """Interface entry within a location."""

    type: str
    ip: str = ""
    description: str = ""
    status: str = ""
    sub_devices: list[SubDevice] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "ip": self.ip,
            "description": self.description,
            "status": self.status,
            "sub_devices": [sub.to_dict() for sub in self.sub_devices],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Device:
        return cls(
            type=str(data.get("type") or ""),
            ip=str(data.get("ip") or ""),
            description=str(data.get("description") or ""),
            status=str(data.get("status") or ""),
            sub_devices=[SubDevice.from_dict(item) for item in data.get("sub_devices") or []],
        )


@dataclass
class Location:
    """Site or node grouping devices within a region."""

    name: str
    network_id: str = ""
    devices: list[Device] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "network_id": self.network_id,
            "devices": [device.to_dict() for device in self.devices],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Location:
        return cls(
            name=str(data.get("name") or ""),
            network_id=str(data.get("network_id") or ""),
            devices=[Device.from_dict(item) for item in data.get("devices") or []],
        )


@dataclass
class Region:
    """Top-level inventory unit, one per source worksheet."""

    name: str
    locations: list[Location] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "locations": [location.to_dict() for location in self.locations],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Region:
        return cls(
            name=str(data.get("name") or ""),
            locations=[Location.from_dict(item) for item in data.get("locations") or []],
        )


@dataclass(frozen=True)
class RowTable:
    """Worksheet reduced to rows of trimmed string cells."""

    name: str
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0


@dataclass(frozen=True)
class HeaderMatch:
    """Detected header row and its resolved column indexes."""

    row_index: int
    columns: Mapping[str, int]


@dataclass(frozen=True)
class SerialStatus:
    """Availability classification of a candidate address."""

    ip: str
    status: str

    def to_dict(self) -> dict[str, str]:
        return {"ip": self.ip, "status": self.status}
