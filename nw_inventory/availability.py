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
"""Candidate address vs inventory reconciliation."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from nw_inventory.models import STATUS_UNUSED, STATUS_USED, Region, SerialStatus
from nw_inventory.normalize import normalize_used_ip

AvailabilityReport = dict[str, list[SerialStatus]]


def collect_used_ips(regions: Iterable[Region]) -> set[str]:
    """Collect the normalized address of every device in the inventory.

    The set is global: a candidate counts as used if it appears in any region.
    """

    used: set[str] = set()
    for region in regions:
        for location in region.locations:
            for device in location.devices:
                if device.ip:
                    used.add(normalize_used_ip(device.ip))
    return used


def classify_candidates(candidates: Sequence[str], used_ips: set[str]) -> list[SerialStatus]:
    """Label each candidate as used or unused, keeping candidate order."""

    return [
        SerialStatus(ip=ip, status=STATUS_USED if ip in used_ips else STATUS_UNUSED)
        for ip in candidates
    ]


def reconcile_availability(
    candidates: Mapping[str, Sequence[str]], regions: Iterable[Region]
) -> AvailabilityReport:
    """Report, per region, the candidate addresses not used anywhere in the inventory."""

    used_ips = collect_used_ips(regions)
    report: AvailabilityReport = {}
    for region_name, region_candidates in candidates.items():
        report[region_name] = [
            status
            for status in classify_candidates(region_candidates, used_ips)
            if status.status == STATUS_UNUSED
        ]
    return report
