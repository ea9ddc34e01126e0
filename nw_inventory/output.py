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
"""Output rendering for reports."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Mapping, Sequence

from nw_inventory.models import Region, SerialStatus


def write_availability_csv(path: str | Path, report: Mapping[str, list[SerialStatus]]) -> None:
    """Write the availability report CSV."""

    with Path(path).open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(["region", "ip", "status"])
        for region_name, entries in report.items():
            for entry in entries:
                writer.writerow([region_name, entry.ip, entry.status])


def write_availability_json(path: str | Path, report: Mapping[str, list[SerialStatus]]) -> None:
    """Write the availability report JSON."""

    data: dict[str, list[dict[str, str]]] = {
        region_name: [entry.to_dict() for entry in entries]
        for region_name, entries in report.items()
    }
    _dump_json(path, data)


def write_summary(
    path: str | Path,
    candidates: Mapping[str, Sequence[str]],
    report: Mapping[str, list[SerialStatus]],
) -> None:
    """Write summary report."""

    summary = _summarize(candidates, report)
    with Path(path).open("w", encoding="utf-8") as handle:
        handle.write(f"regions_checked: {summary['regions_checked']}\n")
        handle.write(f"candidate_ips: {summary['candidate_ips']}\n")
        handle.write(f"unused_ips: {summary['unused_ips']}\n")
        handle.write(f"fully_used_regions: {', '.join(summary['fully_used_regions'])}\n")


def write_summary_json(
    path: str | Path,
    candidates: Mapping[str, Sequence[str]],
    report: Mapping[str, list[SerialStatus]],
) -> None:
    """Write summary report JSON."""

    _dump_json(path, _summarize(candidates, report))


def write_regions_json(path: str | Path, regions: list[Region]) -> None:
    """Write the extracted inventory model JSON."""

    _dump_json(path, [region.to_dict() for region in regions])


def _summarize(
    candidates: Mapping[str, Sequence[str]],
    report: Mapping[str, list[SerialStatus]],
) -> dict[str, Any]:
    return {
        "regions_checked": len(report),
        "candidate_ips": sum(len(candidates.get(region_name, ())) for region_name in report),
        "unused_ips": sum(len(entries) for entries in report.values()),
        "fully_used_regions": sorted(
            region_name
            for region_name, entries in report.items()
            if candidates.get(region_name) and not entries
        ),
    }


def _dump_json(path: str | Path, data: Any) -> None:
    with Path(path).open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=False)
        handle.write("\n")
