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
"""Filtering utilities for availability reports."""

from __future__ import annotations

import re
from typing import Mapping, Sequence, TypeVar

T = TypeVar("T")


def filter_availability(
    report: Mapping[str, T],
    region_filter: Sequence[str] | None = None,
    region_regex: str | None = None,
) -> dict[str, T]:
    """Filter a per-region report by region name.

    Args:
        report: Mapping of region name to its entries
        region_filter: List of exact region names to include
        region_regex: Regular expression pattern for region names

    Returns:
        Filtered mapping, in the input region order
    """

    if not region_filter and not region_regex:
        return dict(report)

    try:
        pattern = re.compile(region_regex) if region_regex else None
    except re.error as exc:
        raise ValueError(f"invalid region regex: {exc}") from exc
    filtered: dict[str, T] = {}
    for region_name, entries in report.items():
        if region_filter and region_name in region_filter:
            filtered[region_name] = entries
            continue
        if pattern and pattern.search(region_name):
            filtered[region_name] = entries
    return filtered
