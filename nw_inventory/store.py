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
"""JSON snapshot storage for the canonical inventory."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from nw_inventory.models import Region

_LOGGER = logging.getLogger(__name__)


def load_inventory(path: str | Path) -> list[Region]:
    """Load the stored inventory; a missing file is an empty inventory."""

    inventory_path = Path(path)
    if not inventory_path.exists():
        _LOGGER.info("No inventory at %s; starting empty", inventory_path)
        return []
    try:
        with inventory_path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{inventory_path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError(f"{inventory_path} must contain a list of regions")
    return [Region.from_dict(item) for item in data]


def save_inventory(path: str | Path, regions: list[Region]) -> None:
    """Replace the stored inventory with the given regions."""

    inventory_path = Path(path)
    inventory_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = inventory_path.with_name(inventory_path.name + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(
                [region.to_dict() for region in regions], handle, indent=2, ensure_ascii=False
            )
            handle.write("\n")
    except (OSError, TypeError, ValueError):
        tmp_path.unlink(missing_ok=True)
        raise
    os.replace(tmp_path, inventory_path)
    _LOGGER.info("Saved %s regions to %s", len(regions), inventory_path)
