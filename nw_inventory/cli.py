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
"""CLI entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from nw_inventory.availability import reconcile_availability
from nw_inventory.export import write_inventory_workbook
from nw_inventory.filters import filter_availability
from nw_inventory.header import DEFAULT_HEADER_SCHEMA, HeaderSchema
from nw_inventory.importer import NoDataExtractedError, import_workbook
from nw_inventory.output import (
    write_availability_csv,
    write_availability_json,
    write_regions_json,
    write_summary,
    write_summary_json,
)
from nw_inventory.search import SEARCH_FIELDS, search_devices, suggest_terms
from nw_inventory.serials import extract_serial_candidates
from nw_inventory.store import load_inventory, save_inventory

_LOGGER = logging.getLogger(__name__)

EXIT_NO_DATA = 2
EXIT_INVALID_INPUT = 3


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""

    parser = argparse.ArgumentParser(description="nw-inventory")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["INFO", "DEBUG", "WARN"],
        help="log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser("import", help="import an inventory workbook")
    import_parser.add_argument("--workbook", required=True, help="path to inventory workbook")
    import_parser.add_argument("--inventory", required=True, help="path to inventory JSON store")
    import_parser.add_argument("--regions-json", help="also write the extracted regions here")
    import_parser.add_argument(
        "--header-scan-rows",
        type=int,
        default=DEFAULT_HEADER_SCHEMA.scan_rows,
        help="rows searched for a header (default: %(default)s)",
    )
    import_parser.add_argument(
        "--header-min-matches",
        type=int,
        default=DEFAULT_HEADER_SCHEMA.min_matches,
        help="known columns a header row must name (default: %(default)s)",
    )

    serials_parser = subparsers.add_parser(
        "check-serials", help="report serial addresses not used in the inventory"
    )
    serials_parser.add_argument("--serials", required=True, help="path to serials workbook")
    serials_parser.add_argument("--inventory", required=True, help="path to inventory JSON store")
    serials_parser.add_argument("--out-dir", required=True, help="output directory")
    serials_parser.add_argument(
        "--output-format",
        default="csv",
        choices=["csv", "json", "both"],
        help="output format (default: csv)",
    )
    serials_parser.add_argument(
        "--filter-regions",
        nargs="+",
        help="only report these regions",
    )
    serials_parser.add_argument(
        "--filter-regions-regex",
        help="only report regions matching this regular expression",
    )

    export_parser = subparsers.add_parser("export", help="export the inventory to a workbook")
    export_parser.add_argument("--inventory", required=True, help="path to inventory JSON store")
    export_parser.add_argument("--out", required=True, help="path of the workbook to write")

    search_parser = subparsers.add_parser("search", help="search the inventory")
    search_parser.add_argument("--inventory", required=True, help="path to inventory JSON store")
    search_parser.add_argument("--term", required=True, help="text to search for")
    search_parser.add_argument("--field", default="global", choices=SEARCH_FIELDS)
    search_parser.add_argument("--region", help="restrict to one region")
    search_parser.add_argument(
        "--suggest",
        action="store_true",
        help="print prefix suggestions instead of matching devices",
    )
    return parser


def configure_logging(level: str) -> None:
    """Configure logging."""

    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    """Run nw-inventory."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    handlers = {
        "import": _run_import,
        "check-serials": _run_check_serials,
        "export": _run_export,
        "search": _run_search,
    }
    try:
        return handlers[args.command](args)
    except NoDataExtractedError as exc:
        _LOGGER.error("Import rejected: %s", exc)
        return EXIT_NO_DATA
    except ValueError as exc:
        _LOGGER.error("Invalid input: %s", exc)
        return EXIT_INVALID_INPUT


def _run_import(args: argparse.Namespace) -> int:
    schema = HeaderSchema(
        keywords=DEFAULT_HEADER_SCHEMA.keywords,
        scan_rows=args.header_scan_rows,
        min_matches=args.header_min_matches,
    )
    regions = import_workbook(args.workbook, schema)
    save_inventory(args.inventory, regions)
    if args.regions_json:
        write_regions_json(args.regions_json, regions)
    return 0


def _run_check_serials(args: argparse.Namespace) -> int:
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    candidates = extract_serial_candidates(args.serials)
    regions = load_inventory(args.inventory)
    report = reconcile_availability(candidates, regions)
    report = filter_availability(report, args.filter_regions, args.filter_regions_regex)
    _LOGGER.info(
        "%s unused addresses across %s regions",
        sum(len(entries) for entries in report.values()),
        len(report),
    )

    if args.output_format in ("csv", "both"):
        write_availability_csv(out_dir / "available_serials.csv", report)
        write_summary(out_dir / "summary.txt", candidates, report)

    if args.output_format in ("json", "both"):
        write_availability_json(out_dir / "available_serials.json", report)
        write_summary_json(out_dir / "summary.json", candidates, report)
    return 0


def _run_export(args: argparse.Namespace) -> int:
    regions = load_inventory(args.inventory)
    write_inventory_workbook(args.out, regions)
    return 0


def _run_search(args: argparse.Namespace) -> int:
    regions = load_inventory(args.inventory)
    if args.suggest:
        payload: object = suggest_terms(regions, args.term, args.field, args.region)
    else:
        payload = [
            {
                "region": hit.region_name,
                "location": hit.location_name,
                "device": hit.device.to_dict(),
            }
            for hit in search_devices(regions, args.term, args.field, args.region)
        ]
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
