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
"""Tests for normalization utilities."""

from datetime import date

from nw_inventory.normalize import cell, cell_text, is_blank_row, is_dotted_quad, normalize_used_ip


def test_cell_text_renders_spreadsheet_values() -> None:
    assert cell_text(None) == ""
    assert cell_text("  Router ") == "Router"
    assert cell_text(1.0) == "1"
    assert cell_text(2.5) == "2.5"
    assert cell_text(7) == "7"
    assert cell_text(True) == "TRUE"
    assert cell_text(date(2024, 1, 2)) == "2024-01-02"


def test_cell_returns_empty_for_missing_index() -> None:
    row = ("a", "b")

    assert cell(row, 1) == "b"
    assert cell(row, 5) == ""
    assert cell(row, None) == ""
    assert cell((), 0) == ""


def test_is_blank_row() -> None:
    assert is_blank_row(("", "", ""))
    assert is_blank_row(())
    assert not is_blank_row(("", "x"))


def test_is_dotted_quad_is_permissive_on_octets() -> None:
    assert is_dotted_quad("10.0.0.1")
    assert is_dotted_quad("999.999.999.999")
    assert not is_dotted_quad("10.0.0.1/24")
    assert not is_dotted_quad("10.0.0")
    assert not is_dotted_quad("ip 10.0.0.1")
    assert not is_dotted_quad("1234.0.0.1")


def test_normalize_used_ip_strips_prefix_and_trailing_tokens() -> None:
    assert normalize_used_ip("10.0.0.5/24") == "10.0.0.5"
    assert normalize_used_ip("10.0.0.5") == "10.0.0.5"
    assert normalize_used_ip("10.0.0.5 to 10.0.0.9") == "10.0.0.5"
    assert normalize_used_ip("10.0.0.0/30 and 10.0.1.0/30") == "10.0.0.0"
