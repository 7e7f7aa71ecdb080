from __future__ import annotations

import math

from catalog_qc.normalize import ContentRow, cell_text, is_blank_cell, normalize, split_multi


def test_normalize_is_case_and_whitespace_insensitive() -> None:
    assert normalize("  Red  ") == normalize("red") == "red"


def test_normalize_blank_like_values_to_empty_string() -> None:
    for value in (None, "", "   ", float("nan"), math.nan):
        assert normalize(value) == ""
        assert is_blank_cell(value)


def test_normalize_numbers() -> None:
    assert normalize(42) == "42"
    assert normalize(38.0) == "38"
    assert normalize(0) == "0"
    assert normalize(1.5) == "1.5"


def test_cell_text_keeps_case() -> None:
    assert cell_text("  Footwear ") == "Footwear"


def test_split_multi_drops_empty_fragments() -> None:
    assert split_multi(" Red | blue||") == ["red", "blue"]
    assert split_multi(None) == []


def test_content_row_text_uses_first_non_blank_candidate() -> None:
    row = ContentRow({"Template Name": "  ", "Template": "Footwear"})
    assert row.text("Template Name", "Template") == "Footwear"
    assert row.text("Missing") == ""


def test_content_row_falls_back_to_normalized_column_name() -> None:
    row = ContentRow({" color NAME": "Red", "Brand": "Nike"})
    assert row.column_for("Color Name") == " color NAME"
    assert row.raw("Color Name") == "Red"
    assert row.raw("Size Name") is None
    assert row.first_value() == "Red"
    assert len(row) == 2
    assert dict(row) == {" color NAME": "Red", "Brand": "Nike"}
