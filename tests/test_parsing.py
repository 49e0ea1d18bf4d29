# tests/test_parsing.py
"""Tests for the color string classifier, tagged parse results and lenient number parsing."""

from __future__ import annotations

import sys

import pytest

from color_value.parsing import (
    Invalid,
    Parsed,
    classify,
    parse_color,
    parse_float_prefix,
    parse_hex_digits,
    parse_int_prefix,
)
from color_value.types import InputFormat


# ---------- classify ----------
@pytest.mark.parametrize(
    "text,expect",
    [
        ("#abc", InputFormat.HEX),
        ("  #abcdef", InputFormat.HEX),
        ("rgb(1, 2, 3)", InputFormat.FUNCTIONAL),
        ("rgba(1, 2, 3, 0.5)", InputFormat.FUNCTIONAL),
        ("rgbwhatever", InputFormat.FUNCTIONAL),
        ("teal", InputFormat.NAMED),
        ("Teal", InputFormat.NAMED),
        ("RGB(1, 2, 3)", InputFormat.UNKNOWN),
        ("", InputFormat.UNKNOWN),
        ("ff0000", InputFormat.UNKNOWN),
    ],
)
def test_classify(text, expect):
    assert classify(text) is expect


# ---------- parse_color ----------
def test_parse_color_hex_is_parsed_without_alpha():
    out = parse_color("#0a0b0c")
    assert out == Parsed(InputFormat.HEX, 10, 11, 12, None)
    assert out.ok is True


def test_parse_color_functional_with_and_without_alpha():
    assert parse_color("rgb(1, 2, 3)") == Parsed(InputFormat.FUNCTIONAL, 1, 2, 3, 1.0)
    assert parse_color("rgba(1,  2,\t3, .75)") == Parsed(InputFormat.FUNCTIONAL, 1, 2, 3, 0.75)


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit before 3.11"
)
def test_parse_color_functional_oversized_channel_is_invalid_not_raised():
    messages: list[str] = []
    out = parse_color("rgb(" + "1" * 5000 + ", 2, 3)", on_warning=messages.append)
    assert isinstance(out, Invalid)
    assert out.format is InputFormat.FUNCTIONAL
    assert messages == [out.reason]


def test_parse_color_functional_rejects_space_before_first_value():
    messages: list[str] = []
    out = parse_color("rgb( 1, 2, 3)", on_warning=messages.append)
    assert isinstance(out, Invalid)
    assert out.format is InputFormat.FUNCTIONAL
    assert out.ok is False
    assert messages == [out.reason]


def test_parse_color_named():
    out = parse_color("white")
    assert out == Parsed(InputFormat.NAMED, 255, 255, 255, None)


def test_parse_color_unknown_reports_reason():
    messages: list[str] = []
    out = parse_color("mauve-ish", on_warning=messages.append)
    assert isinstance(out, Invalid)
    assert out.format is InputFormat.UNKNOWN
    assert out.text == "mauve-ish"
    assert "mauve-ish" in out.reason
    assert len(messages) == 1


def test_parse_color_hex_never_warns():
    messages: list[str] = []
    out = parse_color("#", on_warning=messages.append)
    assert out == Parsed(InputFormat.HEX, None, None, None, None)
    assert messages == []


# ---------- lenient numbers ----------
@pytest.mark.parametrize(
    "text,base,expect",
    [
        ("ff", 16, 255),
        ("f", 16, 15),
        ("fz", 16, 15),
        ("zz", 16, None),
        ("", 16, None),
        ("42px", 10, 42),
        (" -7", 10, -7),
    ],
)
def test_parse_int_prefix(text, base, expect):
    assert parse_int_prefix(text, base) == expect


@pytest.mark.parametrize(
    "text,expect",
    [("0.5", 0.5), (".25", 0.25), ("1", 1.0), ("3x5", 3.0), ("1e-2", 0.01), ("x", None)],
)
def test_parse_float_prefix(text, expect):
    assert parse_float_prefix(text) == expect


def test_parse_hex_digits_reads_fixed_positions():
    assert parse_hex_digits("102030ff") == (16, 32, 48)
    assert parse_hex_digits("10") == (16, None, None)
