"""
parsing.py.
==========

Does: Classify a color string (hex, functional rgb()/rgba(), CSS name) and parse
      it into a tagged result: Parsed with channel values, or Invalid with a reason.
Returns: Parsed | Invalid; never raises on malformed text.
Used By: ColorValue construction and setters, the demo CLI.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import webcolors

from color_value.types import DiagnosticsSink, InputFormat
from color_value.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = [
    "HEX_PREFIX",
    "FUNCTIONAL_PREFIX",
    "RGB_COLOR_RE",
    "Parsed",
    "Invalid",
    "ParseResult",
    "classify",
    "parse_color",
    "parse_hex_digits",
    "parse_int_prefix",
    "parse_float_prefix",
]

HEX_PREFIX = "#"
FUNCTIONAL_PREFIX = "rgb"

# Three integers and an optional fourth value inside parentheses. Searched, not
# anchored: the rgb/rgba prefix is not checked against the argument count.
RGB_COLOR_RE = re.compile(r"\((\d+),\s*(\d+),\s*(\d+)(,\s*(\d*.\d*))?\)", re.ASCII)

_INT_PREFIX = {
    10: re.compile(r"\s*([+-]?[0-9]+)", re.ASCII),
    16: re.compile(r"\s*([+-]?[0-9a-f]+)", re.ASCII | re.IGNORECASE),
}
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)", re.ASCII)

Channels = Tuple[Optional[int], Optional[int], Optional[int]]


# ── Result types ─────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Parsed:
    """Channel values recovered from a string. Any channel may still be None."""

    format: InputFormat
    red: Optional[int] = None
    green: Optional[int] = None
    blue: Optional[int] = None
    alpha: Optional[float] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """A string that no grammar accepted."""

    format: InputFormat
    reason: str
    text: str = ""

    @property
    def ok(self) -> bool:
        return False


ParseResult = Union[Parsed, Invalid]


# ── Lenient number parsing ───────────────────────────────────────────────────
def parse_int_prefix(text: str, base: int = 10) -> Optional[int]:
    """Does: Parse the leading digits of `text` in `base` ("fz" -> 15 in base 16).

    Returns None when no leading digit is present.
    """
    m = _INT_PREFIX[base].match(text)
    return int(m.group(1), base) if m else None


def parse_float_prefix(text: str) -> Optional[float]:
    """Does: Parse the leading decimal number of `text` ("0.5)" -> 0.5)."""
    m = _FLOAT_PREFIX.match(text)
    return float(m.group(1)) if m else None


def parse_hex_digits(digits: str) -> Channels:
    """Does: Read red/green/blue from positions 0-2, 2-4 and 4-6 of `digits`.

    No length check; short input leaves the trailing channels None.
    """
    return (
        parse_int_prefix(digits[0:2], 16),
        parse_int_prefix(digits[2:4], 16),
        parse_int_prefix(digits[4:6], 16),
    )


# ── Classification ───────────────────────────────────────────────────────────
def _named_rgb(text: str) -> Optional[webcolors.IntegerRGB]:
    try:
        return webcolors.name_to_rgb(text)
    except ValueError:
        return None


def classify(text: str) -> InputFormat:
    """Does: Tag a color string by its leading syntax (after trimming)."""
    s = text.strip()
    if s.startswith(HEX_PREFIX):
        return InputFormat.HEX
    if s.startswith(FUNCTIONAL_PREFIX):
        return InputFormat.FUNCTIONAL
    if s and _named_rgb(s) is not None:
        return InputFormat.NAMED
    return InputFormat.UNKNOWN


# ── Parsing ──────────────────────────────────────────────────────────────────
def _parse_functional(s: str) -> Optional[Parsed]:
    m = RGB_COLOR_RE.search(s)
    if m is None:
        return None
    alpha: Optional[float] = 1.0
    if m.group(5):
        alpha = parse_float_prefix(m.group(5))
    return Parsed(
        InputFormat.FUNCTIONAL,
        int(m.group(1), 10),
        int(m.group(2), 10),
        int(m.group(3), 10),
        alpha,
    )


def parse_color(text: str, on_warning: Optional[DiagnosticsSink] = None) -> ParseResult:
    """Does: Classify and parse one color string.

    Args:
        text: Hex ('#ff0000'), functional ('rgba(1, 2, 3, 0.5)') or CSS name.
        on_warning: Receives a message when the text is rejected. Defaults to
            this module's logger.

    Returns:
        Parsed on success; Invalid with a reason otherwise. Hex input is always
        Parsed, possibly with None channels when digits are missing.
    """
    warn = on_warning or logger.warning
    s = text.strip()
    fmt = classify(s)
    debug(f"{text!r} classified as {fmt.value}", topic="parse")

    if fmt is InputFormat.HEX:
        r, g, b = parse_hex_digits(s[len(HEX_PREFIX):])
        if None in (r, g, b):
            debug(f"partial hex {s!r} -> {(r, g, b)}", topic="parse")
        return Parsed(fmt, r, g, b)

    if fmt is InputFormat.FUNCTIONAL:
        try:
            parsed = _parse_functional(s)
        except ValueError as e:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            reason = f"Invalid color: channel value in {text[:40]!r}... is unreadable ({e})"
            warn(reason)
            return Invalid(fmt, reason, text)
        if parsed is not None:
            return parsed
        reason = f"Invalid color: {text!r} does not match rgb(r, g, b[, a])"
        warn(reason)
        return Invalid(fmt, reason, text)

    if fmt is InputFormat.NAMED:
        rgb = webcolors.name_to_rgb(s)
        return Parsed(fmt, rgb.red, rgb.green, rgb.blue)

    reason = f"Invalid color: unrecognized format {text!r}"
    warn(reason)
    return Invalid(fmt, reason, text)
