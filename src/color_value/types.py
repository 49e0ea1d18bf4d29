# color_value/types.py
"""
types.py.

Does: Define the small value types shared by parsing, conversions and the
      ColorValue class: the hex helper result, the input format tags, the alpha
      decoding choices and the diagnostics sink protocol.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Protocol, Union

Number = Union[int, float]


class RGBObject(NamedTuple):
    """Channels returned by `hex_to_rgb`."""

    r: int
    g: int
    b: int
    a: float


class InputFormat(str, Enum):
    """Textual color forms recognized by `classify`."""

    HEX = "hex"
    FUNCTIONAL = "functional"
    NAMED = "named"
    UNKNOWN = "unknown"


class AlphaDecoding(str, Enum):
    """How `hex_to_rgb` turns the optional fourth hex pair into alpha.

    NORMALIZED divides the 8-bit value by 255. FLOAT32_BITS reproduces the
    legacy single-precision decoder, which read every pair as bits 0 with an
    implicit leading mantissa one and so always returns exactly 2**-127.
    """

    NORMALIZED = "normalized"
    FLOAT32_BITS = "float32_bits"


class DiagnosticsSink(Protocol):
    """Anything callable with a human-readable warning message."""

    def __call__(self, message: str) -> None: ...


__all__ = ["Number", "RGBObject", "InputFormat", "AlphaDecoding", "DiagnosticsSink"]

__docformat__ = "google"
