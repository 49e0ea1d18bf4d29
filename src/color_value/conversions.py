"""
conversions.py
==============

Does: Stateless hex <-> RGB helpers, alpha-pair decoding and channel formatting.
Used By: ColorValue formatting, the demo CLI and any caller holding plain numbers.
Returns: Hex strings, RGBObject tuples (or None on mismatch), formatted channel text.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from color_value.types import AlphaDecoding, Number, RGBObject
from color_value.utils.load_config import load_settings
from color_value.utils.log import debug

__all__ = [
    "component_to_hex",
    "rgb_to_hex",
    "hex_to_rgb",
    "decode_alpha_pair",
    "format_channel",
]
__docformat__ = "google"

# Optional '#', three mandatory pairs and an optional alpha pair.
_HEX_RGBA_RE = re.compile(
    r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})?",
    re.IGNORECASE,
)


# =============================================================================
# 1) RGB -> HEX
# =============================================================================

def component_to_hex(c: Number) -> str:
    """Does: Lowercase hex for one channel, left-padded to two digits.

    No clamping: 256 gives "100" and -1 gives "-1". Non-finite floats render
    as "NaN", "Infinity" or "-Infinity".
    """
    if isinstance(c, float) and not math.isfinite(c):
        if math.isnan(c):
            return "NaN"
        return "Infinity" if c > 0 else "-Infinity"
    hx = format(int(c), "x")
    return "0" + hx if len(hx) == 1 else hx


def rgb_to_hex(r: Number, g: Number, b: Number) -> str:
    """Does: Format three channels as '#rrggbb'."""
    return "#" + component_to_hex(r) + component_to_hex(g) + component_to_hex(b)


# =============================================================================
# 2) HEX -> RGB
# =============================================================================

def _decode_float32_bits(bits: int) -> float:
    sign = -1 if (bits >> 31) & 1 else 1
    exp = ((bits >> 23) & 0xFF) - 127
    mantissa = (bits & 0x7FFFFF) + 0x800000  # implicit leading one, always set
    return sign * math.ldexp(mantissa, exp - 23)


def decode_alpha_pair(pair: str, decoding: AlphaDecoding = AlphaDecoding.NORMALIZED) -> float:
    """Does: Turn a two-digit hex alpha pair into a float.

    Args:
        pair: Two hex digits, e.g. "80".
        decoding: NORMALIZED gives value/255. FLOAT32_BITS keeps the legacy
            decoder's output: it never accumulated the pair into its bit
            pattern, so every pair decodes from bits 0 to exactly 2**-127.

    Returns:
        The decoded alpha. May be 0.0; callers decide what a falsy alpha means.
    """
    value = int(pair, 16)
    if decoding is AlphaDecoding.FLOAT32_BITS:
        return _decode_float32_bits(0)
    return value / 255


def hex_to_rgb(
    hex_string: str,
    alpha_decoding: Optional[AlphaDecoding] = None,
) -> Optional[RGBObject]:
    """Does: Parse '#rrggbb' or '#rrggbbaa' (the '#' is optional).

    Args:
        hex_string: Candidate hex color.
        alpha_decoding: Decoder for the optional alpha pair. Defaults to the
            loaded settings.

    Returns:
        RGBObject, or None when the string does not have that shape. Alpha is
        1.0 when the pair is absent or decodes to a falsy value.
    """
    m = _HEX_RGBA_RE.fullmatch(hex_string)
    if m is None:
        debug(f"no hex match for {hex_string!r}", topic="hex")
        return None

    r, g, b = (int(m.group(i), 16) for i in (1, 2, 3))
    a = 0.0
    if m.group(4) is not None:
        decoding = alpha_decoding or load_settings().alpha_decoding
        a = decode_alpha_pair(m.group(4), decoding)
        debug(f"alpha pair {m.group(4)!r} -> {a!r} ({decoding.value})", topic="hex")
    return RGBObject(r, g, b, a or 1.0)


# =============================================================================
# 3) FUNCTIONAL-STRING FORMATTING
# =============================================================================

def format_channel(value: Optional[Number], unset_token: str) -> str:
    """Does: Render a channel for rgb()/rgba() output; whole floats drop '.0'."""
    if value is None:
        return unset_token
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
