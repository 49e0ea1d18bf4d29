"""
color_value
===========

Does: Root package for the color value object and its hex/RGB helpers.
Returns: Exposes ColorValue, rgb_to_hex/hex_to_rgb, the parse results and the
         settings loader through a stable namespace.
Used by: All imports starting from `color_value.*`.
"""

from .color import ColorValue
from .conversions import decode_alpha_pair, hex_to_rgb, rgb_to_hex
from .parsing import Invalid, Parsed, ParseResult, classify, parse_color
from .types import AlphaDecoding, DiagnosticsSink, InputFormat, RGBObject
from .utils import ColorSettings, load_settings

__all__ = [
    # value object
    "ColorValue",
    # static helpers
    "rgb_to_hex",
    "hex_to_rgb",
    "decode_alpha_pair",
    # parsing
    "classify",
    "parse_color",
    "Parsed",
    "Invalid",
    "ParseResult",
    # types
    "RGBObject",
    "InputFormat",
    "AlphaDecoding",
    "DiagnosticsSink",
    # settings
    "ColorSettings",
    "load_settings",
]
__docformat__ = "google"
