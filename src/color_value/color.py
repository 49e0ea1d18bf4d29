"""
color.py
========

Does: ColorValue, a mutable color holding four optional channels, built from a
      hex string, an rgb()/rgba() string, a CSS name or explicit numbers, and
      re-emitted as hex, rgb() or rgba() text.
Used By: Callers needing to translate between color string formats.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from color_value.conversions import component_to_hex, format_channel
from color_value.parsing import Invalid, parse_color, parse_hex_digits
from color_value.types import DiagnosticsSink, InputFormat, Number
from color_value.utils.load_config import load_settings

__all__ = ["ColorValue"]
__docformat__ = "google"


def _coalesce_alpha(alpha: Optional[Number]) -> Number:
    # 0 and None both mean "not given"
    return alpha if alpha else 1.0


class ColorValue:
    """A color as red/green/blue/alpha channels, any of which may be unset (None).

    Channels are not range-checked. Construction never raises on malformed
    strings: the channels stay unset and a warning goes to `on_warning`.

    Examples:
        >>> ColorValue("#ff0000").to_rgb_string()
        'rgb(255, 0, 0)'
        >>> ColorValue(10, 20, 30).to_rgba_string()
        'rgba(10, 20, 30, 1)'
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        red: Union[str, Number, None] = None,
        green: Optional[Number] = None,
        blue: Optional[Number] = None,
        alpha: Optional[Number] = None,
        *,
        on_warning: Optional[DiagnosticsSink] = None,
    ) -> None:
        self.red: Optional[Number] = None
        self.green: Optional[Number] = None
        self.blue: Optional[Number] = None
        self.alpha: Optional[Number] = None
        self.input_format: Optional[InputFormat] = None

        if isinstance(red, str):
            self._set_from_string(red, on_warning)
        elif red is None and green is None and blue is None and alpha is None:
            return
        else:
            self.set_from_rgb(red, green, blue, alpha)

    # ── Named constructors ───────────────────────────────────────────────────
    @classmethod
    def from_string(cls, text: str, on_warning: Optional[DiagnosticsSink] = None) -> ColorValue:
        return cls(text, on_warning=on_warning)

    @classmethod
    def from_hex(cls, hex_string: str) -> ColorValue:
        """Build from hex digits, with or without a leading '#'. Alpha stays unset."""
        color = cls()
        color.set_from_hex(hex_string)
        return color

    @classmethod
    def from_rgb(
        cls, red: Number, green: Number, blue: Number, alpha: Optional[Number] = None
    ) -> ColorValue:
        return cls(red, green, blue, alpha)

    # ── Setters ──────────────────────────────────────────────────────────────
    def _set_from_string(self, text: str, on_warning: Optional[DiagnosticsSink]) -> None:
        result = parse_color(text, on_warning=on_warning)
        self.input_format = result.format
        if isinstance(result, Invalid):
            return
        self.red, self.green, self.blue = result.red, result.green, result.blue
        self.alpha = result.alpha

    def set_from_rgb(
        self,
        r: Optional[Number],
        g: Optional[Number],
        b: Optional[Number],
        a: Optional[Number] = 1,
    ) -> None:
        """Overwrite all four channels. A falsy alpha (including 0) becomes 1."""
        self.red = r
        self.green = g
        self.blue = b
        self.alpha = _coalesce_alpha(a)

    def set_from_hex(self, hex_string: str) -> None:
        """Overwrite red/green/blue from hex digits after the first '#'.

        Without a '#' the whole (trimmed) string is read as digits. Alpha is
        left untouched.
        """
        s = hex_string.strip()
        self.red, self.green, self.blue = parse_hex_digits(s[s.find("#") + 1:])

    # ── Formatting ───────────────────────────────────────────────────────────
    def to_hex_string(self) -> str:
        """'#rrggbb'; unset channels render as '00'. Alpha is not included."""
        return "#" + "".join(
            "00" if c is None else component_to_hex(c)
            for c in (self.red, self.green, self.blue)
        )

    def to_rgb_string(self, unset_token: Optional[str] = None) -> str:
        token = unset_token if unset_token is not None else load_settings().unset_token
        r, g, b = (format_channel(c, token) for c in (self.red, self.green, self.blue))
        return f"rgb({r}, {g}, {b})"

    def to_rgba_string(self, unset_token: Optional[str] = None) -> str:
        token = unset_token if unset_token is not None else load_settings().unset_token
        r, g, b, a = (format_channel(c, token) for c in self.as_tuple())
        return f"rgba({r}, {g}, {b}, {a})"

    # ── Introspection ────────────────────────────────────────────────────────
    def as_tuple(self) -> Tuple[Optional[Number], ...]:
        return (self.red, self.green, self.blue, self.alpha)

    def is_complete(self) -> bool:
        """True when red, green and blue are all set."""
        return None not in (self.red, self.green, self.blue)

    def copy(self) -> ColorValue:
        other = ColorValue()
        other.red, other.green, other.blue, other.alpha = self.as_tuple()
        other.input_format = self.input_format
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(red={self.red!r}, green={self.green!r}, "
            f"blue={self.blue!r}, alpha={self.alpha!r})"
        )
