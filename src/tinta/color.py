"""RGB colors and their CSS / LaTeX serializations.

A Color is three 8-bit channels. CSS output uses ``#rrggbb`` (lowercase);
LaTeX output uses the ``rgb`` model, each channel divided by 255.

Parsing comes in two flavours:

- :meth:`Color.from_hex` is strict and raises :class:`ColorError`
- :func:`parse_color` is lenient and returns None, because "no color"
  is a meaningful theme state (inherit the document default)

Example:
    >>> c = parse_color("#40A070")
    >>> c.to_hex()
    '#40a070'
    >>> parse_color("zzz") is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from tinta.errors import ColorError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB color with 8-bit channels.

    Attributes:
        red: Red channel, 0-255
        green: Green channel, 0-255
        blue: Blue channel, 0-255

    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ColorError(f"{name} channel must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ColorError(f"{name} channel out of range 0-255: {value}")

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rrggbb`` or ``rrggbb`` (any case).

        Raises:
            ColorError: If text is not exactly six hex digits after an
                optional leading ``#``
        """
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6 or not _HEX_DIGITS.issuperset(digits):
            raise ColorError(f"Invalid hex color: {text!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        """CSS form, e.g. ``#007020``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_normalized_rgb(self) -> tuple[float, float, float]:
        """Channels scaled to 0.0-1.0 for LaTeX's ``rgb`` model."""
        return (self.red / 255, self.green / 255, self.blue / 255)

    def to_latex_rgb(self) -> str:
        """Normalized channels with two decimals, comma separated.

        The rounding is part of the output format; ``0x70`` becomes
        ``0.44``, not the exact fraction.
        """
        r, g, b = self.to_normalized_rgb()
        return f"{r:0.2f},{g:0.2f},{b:0.2f}"

    def __str__(self) -> str:
        return self.to_hex()


def parse_color(text: str) -> Color | None:
    """Parse a hex color, returning None instead of raising.

    Args:
        text: ``#rrggbb`` or ``rrggbb``

    Returns:
        The Color, or None if text is not a valid hex color
    """
    if not isinstance(text, str):
        return None
    try:
        return Color.from_hex(text)
    except ColorError:
        return None


def to_hex_color(color: Color) -> str:
    """Function form of :meth:`Color.to_hex`."""
    return color.to_hex()


def to_normalized_rgb(color: Color) -> tuple[float, float, float]:
    """Function form of :meth:`Color.to_normalized_rgb`."""
    return color.to_normalized_rgb()


__all__ = ["Color", "parse_color", "to_hex_color", "to_normalized_rgb"]
