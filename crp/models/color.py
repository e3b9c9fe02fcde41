from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from crp.models.errors import InvalidColor

# Max per-channel absolute difference (exclusive) for a pixel to match.
COLOR_RANGE = 20

CHANNEL_ORDERS = ("RGB", "BGR")


@dataclass(frozen=True)
class Color:
    """
    Value-object holding an 8-bit RGB triple, always in user-facing
    (R, G, B) order regardless of how a pixel buffer stores its channels.
    """
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidColor(f"Channel {name} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise InvalidColor(f"Channel {name}={value} is outside [0, 255]")

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Parse a color argument.

        Accepts three space-separated integers ("255 0 0"), the same with
        commas ("255,0,0"), or a hex string ("#ff0000").
        """
        if not isinstance(text, str):
            raise InvalidColor(f"Color must be a string, got {text!r}")
        s = text.strip()
        if s.startswith("#"):
            hex_part = s[1:]
            if len(hex_part) != 6:
                raise InvalidColor(f"Hex color must look like #RRGGBB: {text!r}")
            try:
                return cls(*(int(hex_part[i:i + 2], 16) for i in (0, 2, 4)))
            except ValueError as err:
                raise InvalidColor(f"Invalid hex color: {text!r}") from err

        parts = s.replace(",", " ").split()
        if len(parts) != 3:
            raise InvalidColor(f"Expected three channel values, got {text!r}")
        try:
            values = [int(p) for p in parts]
        except ValueError as err:
            raise InvalidColor(f"Channel values must be integers: {text!r}") from err
        return cls(*values)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def channels(self, order: str = "RGB") -> Tuple[int, int, int]:
        """Return the triple laid out in the channel order of a pixel buffer."""
        if order == "RGB":
            return (self.r, self.g, self.b)
        if order == "BGR":
            return (self.b, self.g, self.r)
        raise ValueError(f"Unsupported channel order: {order!r}")


@dataclass(frozen=True)
class ColorMatchCriterion:
    """
    Reference color to search for, color to write in its place and the
    per-channel tolerance shared by all three channels.
    """
    origin: Color
    target: Color
    tolerance: int = field(default=COLOR_RANGE)

    def __post_init__(self):
        if isinstance(self.tolerance, bool) or not isinstance(self.tolerance, int):
            raise ValueError(f"Tolerance must be an int, got {self.tolerance!r}")
        if self.tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {self.tolerance}")

    @classmethod
    def from_strings(cls, origin: str, target: str, tolerance: int = COLOR_RANGE):
        return cls(Color.parse(origin), Color.parse(target), tolerance)
