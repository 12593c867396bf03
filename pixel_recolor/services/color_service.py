from __future__ import annotations
from string import hexdigits
from typing import Optional

from ..exceptions import InvalidColorFormat
from ..models.color import Color
from ..models.match_criterion import MatchAll, MatchColor, MatchCriterion

ALL = "all"
NONE = "none"


class ColorService:
    """
    Turns user-supplied color strings into Color objects.

    Accepted forms (leading `#` optional):
        RRGGBB    → opaque color
        RGB       → raw 12-bit number, opaque (not CSS-expanded: FFF is #000FFF)
        AARRGGBB  → alpha taken from the top byte
    """

    _OPAQUE_LENGTHS = {3, 6}
    _ALPHA_LENGTHS = {8}

    @classmethod
    def decode(cls, color_string: str) -> Color:
        digits = color_string[1:] if color_string.startswith("#") else color_string

        if not digits or any(ch not in hexdigits for ch in digits):
            raise InvalidColorFormat(f"Not a hexadecimal color: {color_string!r}")
        if len(digits) not in cls._OPAQUE_LENGTHS | cls._ALPHA_LENGTHS:
            raise InvalidColorFormat(
                f"Unsupported color length {len(digits)} in {color_string!r} "
                f"(expected 3, 6 or 8 hex digits)"
            )

        value = int(digits, 16)
        if len(digits) in cls._OPAQUE_LENGTHS:
            value |= 0xFF000000
        return Color.from_argb(value)

    @classmethod
    def parse_source(cls, text: str) -> MatchCriterion:
        """`all` matches every pixel, anything else is a color to match."""
        if text.strip().lower() == ALL:
            return MatchAll()
        return MatchColor(cls.decode(text))

    @classmethod
    def parse_except(cls, text: Optional[str]) -> Optional[Color]:
        if text is None or text.strip().lower() in ("", NONE):
            return None
        return cls.decode(text)
