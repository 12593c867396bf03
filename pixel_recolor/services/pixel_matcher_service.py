from __future__ import annotations
from typing import Optional

from ..models.color import Color
from ..models.match_criterion import MatchAll, MatchColor, MatchCriterion

OPAQUE = 0xFF000000


class PixelMatcherService:
    """
    Decides whether a single packed ARGB pixel should be replaced.
    """

    @staticmethod
    def is_except_color(pixel_argb: int, except_color: Optional[Color]) -> bool:
        # Exact comparison, alpha included.
        return except_color is not None and pixel_argb == except_color.argb

    def matches(
        self,
        pixel_argb: int,
        criterion: MatchCriterion,
        except_color: Optional[Color] = None,
    ) -> bool:
        if self.is_except_color(pixel_argb, except_color):
            return False

        if isinstance(criterion, MatchAll):
            return True
        if isinstance(criterion, MatchColor):
            return (pixel_argb | OPAQUE) == (criterion.color.argb | OPAQUE)
        raise TypeError(f"Unknown match criterion: {criterion!r}")
