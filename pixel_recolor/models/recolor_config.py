from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .color import Color
from .match_criterion import MatchCriterion


@dataclass(frozen=True)
class RecolorConfig:
    """
    Everything one recolor pass needs, handed to the transformer explicitly.
    """
    criterion: MatchCriterion       # which pixels to replace
    dest_color: Color               # what they become
    preserve_alpha: bool = False    # keep each pixel's own alpha
    except_color: Optional[Color] = None  # exact ARGB value never replaced
