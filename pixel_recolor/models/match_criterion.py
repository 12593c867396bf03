from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .color import Color


@dataclass(frozen=True)
class MatchAll:
    """Matches every pixel."""


@dataclass(frozen=True)
class MatchColor:
    """Matches pixels whose RGB channels equal `color`'s; alpha is ignored."""
    color: Color


MatchCriterion = Union[MatchAll, MatchColor]
