from __future__ import annotations

from .base import FigureKind
from .registry import figure
from .regular import RegularPolygon


@figure
class Pentagon(RegularPolygon):
    """正五角形（5 頂点）。"""

    __slots__ = ()

    KIND = FigureKind.PENTAGON
    TITLE = "Pentagon"


__all__ = ["Pentagon"]
