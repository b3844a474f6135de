from __future__ import annotations

from .base import FigureKind
from .registry import figure
from .regular import RegularPolygon


@figure
class Hexagon(RegularPolygon):
    """正六角形（6 頂点）。"""

    __slots__ = ()

    KIND = FigureKind.HEXAGON
    TITLE = "Hexagon"


__all__ = ["Hexagon"]
