"""
どこで: `figures.regular`
何を: 正多角形（五角形・六角形）に共通の検証述語を持つ抽象基底 `RegularPolygon`。
なぜ: 頂点数だけが異なる図形で同じ条件（等辺・等半径）を共有するため。

Notes
-----
等辺かつ全頂点が重心から等距離、という条件は凸多角形なら正多角形を意味するが、
自己交差する病的な配置まで排除するものではない（この条件を契約とする）。
"""

from __future__ import annotations

from typing import Sequence

from common.errors import Defect
from geometry import polygon
from geometry.point import Point

from .base import BaseFigure


class RegularPolygon(BaseFigure):
    """等辺・等半径を条件とする図形の基底。"""

    __slots__ = ()

    def _find_defect(self, vertices: Sequence[Point]) -> Defect | None:
        eps = polygon.epsilon()
        if polygon.has_duplicate_vertices(vertices):
            return Defect.DUPLICATE_VERTICES
        if polygon.surface(vertices) < eps:
            return Defect.DEGENERATE
        if not polygon.all_approximately_equal(polygon.side_lengths(vertices), eps):
            return Defect.UNEQUAL_SIDES
        if not polygon.all_approximately_equal(polygon.radii(vertices), eps):
            return Defect.UNEQUAL_RADII
        return None


__all__ = ["RegularPolygon"]
