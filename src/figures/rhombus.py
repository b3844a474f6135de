from __future__ import annotations

from typing import Sequence

from common.errors import Defect
from geometry import polygon
from geometry.point import Point

from .base import BaseFigure, FigureKind
from .registry import figure


@figure
class Rhombus(BaseFigure):
    """菱形（4 頂点）。

    条件: 重複頂点なし、面積 > eps、4 辺が等しい、対角線 (v0, v2) と (v1, v3) の中点が一致。
    頂点順が周回順であることは前提とし、凸性や対角線の直交は別途検査しない。
    """

    __slots__ = ()

    KIND = FigureKind.RHOMBUS
    TITLE = "Rhombus"

    def _find_defect(self, vertices: Sequence[Point]) -> Defect | None:
        eps = polygon.epsilon()
        if polygon.has_duplicate_vertices(vertices):
            return Defect.DUPLICATE_VERTICES
        if polygon.surface(vertices) < eps:
            return Defect.DEGENERATE

        sides = polygon.side_lengths(vertices)
        if sides[0] < eps:
            return Defect.DEGENERATE
        if not polygon.all_approximately_equal(sides, eps):
            return Defect.UNEQUAL_SIDES

        # 対角線が互いを二等分すること（等辺条件と合わせて菱形とみなす）
        mid_a, mid_b = polygon.diagonal_midpoints(vertices)
        if not (
            polygon.approximately_equal(mid_a[0], mid_b[0], eps)
            and polygon.approximately_equal(mid_a[1], mid_b[1], eps)
        ):
            return Defect.NON_BISECTING_DIAGONALS
        return None


__all__ = ["Rhombus"]
