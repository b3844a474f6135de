"""
どこで: `containers.report`
何を: 図形を要素に持つ配列向けの集計（面積一覧・重心一覧・総面積）と表示行の生成。
なぜ: 値保持/共有保持のどちらの配列でも同じ集計を使えるよう、反復だけに依存する mixin に切り出すため。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from common import settings

if TYPE_CHECKING:
    from geometry.point import Point


def _precision(precision: int | None) -> int:
    return settings.get().REPORT_PRECISION if precision is None else precision


class FigureReportMixin:
    """`__iter__` で図形を返すクラス（配列）に集計メソッドを与える。"""

    def surfaces(self) -> list[float]:
        return [float(fig) for fig in self]

    def centers(self) -> list["Point"]:
        return [fig.center() for fig in self]

    def total_surface(self) -> float:
        """面積の単純な累積和（補償加算はしない）。"""
        total = 0.0
        for fig in self:
            total += float(fig)
        return total

    def surface_lines(self, precision: int | None = None) -> list[str]:
        """`"i: <図形> | Area = a.aa"` 形式の行。"""
        p = _precision(precision)
        return [
            f"{i}: {fig.format(p)} | Area = {float(fig):.{p}f}" for i, fig in enumerate(self)
        ]

    def center_lines(self, precision: int | None = None) -> list[str]:
        """`"i: Center = (x, y)"` 形式の行。"""
        p = _precision(precision)
        return [f"{i}: Center = {fig.center().format(p)}" for i, fig in enumerate(self)]


__all__ = ["FigureReportMixin"]
