"""
どこで: `geometry.point`
何を: 2 次元の値型 `Point`（加減算・スカラー除算・内積/外積・距離・テキスト入出力）。
なぜ: 図形の頂点を不変な値として扱い、所有権の共有や別名参照を気にせず比較/複製できるようにするため。

Notes
-----
- 等価比較は格納値の完全一致（許容誤差なし）。整数座標の点をそのまま比較できる。
- 整数座標の点を除算すると 0 方向へ切り捨てた整数座標になる（C 風のキャスト）。
- ゼロ除算のガードは持たない（`ZeroDivisionError` がそのまま伝播する）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from common.types import Scalar, ScalarType


def _cast(value: float, scalar: ScalarType) -> Scalar:
    if scalar is int:
        return int(value)
    return float(value)


def scalar_of(*values: Scalar) -> ScalarType:
    """値の並びから座標スカラー型を推定する（すべて int なら int、それ以外は float）。"""
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return int
    return float


def format_scalar(value: Scalar, precision: int | None = None) -> str:
    """座標値の文字列表現。

    `precision` 指定時は固定小数点、未指定時は int をそのまま、float を `%g` で表す。
    """
    if precision is not None:
        return f"{float(value):.{precision}f}"
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


@dataclass(frozen=True)
class Point:
    """2 次元の点（不変値）。

    Attributes
    ----------
    x, y : int | float
        座標値。
    """

    x: Scalar = 0
    y: Scalar = 0

    # ── 算術 ─────────────────────
    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __truediv__(self, value: float) -> "Point":
        scalar = scalar_of(self.x, self.y)
        return Point(_cast(self.x / value, scalar), _cast(self.y / value, scalar))

    def distance_to(self, other: "Point") -> float:
        """ユークリッド距離。"""
        return math.hypot(float(self.x) - float(other.x), float(self.y) - float(other.y))

    def dot(self, other: "Point") -> float:
        return float(self.x) * float(other.x) + float(self.y) * float(other.y)

    def cross(self, other: "Point") -> float:
        """2 次元外積（z 成分）。"""
        return float(self.x) * float(other.y) - float(self.y) * float(other.x)

    # ── 変換/入出力 ───────────────
    def as_tuple(self) -> tuple[Scalar, Scalar]:
        return (self.x, self.y)

    def cast(self, scalar: ScalarType) -> "Point":
        return Point(_cast(self.x, scalar), _cast(self.y, scalar))

    def format(self, precision: int | None = None) -> str:
        """`"(x, y)"` 形式の文字列を返す。"""
        return f"({format_scalar(self.x, precision)}, {format_scalar(self.y, precision)})"

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, text: str, scalar: ScalarType = float) -> "Point":
        """空白区切りの 2 トークン `"x y"` から点を生成する。

        Raises
        ------
        ValueError
            トークン数が 2 でない、または数値として解釈できない場合。
        """
        tokens = text.split()
        if len(tokens) != 2:
            raise ValueError(f"点は 2 つの数値で指定してください: {text!r}")
        return cls(scalar(tokens[0]), scalar(tokens[1]))


ORIGIN = Point(0, 0)


__all__ = ["Point", "ORIGIN", "format_scalar", "scalar_of"]
