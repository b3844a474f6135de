"""
図形基底モジュール

概要:
- 頂点数 N 固定の図形の抽象基底 `BaseFigure` と、図形種別の閉じた列挙 `FigureKind` を定義する。
- 読み込み（`read`）→ 検証（`find_defect`）→ 確定、の流れと、面積/重心/等価/複製/移動の共通実装を持つ。

設計意図:
- 頂点は `Point`（不変値）の固定長タプルとして保持し、頂点ごとの間接参照を持たない。
- 派生クラスは `_find_defect(vertices)` で図形固有の条件だけを実装する。
- `read` は「すべて妥当なら確定、そうでなければ例外＋ゼロ頂点へ戻す」の二択で、部分的な状態を残さない。
- `take()`（移動）後の元オブジェクトは頂点を持たない空の状態になり、面積/重心の問い合わせは
  `InvalidShapeError(EMPTY)` になる。

公開 API:
- `BaseFigure.read(source) -> Self`: `str` / テキストストリーム / `TokenReader` から 2N 個の数値を読む。
- `BaseFigure.validate() -> bool` / `find_defect() -> Defect | None`
- `center()` / `surface()` / `float(fig)` / `==` / `copy()` / `take()` / `str(fig)`

使用例:
    rh = Rhombus().read("0 0 1 1 2 0 1 -1")
    rh.surface()   # 2.0
    rh.center()    # Point(x=1.0, y=0.0)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Iterable, Sequence, TextIO, TypeVar

from common.errors import Defect, InvalidShapeError
from common.types import ScalarType
from geometry import polygon
from geometry.point import Point

from .reader import TokenReader, as_reader

logger = logging.getLogger(__name__)

_F = TypeVar("_F", bound="BaseFigure")


class FigureKind(str, Enum):
    """図形種別（閉じた集合）。"""

    RHOMBUS = "rhombus"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"

    @property
    def vertex_count(self) -> int:
        return _VERTEX_COUNTS[self]


_VERTEX_COUNTS = {
    FigureKind.RHOMBUS: 4,
    FigureKind.PENTAGON: 5,
    FigureKind.HEXAGON: 6,
}


class BaseFigure(ABC):
    """頂点数固定の図形のベースクラス。

    Parameters
    ----------
    vertices : Iterable[Point] | None
        初期頂点。省略時はすべて原点（未初期化相当、検証は通らない）。
        指定時は検証を行い、不正なら `InvalidShapeError`。
    scalar : type[int] | type[float], default float
        座標のスカラー型。トークンの変換と重心の丸めに使う。
    """

    __slots__ = ("_vertices", "_scalar")

    KIND: ClassVar[FigureKind]
    TITLE: ClassVar[str]

    def __init__(
        self, vertices: Iterable[Point] | None = None, *, scalar: ScalarType = float
    ) -> None:
        if scalar not in (int, float):
            raise TypeError(f"scalar は int または float である必要があります: got {scalar!r}")
        self._scalar: ScalarType = scalar
        self._vertices: tuple[Point, ...] = self._zeros()
        if vertices is not None:
            self.assign(vertices)

    # ── 種別情報 ─────────────────
    @classmethod
    def vertex_count(cls) -> int:
        return cls.KIND.vertex_count

    @property
    def kind(self) -> FigureKind:
        return self.KIND

    @property
    def title(self) -> str:
        """表示用の種別名。"""
        return self.TITLE

    @property
    def scalar(self) -> ScalarType:
        return self._scalar

    @property
    def vertices(self) -> tuple[Point, ...]:
        """頂点タプル（移動後は空）。"""
        return self._vertices

    @property
    def is_empty(self) -> bool:
        return not self._vertices

    # ── 入力と検証 ───────────────
    def _zeros(self) -> tuple[Point, ...]:
        zero = Point(0, 0).cast(self._scalar)
        return tuple(zero for _ in range(self.vertex_count()))

    def _reset(self) -> None:
        self._vertices = self._zeros()

    def _commit(self, points: tuple[Point, ...]) -> None:
        defect = self._find_defect(points)
        if defect is not None:
            self._reset()
            logger.debug("%s rejected: %s", self.KIND.value, defect.value)
            raise InvalidShapeError(self.KIND.value, defect)
        self._vertices = points
        logger.debug("%s committed: %s", self.KIND.value, self)

    def assign(self: _F, vertices: Iterable[Point]) -> _F:
        """頂点列を検証して確定する。

        整数座標の図形へ小数部を持つ座標を渡した場合は、`read` と同じく
        `InvalidShapeError(MALFORMED_INPUT)` とする（切り捨てはしない）。
        """
        given = tuple(vertices)
        if len(given) != self.vertex_count():
            self._reset()
            raise InvalidShapeError(
                self.KIND.value,
                Defect.MALFORMED_INPUT,
                f"expected {self.vertex_count()} vertices, got {len(given)}",
            )
        if self._scalar is int:
            fractional = [v for v in given if not (float(v.x).is_integer() and float(v.y).is_integer())]
            if fractional:
                self._reset()
                raise InvalidShapeError(
                    self.KIND.value, Defect.MALFORMED_INPUT, f"non-integral vertex {fractional[0]}"
                )
        self._commit(tuple(Point(v.x, v.y).cast(self._scalar) for v in given))
        return self

    def read(self: _F, source: TokenReader | TextIO | str) -> _F:
        """2N 個の空白区切り数値を頂点順に読み込み、検証して確定する。

        Raises
        ------
        InvalidShapeError
            数値が読めない/不足する、または図形の条件を満たさない場合。頂点はゼロへ戻る。
        """
        reader = as_reader(source)
        try:
            numbers = reader.read_numbers(2 * self.vertex_count(), self._scalar, kind=self.KIND.value)
        except InvalidShapeError:
            self._reset()
            raise
        points = tuple(Point(numbers[i], numbers[i + 1]) for i in range(0, len(numbers), 2))
        self._commit(points)
        return self

    def find_defect(self) -> Defect | None:
        """現在の頂点が不正である理由を返す（妥当なら None）。"""
        if self.is_empty:
            return Defect.EMPTY
        return self._find_defect(self._vertices)

    def validate(self) -> bool:
        return self.find_defect() is None

    @abstractmethod
    def _find_defect(self, vertices: Sequence[Point]) -> Defect | None:
        """図形固有の条件を検査する。"""

    # ── 幾何量 ───────────────────
    def _require_vertices(self) -> tuple[Point, ...]:
        if self.is_empty:
            raise InvalidShapeError(self.KIND.value, Defect.EMPTY)
        return self._vertices

    def center(self) -> Point:
        return polygon.centroid(self._require_vertices())

    def surface(self) -> float:
        return polygon.surface(self._require_vertices())

    def __float__(self) -> float:
        return self.surface()

    # ── 等価・複製・移動 ─────────
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseFigure):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return polygon.sequences_equal(self._vertices, other._vertices)

    __hash__ = None  # type: ignore[assignment]

    def copy(self: _F) -> _F:
        """頂点を複製した新しい図形を返す。"""
        clone = type(self).__new__(type(self))
        clone._scalar = self._scalar
        clone._vertices = tuple(self._vertices)
        return clone

    def __copy__(self: _F) -> _F:
        return self.copy()

    def __deepcopy__(self: _F, memo: dict) -> _F:
        return self.copy()

    def take(self: _F) -> _F:
        """頂点の所有を新しい図形へ移し、自身は空にする。"""
        moved = self.copy()
        self._vertices = ()
        return moved

    # ── 表示 ─────────────────────
    def format(self, precision: int | None = None) -> str:
        return " ".join(v.format(precision) for v in self._vertices)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        inner = ", ".join(str(v) for v in self._vertices)
        return f"{type(self).__name__}([{inner}])"


__all__ = ["BaseFigure", "FigureKind"]
