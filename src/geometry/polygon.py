"""
どこで: `geometry.polygon`（多角形の純関数群）。
何を: 頂点列に対する重心・面積（shoelace）・重複検出・巡回一致・辺長/半径の計算。
なぜ: 図形クラスから幾何演算を切り離し、頂点数に依存しない純関数としてテストするため。

データモデル:
- 頂点列は `Sequence[Point]`（順序付き・固定長）。計算時のみ `(N, 2) float64` の ndarray に変換する。
- すべて副作用なし。入力の頂点列は変更しない。

既知の制約:
- `approximately_equal` は絶対誤差 `|a - b| < eps`（既定 1e-6）で比較する。スケール相対ではないため、
  座標が非常に大きい/小さい入力では誤判定があり得る。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from common import settings

from .point import Point, scalar_of

DEFAULT_EPSILON = 1e-6


def epsilon() -> float:
    """現在の許容誤差（`FIG_EPSILON` / 構成ファイルで上書き可能）。"""
    return settings.get().EPSILON


def approximately_equal(lhs: float, rhs: float, eps: float | None = None) -> bool:
    """絶対誤差で 2 値を比較する。"""
    tol = epsilon() if eps is None else eps
    return abs(lhs - rhs) < tol


def all_approximately_equal(values: Iterable[float], eps: float | None = None) -> bool:
    """先頭要素と順に比較し、すべて許容誤差内なら True（空は True）。"""
    it = iter(values)
    try:
        first = next(it)
    except StopIteration:
        return True
    return all(approximately_equal(first, v, eps) for v in it)


def as_array(vertices: Sequence[Point]) -> np.ndarray:
    """頂点列を `(N, 2) float64` 配列へ変換する。"""
    if not vertices:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(float(v.x), float(v.y)) for v in vertices], dtype=np.float64)


def centroid(vertices: Sequence[Point]) -> Point:
    """頂点座標の算術平均。

    結果は頂点のスカラー型へ戻す（整数座標なら 0 方向へ切り捨て）。

    Raises
    ------
    ValueError
        頂点列が空の場合。
    """
    if not vertices:
        raise ValueError("空の頂点列には重心がありません")
    cx, cy = as_array(vertices).mean(axis=0)
    scalar = scalar_of(*(c for v in vertices for c in v.as_tuple()))
    return Point(float(cx), float(cy)).cast(scalar)


def surface(vertices: Sequence[Point]) -> float:
    """shoelace 公式による面積 `|Σ (x_i*y_{i+1} - y_i*x_{i+1})| / 2`（向きに依存しない）。"""
    arr = as_array(vertices)
    if arr.shape[0] == 0:
        return 0.0
    x = arr[:, 0]
    y = arr[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(abs(np.sum(x * y_next - y * x_next)) / 2.0)


def has_duplicate_vertices(vertices: Sequence[Point]) -> bool:
    """異なる index に完全一致する点があれば True（O(N^2)、N は高々 6）。"""
    n = len(vertices)
    for i in range(n):
        for j in range(i + 1, n):
            if vertices[i] == vertices[j]:
                return True
    return False


def sequences_equal(lhs: Sequence[Point], rhs: Sequence[Point]) -> bool:
    """`rhs` のいずれかの巡回シフトが `lhs` と座標単位で完全一致すれば True。

    逆順（鏡映）は試さない。同じ多角形でも巻き方向が逆なら False になる。
    """
    n = len(lhs)
    if n != len(rhs):
        return False
    if n == 0:
        return True
    for shift in range(n):
        if all(lhs[i] == rhs[(i + shift) % n] for i in range(n)):
            return True
    return False


def side_lengths(vertices: Sequence[Point]) -> np.ndarray:
    """辺長の配列。i 番目は頂点 i → 頂点 (i+1) mod N。"""
    arr = as_array(vertices)
    return np.linalg.norm(np.roll(arr, -1, axis=0) - arr, axis=1)


def radii(vertices: Sequence[Point]) -> np.ndarray:
    """各頂点から（float の）重心までの距離。"""
    arr = as_array(vertices)
    if arr.shape[0] == 0:
        return np.empty((0,), dtype=np.float64)
    return np.linalg.norm(arr - arr.mean(axis=0), axis=1)


def diagonal_midpoints(vertices: Sequence[Point]) -> tuple[np.ndarray, np.ndarray]:
    """四角形の対角線 (v0, v2) と (v1, v3) の中点を返す。"""
    if len(vertices) != 4:
        raise ValueError(f"対角線の中点は四角形のみ対象です: got {len(vertices)} vertices")
    arr = as_array(vertices)
    return (arr[0] + arr[2]) / 2.0, (arr[1] + arr[3]) / 2.0


__all__ = [
    "DEFAULT_EPSILON",
    "epsilon",
    "approximately_equal",
    "all_approximately_equal",
    "as_array",
    "centroid",
    "surface",
    "has_duplicate_vertices",
    "sequences_equal",
    "side_lengths",
    "radii",
    "diagonal_midpoints",
]
