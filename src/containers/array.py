"""
どこで: `containers.array`
何を: 容量倍増で伸びる順序付き配列 `GrowableArray` と、要素の所有方式が異なる 2 つの具象
`ValueArray`（値を複製して保持）/ `SharedArray`（ハンドルを共有して保持）。
なぜ: 所有方式を型で分け、1 つの型の中で要素種別に応じた分岐をしないため。

データモデル（不変条件）:
- `0 <= size <= capacity`、`len(slots) == capacity`。
- 容量は初期値（既定 4、`FIG_ARRAY_INITIAL_CAPACITY`）から、満杯時の追加でのみ 2 倍になる。縮小はしない。
- 削除は後続要素を 1 つずつ左へ詰め、順序を保つ。
- 範囲外の添字（負数を含む）は `IndexOutOfRange`。

直感図（capacity=4, size=3 で remove_at(0)）:

    slots: [A, B, C, _]  →  [B, C, _, _]   size 3 → 2, capacity 4 のまま
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic, Iterable, Iterator, TypeVar

from common import settings
from common.errors import IndexOutOfRange
from figures.base import BaseFigure

from .report import FigureReportMixin

logger = logging.getLogger(__name__)

E = TypeVar("E")
F = TypeVar("F", bound=BaseFigure)


class GrowableArray(Generic[E]):
    """容量倍増の可変長配列。

    Parameters
    ----------
    items : Iterable[E]
        初期要素（`append` と同じ規則で格納）。
    initial_capacity : int | None
        初期容量。省略時は設定値 `ARRAY_INITIAL_CAPACITY`。
    """

    def __init__(self, items: Iterable[E] = (), *, initial_capacity: int | None = None) -> None:
        capacity = initial_capacity
        if capacity is None:
            capacity = settings.get().ARRAY_INITIAL_CAPACITY
        if capacity < 1:
            raise ValueError(f"initial_capacity は 1 以上である必要があります: got {capacity}")
        self._size = 0
        self._capacity = capacity
        self._slots: list[Any] = [None] * capacity
        for item in items:
            self.append(item)

    # ── 容量管理 ─────────────────
    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def _ensure_capacity(self) -> None:
        if self._size < self._capacity:
            return
        self._capacity *= 2
        grown: list[Any] = [None] * self._capacity
        grown[: self._size] = self._slots[: self._size]
        self._slots = grown
        logger.debug("array grown: size=%d capacity=%d", self._size, self._capacity)

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError(f"添字は int である必要があります: got {type(index).__name__}")
        if index < 0 or index >= self._size:
            raise IndexOutOfRange(index, self._size)
        return index

    # ── 要素の出し入れ ───────────
    def _store(self, value: E) -> E:
        """格納する実体を返す（所有方式ごとに上書き）。"""
        return value

    def append(self, value: E) -> None:
        self._ensure_capacity()
        self._slots[self._size] = self._store(value)
        self._size += 1

    def remove_at(self, index: int) -> None:
        """`index` の要素を取り除き、後続を左へ詰める。"""
        self._check_index(index)
        for i in range(index, self._size - 1):
            self._slots[i] = self._slots[i + 1]
        self._size -= 1
        self._slots[self._size] = None
        logger.debug("array remove_at(%d): size=%d", index, self._size)

    def __getitem__(self, index: int) -> E:
        return self._slots[self._check_index(index)]

    def __setitem__(self, index: int, value: E) -> None:
        self._slots[self._check_index(index)] = self._store(value)

    def __delitem__(self, index: int) -> None:
        self.remove_at(index)

    def __iter__(self) -> Iterator[E]:
        for i in range(self._size):
            yield self._slots[i]

    def lines(self) -> list[str]:
        """`"[i] <要素>"` 形式の行。"""
        return [f"[{i}] {item}" for i, item in enumerate(self)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, capacity={self._capacity})"


class ValueArray(FigureReportMixin, GrowableArray[F]):
    """値として図形を保持する配列（追加時に複製し、スロットが排他的に所有する）。

    `append(value, move=True)` は複製せずに中身を引き取り、元の図形は空になる。
    """

    def _store(self, value: F) -> F:
        return copy.copy(value)

    def append(self, value: F, *, move: bool = False) -> None:
        if not move:
            super().append(value)
            return
        self._ensure_capacity()
        self._slots[self._size] = value.take()
        self._size += 1


class SharedArray(FigureReportMixin, GrowableArray[F]):
    """図形ハンドルを共有して保持する配列。

    格納するのは参照そのもので、呼び出し側も同じ図形を使い続けられる（寿命は最後の保持者まで）。
    """


__all__ = ["GrowableArray", "ValueArray", "SharedArray"]
