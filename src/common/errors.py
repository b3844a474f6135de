"""
どこで: `common.errors`
何を: 図形と配列が送出する 2 種類の例外（`InvalidShapeError` / `IndexOutOfRange`）と理由区分。
なぜ: 失敗の種類を呼び出し側が型で判別できるようにし、メッセージ書式を一箇所に揃えるため。
"""

from __future__ import annotations

from enum import Enum


class Defect(str, Enum):
    """頂点集合が図形として不正である理由。"""

    DUPLICATE_VERTICES = "duplicate vertices"
    DEGENERATE = "zero area"
    UNEQUAL_SIDES = "unequal sides"
    UNEQUAL_RADII = "unequal radii"
    NON_BISECTING_DIAGONALS = "non-bisecting diagonals"
    MALFORMED_INPUT = "malformed input"
    EMPTY = "empty figure"


class FigureError(Exception):
    """本パッケージの例外の基底。"""


class InvalidShapeError(FigureError, ValueError):
    """頂点が図形の条件を満たさない（または読み取れない）場合の例外。

    Attributes
    ----------
    kind : str
        図形の種類名（例: ``"rhombus"``）。
    defect : Defect
        不正の理由区分。
    """

    def __init__(self, kind: str, defect: Defect, detail: str | None = None) -> None:
        self.kind = kind
        self.defect = defect
        self.detail = detail
        msg = f"点が {kind} を構成しません: {defect.value}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class IndexOutOfRange(FigureError, IndexError):
    """配列の範囲外アクセス。"""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"インデックスが範囲外です: index={index}, size={size}")


__all__ = ["Defect", "FigureError", "InvalidShapeError", "IndexOutOfRange"]
