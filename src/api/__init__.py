"""
どこで: `api` 入口（高レベル公開 API）。
何を: 点・図形・配列・例外・図形レジストリを単一名前空間へ再輸出する。
なぜ: 利用者が入力の読み込み→検証→配列への格納→集計までを 1 つの import で扱えるようにするため。

Usage:
    from api import Rhombus, SharedArray

    figures = SharedArray()
    figures.append(Rhombus().read("0 0 1 1 2 0 1 -1"))
    figures.total_surface()  # 2.0
"""

from common.errors import Defect, FigureError, IndexOutOfRange, InvalidShapeError
from containers import GrowableArray, SharedArray, ValueArray
from figures import (
    BaseFigure,
    FigureKind,
    Hexagon,
    Pentagon,
    Rhombus,
    TokenReader,
    create_figure,
    figure,
    list_figures,
)
from geometry import Point

__all__ = [
    # 値と図形
    "Point",
    "BaseFigure",
    "FigureKind",
    "Rhombus",
    "Pentagon",
    "Hexagon",
    "TokenReader",
    # レジストリ
    "figure",
    "create_figure",
    "list_figures",
    # 配列
    "GrowableArray",
    "ValueArray",
    "SharedArray",
    # 例外
    "Defect",
    "FigureError",
    "InvalidShapeError",
    "IndexOutOfRange",
]

__version__ = "0.1.0"
