"""
どこで: `figures` パッケージ（クラス登録）。
何を: ビルトイン図形を import 副作用で登録し、`figures.registry` から名前で解決できるようにする。
なぜ: 図形種別の集合を一箇所に集約し、CLI/コンテナから同じ入口で扱うため。
"""

from .base import BaseFigure, FigureKind
from .hexagon import Hexagon
from .pentagon import Pentagon
from .reader import TokenReader
from .registry import create_figure, figure, get_figure, is_figure_registered, list_figures
from .regular import RegularPolygon
from .rhombus import Rhombus

__all__ = [
    "BaseFigure",
    "FigureKind",
    "RegularPolygon",
    "Rhombus",
    "Pentagon",
    "Hexagon",
    "TokenReader",
    "figure",
    "get_figure",
    "create_figure",
    "list_figures",
    "is_figure_registered",
]
