"""
どこで: `common` パッケージ。
何を: geometry/figures/containers が共有する軽量基盤（例外・設定・レジストリなど）。
なぜ: 下位層の共通部品を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .errors import Defect, FigureError, IndexOutOfRange, InvalidShapeError

__all__ = [
    "BaseRegistry",
    "Defect",
    "FigureError",
    "IndexOutOfRange",
    "InvalidShapeError",
]
