"""
どこで: `containers` パッケージ。
何を: 容量倍増の可変長配列と、図形配列の集計 mixin を公開する。
"""

from .array import GrowableArray, SharedArray, ValueArray
from .report import FigureReportMixin

__all__ = ["GrowableArray", "ValueArray", "SharedArray", "FigureReportMixin"]
