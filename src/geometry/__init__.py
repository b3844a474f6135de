"""
どこで: `geometry` パッケージ。
何を: 値型 `Point` と多角形の純関数（`geometry.polygon`）を公開する。
"""

from . import polygon
from .point import ORIGIN, Point

__all__ = ["Point", "ORIGIN", "polygon"]
