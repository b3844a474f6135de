"""
どこで: `common` の型定義。
何を: スカラー/座標の軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

Scalar = int | float
ScalarType = type[int] | type[float]
Vec2 = tuple[float, float]


__all__ = ["Scalar", "ScalarType", "Vec2"]
