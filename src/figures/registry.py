"""
どこで: `figures` のレジストリ層（クラス専用）。
何を: `@figure` デコレータで図形クラスを登録し、取得/一覧/生成/検査を提供。
なぜ: CLI や設定から図形を名前（"rhombus" など）で解決し、種別ごとの分岐を散在させないため。

概要:
- API は `@figure` / `get_figure` / `list_figures` / `is_figure_registered` / `create_figure`。
- 登録対象は `BaseFigure` の具象サブクラスのみ。
- デコレータは名前省略可（`@figure` / `@figure()`）と明示名指定をサポート。名前省略時は
  クラスの `KIND` の値を使う。
"""

from __future__ import annotations

import inspect
from typing import Any, Iterable, Mapping

from common.base_registry import BaseRegistry
from common.types import ScalarType
from geometry.point import Point

from .base import BaseFigure

_figure_registry: BaseRegistry[type[BaseFigure]] = BaseRegistry()


def figure(arg: Any | None = None, /, name: str | None = None):
    """図形クラスをレジストリに登録するデコレータ。

    使用例:
    - `@figure` / `@figure()`                      → `KIND` の値から推論。
    - `@figure("custom")` / `@figure(name="custom")` → 明示名で登録。

    例外:
    - TypeError: `BaseFigure` の具象サブクラス以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not (inspect.isclass(obj) and issubclass(obj, BaseFigure)) or inspect.isabstract(obj):
            raise TypeError(f"@figure は BaseFigure の具象クラスのみ登録可能です: got {obj!r}")
        if resolved_name is None:
            kind = getattr(obj, "KIND", None)
            resolved_name = kind.value if kind is not None else None
        return _figure_registry.register(resolved_name)(obj)

    # 直付け (@figure)
    if inspect.isclass(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@figure("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_figure(name: str) -> type[BaseFigure]:
    """登録された図形クラスを取得。

    例外:
        KeyError: 図形が登録されていない場合
    """
    return _figure_registry.get(name)


def create_figure(
    name: str, vertices: Iterable[Point] | None = None, *, scalar: ScalarType = float
) -> BaseFigure:
    """名前から図形インスタンスを生成する（`vertices` 指定時は検証込み）。"""
    return get_figure(name)(vertices, scalar=scalar)


def list_figures() -> list[str]:
    """登録されている図形名の一覧（頂点数順）。"""
    registry = _figure_registry.registry
    return sorted(registry, key=lambda key: (registry[key].vertex_count(), key))


def is_figure_registered(name: str) -> bool:
    """図形が登録されているかチェック。"""
    return _figure_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _figure_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """読み取り専用ビューとしてレジストリ辞書を返す。"""
    return _figure_registry.registry


__all__ = [
    "figure",
    "get_figure",
    "create_figure",
    "list_figures",
    "is_figure_registered",
    "unregister",
    "get_registry",
]
