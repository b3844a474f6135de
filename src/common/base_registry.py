"""
どこで: `common.base_registry`
何を: 名前 → オブジェクトの対応を保持する汎用レジストリ `BaseRegistry[T]`。
なぜ: 図形クラス（`figures.registry`）を "rhombus" / "Rhombus" / "RHOMBUS" のいずれでも同じ
キーで引けるよう、名前の正規化と重複登録の検出を 1 か所にまとめるため。

キーの正規化:
- 前後の空白を除き、`-` は `_` に置き換える。
- 大文字を含む名前はキャメル→スネーク（"RegularPolygon" → "regular_polygon"）。
- 全て大文字の名前は小文字化のみ（"RHOMBUS" → "rhombus"）。
"""

from __future__ import annotations

import re
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_CAMEL_HEAD = re.compile(r"(.)([A-Z][a-z]+)")
_CAMEL_TAIL = re.compile(r"([a-z0-9])([A-Z])")


def normalize_key(name: str) -> str:
    """レジストリキーを正規化して返す。

    Raises
    ------
    TypeError
        `name` が str でない場合。
    ValueError
        空白のみ/空の場合。
    """
    if not isinstance(name, str):
        raise TypeError(f"レジストリキーは str である必要があります: got {type(name).__name__}")
    key = name.strip().replace("-", "_")
    if not key:
        raise ValueError("レジストリキーは空であってはなりません")
    if key.isupper() or not any(c.isupper() for c in key):
        return key.lower()
    key = _CAMEL_HEAD.sub(r"\1_\2", key)
    return _CAMEL_TAIL.sub(r"\1_\2", key).lower()


class BaseRegistry(Generic[T]):
    """正規化した名前で値を引くレジストリ（登録順を保持）。"""

    def __init__(self) -> None:
        self._entries: dict[str, T] = {}

    def register(self, name: str | None = None) -> Callable[[T], T]:
        """値を登録するデコレータ。`name` 省略時は値の `__name__` から推論する。"""

        def decorator(obj: T) -> T:
            key = normalize_key(name if name else getattr(obj, "__name__", ""))
            current = self._entries.get(key)
            if current is not None and current is not obj:
                raise ValueError(f"'{key}' は既に {current!r} として登録されています")
            self._entries[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> T:
        key = normalize_key(name)
        try:
            return self._entries[key]
        except KeyError:
            known = ", ".join(self._entries) or "(なし)"
            raise KeyError(f"'{name}' は登録されていません（登録済み: {known}）") from None

    def list_all(self) -> list[str]:
        return list(self._entries)

    def is_registered(self, name: str) -> bool:
        return normalize_key(name) in self._entries

    def unregister(self, name: str) -> None:
        """登録を解除する（未登録なら何もしない）。"""
        self._entries.pop(normalize_key(name), None)

    @property
    def registry(self) -> dict[str, T]:
        """登録内容のコピー（変更してもレジストリへは反映されない）。"""
        return dict(self._entries)


__all__ = ["BaseRegistry", "normalize_key"]
