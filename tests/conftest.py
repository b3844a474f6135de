"""共通フィクスチャ。

- 設定（`common.settings`）を既定値へ戻す
- 正多角形/菱形の入力テキスト生成
"""

from __future__ import annotations

import math
from typing import Callable, Iterator

import pytest

from common import settings

_FIG_ENV = (
    "FIG_EPSILON",
    "FIG_ARRAY_INITIAL_CAPACITY",
    "FIG_REPORT_PRECISION",
    "FIG_LOG_LEVEL",
    "FIG_FORCE_PROMPT",
)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """環境変数と構成ファイルの影響を受けない既定設定でテストする。"""
    for name in _FIG_ENV:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env({})
    yield
    settings.reload_from_env({})


def _regular_polygon_text(
    n: int,
    radius: float,
    start_angle: float = 0.0,
    center: tuple[float, float] = (0.0, 0.0),
) -> str:
    parts = []
    for i in range(n):
        angle = start_angle + 2.0 * math.pi * i / n
        x = center[0] + radius * math.cos(angle)
        y = center[1] + radius * math.sin(angle)
        parts.append(f"{x!r} {y!r}")
    return " ".join(parts)


def _rhombus_text(
    p: float,
    q: float,
    angle: float = 0.0,
    center: tuple[float, float] = (0.0, 0.0),
) -> str:
    c, s = math.cos(angle), math.sin(angle)
    axis_p = (p * c, p * s)
    axis_q = (-q * s, q * c)
    pts = [
        (center[0] + axis_p[0], center[1] + axis_p[1]),
        (center[0] + axis_q[0], center[1] + axis_q[1]),
        (center[0] - axis_p[0], center[1] - axis_p[1]),
        (center[0] - axis_q[0], center[1] - axis_q[1]),
    ]
    return " ".join(f"{x!r} {y!r}" for x, y in pts)


@pytest.fixture()
def regular_polygon_text() -> Callable[..., str]:
    """`(n, radius, start_angle=0, center=(0, 0))` → 頂点テキスト。"""
    return _regular_polygon_text


@pytest.fixture()
def rhombus_text() -> Callable[..., str]:
    """`(p, q, angle=0, center=(0, 0))` → 半対角線 p, q の菱形の頂点テキスト。"""
    return _rhombus_text
