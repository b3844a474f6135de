"""
どこで: `common.settings`
何を: 図形ライブラリの設定（許容誤差・配列初期容量・表示桁数など）を型付きで一元管理する。
なぜ: YAML と環境変数の読み分けを一箇所に閉じ込め、既定値/型の一貫性とテスト容易性を高めるため。

読み込み順（後勝ち）:
1) `_Settings` の既定値
2) `configs/default.yaml` → ルート `config.yaml`（`util.utils.load_config`）
3) 環境変数 `FIG_*`
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from util.utils import load_config

from .env import env_bool, env_float, env_int, env_str

logger = logging.getLogger(__name__)


@dataclass
class _Settings:
    # 幾何比較の絶対許容誤差（スケール非依存）
    EPSILON: float = 1e-6

    # Growable array
    ARRAY_INITIAL_CAPACITY: int = 4

    # Reports / CLI
    REPORT_PRECISION: int = 2
    LOG_LEVEL: str = "INFO"
    FORCE_PROMPT: bool = False


_settings = _Settings()


def _apply_mapping(target: _Settings, data: Mapping[str, Any]) -> None:
    """YAML のトップレベル辞書を設定へ反映（未知キー/型不一致は無視）。"""
    for key, value in data.items():
        attr = str(key).upper()
        if not hasattr(target, attr):
            logger.debug("unknown config key ignored: %s", key)
            continue
        current = getattr(target, attr)
        try:
            if isinstance(current, bool):
                setattr(target, attr, bool(value))
            else:
                setattr(target, attr, type(current)(value))
        except (TypeError, ValueError):
            logger.debug("invalid config value ignored: %s=%r", key, value)


def reload_from_env(config: Mapping[str, Any] | None = None) -> None:
    """既定値 → 構成ファイル → 環境変数の順で設定を再読込。

    Parameters
    ----------
    config : Mapping[str, Any] | None
        構成ファイルの代わりに使う辞書。`None` の場合は `load_config()` を読む。
    """
    fresh = _Settings()
    _apply_mapping(fresh, load_config() if config is None else config)

    eps = env_float("FIG_EPSILON", fresh.EPSILON)
    fresh.EPSILON = eps if eps is not None and eps > 0.0 else _Settings.EPSILON
    fresh.ARRAY_INITIAL_CAPACITY = (
        env_int("FIG_ARRAY_INITIAL_CAPACITY", fresh.ARRAY_INITIAL_CAPACITY, min_value=1) or 1
    )
    fresh.REPORT_PRECISION = (
        env_int("FIG_REPORT_PRECISION", fresh.REPORT_PRECISION, min_value=0) or 0
    )
    fresh.LOG_LEVEL = env_str("FIG_LOG_LEVEL", fresh.LOG_LEVEL) or "INFO"
    fresh.FORCE_PROMPT = env_bool("FIG_FORCE_PROMPT", fresh.FORCE_PROMPT)

    # 下限丸め（YAML 経由の値にも適用）
    if fresh.ARRAY_INITIAL_CAPACITY < 1:
        fresh.ARRAY_INITIAL_CAPACITY = 1
    if fresh.REPORT_PRECISION < 0:
        fresh.REPORT_PRECISION = 0

    for name, value in vars(fresh).items():
        setattr(_settings, name, value)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
