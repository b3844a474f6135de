"""
どこで: tests（api.cli）。
何を: 標準入力からの一連のデモ（共有配列→値配列）の出力と終了コード、読み直し、プロンプト表示。
なぜ: 入力→検証→格納→集計の経路を端から端まで確認するため。
"""

from __future__ import annotations

import io
import math

import pytest

from api.cli import main
from common import settings

DIAMOND = "0 0 1 1 2 0 1 -1"
WIDE = "0 0 1 2 2 0 1 -2"
PARALLELOGRAM = "0 0 2 0 3 1 1 1"


def _area(n: int, radius: float) -> float:
    return 0.5 * n * radius * radius * math.sin(2.0 * math.pi / n)


def _run(argv: list[str], text: str) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    rc = main(argv, stdin=io.StringIO(text), stdout=out, stderr=err)
    return rc, out.getvalue(), err.getvalue()


def test_full_demo(regular_polygon_text) -> None:
    pent = regular_polygon_text(5, 1.0)
    hexa = regular_polygon_text(6, 1.0)
    lines = [DIAMOND, pent, hexa, WIDE, pent, pent, regular_polygon_text(5, 2.0), pent]

    rc, out, err = _run([], "\n".join(lines) + "\n")

    assert rc == 0
    total = 2.0 + _area(5, 1.0) + _area(6, 1.0)
    assert f"Total area of polymorphic container = {total:.2f}" in out
    assert "0: Center = (1.00, 0.00)" in out
    assert "Figure 0 differs from figure 1" in out
    assert "Area of figure 0 = 2.00" in out
    assert "After move:\n(0.00, 0.00) (1.00, 2.00) (2.00, 0.00) (1.00, -2.00)" in out
    assert "Source is empty after move: True" in out
    assert "Pentagon 0 equals pentagon 1" in out
    pent_total = 2 * _area(5, 1.0) + _area(5, 2.0)
    assert f"Total area of pentagons = {pent_total:.2f}" in out
    assert "Remaining pentagons:" in out
    assert err.count("Out of range:") == 2


def test_invalid_figure_aborts_with_error() -> None:
    rc, out, err = _run(["--kinds", "rhombus", "--skip-values"], PARALLELOGRAM + "\n")
    assert rc == 1
    assert "Error:" in err
    assert "rhombus" in err


def test_attempts_allow_reading_again() -> None:
    text = "\n".join([PARALLELOGRAM, DIAMOND, WIDE]) + "\n"
    rc, out, err = _run(["--kinds", "rhombus", "--skip-values", "--attempts", "2"], text)
    assert rc == 0
    assert "0: (0.00, 0.00) (1.00, 1.00) (2.00, 0.00) (1.00, -1.00) | Area = 2.00" in out
    assert "Accessing figure 10:" in out
    assert "index=10" in err


def test_precision_option_and_forced_prompt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIG_FORCE_PROMPT", "1")
    settings.reload_from_env({})
    text = "\n".join([DIAMOND, WIDE]) + "\n"
    rc, out, _ = _run(["--kinds", "rhombus", "--skip-values", "--precision", "1"], text)
    assert rc == 0
    assert "Enter 4 vertices of the rhombus (x y) in order:" in out
    assert "Total area of polymorphic container = 2.0" in out


def test_unknown_kind_is_rejected_by_parser() -> None:
    with pytest.raises(SystemExit):
        _run(["--kinds", "triangle"], "")
