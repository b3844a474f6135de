from __future__ import annotations

from pathlib import Path

from util.utils import _find_project_root, load_config


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    a = tmp_path / "a" / "b"
    a.mkdir(parents=True)
    start = a
    got = _find_project_root(start)
    assert got == start.parent.parent


def test_load_config_root_overrides_default(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "epsilon: 1.0e-6\nreport_precision: 2\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("report_precision: 4\n", encoding="utf-8")

    cfg = load_config(tmp_path)
    assert cfg == {"epsilon": 1e-6, "report_precision": 4}


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("- not\n- a mapping\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
    assert load_config(tmp_path / "missing") == {}
