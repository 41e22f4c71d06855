from __future__ import annotations

from pathlib import Path

from util.utils import _find_project_root, load_config, window_config


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    start = tmp_path / "a" / "b"
    start.mkdir(parents=True)
    assert _find_project_root(start) == start.parent.parent


def test_find_project_root_detects_configs_dir(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    start = tmp_path / "src" / "util"
    start.mkdir(parents=True)
    assert _find_project_root(start) == tmp_path


def test_load_config_root_overrides_default_shallowly(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "window:\n  width: 640\n  height: 480\nother: 1\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("window:\n  fps: 30\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    # トップレベルのみ上書き（window はまるごと置き換わる）
    assert cfg == {"window": {"fps": 30}, "other": 1}
    assert window_config(cfg) == {"fps": 30}


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("window: [unclosed\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
    assert window_config({"window": "nope"}) == {}


def test_repository_default_config_has_window_section() -> None:
    section = window_config()
    assert int(section["fps"]) > 0
    assert int(section["width"]) > 0
