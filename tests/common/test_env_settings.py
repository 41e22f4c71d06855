from __future__ import annotations

import logging

import pytest

from common import env, settings
from common.env import env_choice, env_int
from common.logging import resolve_level, setup_default_logging


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PXW_TEST_INT", raising=False)
    assert env_int("PXW_TEST_INT", 7) == 7
    monkeypatch.setenv("PXW_TEST_INT", " 12 ")
    assert env_int("PXW_TEST_INT", 7) == 12
    monkeypatch.setenv("PXW_TEST_INT", "-3")
    assert env_int("PXW_TEST_INT", 7, min_value=0) == 0
    monkeypatch.setenv("PXW_TEST_INT", "abc")
    assert env_int("PXW_TEST_INT", 7) == 7


def test_env_choice(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PXW_TEST_CHOICE", raising=False)
    assert env_choice("PXW_TEST_CHOICE", ["a", "b"], "a") == "a"
    monkeypatch.setenv("PXW_TEST_CHOICE", " B ")
    assert env_choice("PXW_TEST_CHOICE", ["a", "b"], "a") == "b"
    monkeypatch.setenv("PXW_TEST_CHOICE", "c")
    assert env_choice("PXW_TEST_CHOICE", ["a", "b"], "a") == "a"


def test_env_exports_only_used_helpers() -> None:
    # settings は int と選択肢しか読まない
    assert sorted(env.__all__) == ["env_choice", "env_int"]
    assert not hasattr(env, "env_bool")


def test_settings_reload(monkeypatch: pytest.MonkeyPatch, reload_settings: None) -> None:
    settings.reload_from_env()
    s = settings.get()
    assert (s.TIMER_CLOCK, s.LOG_LEVEL, s.DEFAULT_FPS) == ("wall", "INFO", 60)

    monkeypatch.setenv("PXW_TIMER_CLOCK", "monotonic")
    monkeypatch.setenv("PXW_LOG_LEVEL", "debug")
    monkeypatch.setenv("PXW_DEFAULT_FPS", "0")
    settings.reload_from_env()
    s = settings.get()
    assert s.TIMER_CLOCK == "monotonic"
    assert s.LOG_LEVEL == "DEBUG"
    assert s.DEFAULT_FPS == 1


def test_resolve_level() -> None:
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(None) == getattr(logging, settings.get().LOG_LEVEL)


def test_setup_default_logging_is_noop_when_root_has_handlers() -> None:
    root = logging.getLogger()
    # pytest がハンドラを設置済みなので何も変わらない
    before = list(root.handlers)
    level = root.level
    setup_default_logging("DEBUG")
    assert root.handlers == before
    assert root.level == level
