"""共通フィクスチャ。

- 手動時計（ManualClock）
- 環境変数を汚さない設定の再読込
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from engine.core.time_source import ManualClock

_SETTINGS_ENV = ("PXW_TIMER_CLOCK", "PXW_LOG_LEVEL", "PXW_DEFAULT_FPS")


@pytest.fixture()
def manual_clock() -> ManualClock:
    """UNIX 時刻らしい値から始まる手動時計。"""
    return ManualClock(start_ms=1_700_000_000_000)


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """設定系の環境変数を消した状態から始め、終了後に設定を読み直す。"""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
