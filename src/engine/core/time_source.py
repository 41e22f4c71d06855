"""
どこで: `engine.core` の時刻源。
何を: 「現在時刻[ms]」を返す `TimeSource` Protocol と、その実装
      （`SystemClock`=UNIX epoch ms / `MonotonicClock` / テスト用 `ManualClock`）を提供。
なぜ: 経過時間で動くウィジェット（TimerWidget 等）から壁時計の直接参照を切り離し、
      テストで時間を決定的に進められるようにするため。

補足:
- 分解能はミリ秒（整数）。差分が 0 になる「同一瞬間」を区別できる粒度を前提にする。
- 時刻の取得失敗は回復不能として扱い、例外はそのまま呼び出し側へ伝播させる。
"""

from __future__ import annotations

import time
from typing import Protocol

from common.settings import get as _get_settings


class TimeSource(Protocol):
    """現在時刻をミリ秒で返すインターフェース。"""

    def now_ms(self) -> int:
        """現在時刻 [ms] を返す。"""
        ...


class SystemClock:
    """UNIX epoch からの経過ミリ秒（壁時計）。"""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class MonotonicClock:
    """単調時計のミリ秒。システム時刻の巻き戻りの影響を受けない。"""

    def now_ms(self) -> int:
        return time.monotonic_ns() // 1_000_000


class ManualClock:
    """手動で進める時計（テスト/リプレイ用）。

    `advance()` で前進、`set()` で任意時刻（巻き戻しを含む）へ移動する。
    """

    def __init__(self, start_ms: int = 0):
        self._now = int(start_ms)

    def now_ms(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        """`ms` だけ進めて新しい現在時刻を返す。負値は `ValueError`。"""
        if ms < 0:
            raise ValueError(f"advance() requires ms >= 0, got {ms}")
        self._now += int(ms)
        return self._now

    def set(self, now_ms: int) -> None:
        self._now = int(now_ms)


def default_time_source() -> TimeSource:
    """設定（`PXW_TIMER_CLOCK`）に従う既定の時刻源を返す。"""
    if _get_settings().TIMER_CLOCK == "monotonic":
        return MonotonicClock()
    return SystemClock()


__all__ = [
    "TimeSource",
    "SystemClock",
    "MonotonicClock",
    "ManualClock",
    "default_time_source",
]
