"""
どこで: `engine.core` のフレームドライバ。
何を: `Tickable`（WidgetStore など）を固定順序で 1 フレームずつ進め、進めたフレーム数を数える。
なぜ: pyglet の `schedule_interval` から 1 つの関数を呼ぶだけで、更新パスの順序を統一するため。

補足:
- tickable が送出した例外（タイマのコールバック由来を含む）は捕捉しない。
- 例外で中断したフレームは `frames` に数えない。
- `frames` はランナーが終了時のログに使う。
"""

from __future__ import annotations

import time
from typing import Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行し、完了したフレーム数を保持する。"""

    def __init__(self, tickables: Sequence[Tickable]):
        self._tickables = tuple(tickables)
        self._last_time = time.perf_counter()
        self.frames = 0

    def tick(self, dt: float | None = None) -> None:
        if dt is None:  # pyglet 以外から呼ばれたときは自前で測る
            now = time.perf_counter()
            dt = now - self._last_time
            self._last_time = now

        for t in self._tickables:
            t.tick(dt)
        self.frames += 1
