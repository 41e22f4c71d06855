"""
どこで: `engine.widget` のタイマ。
何を: 最後のリセットからの経過時間[ms]を毎フレームのポーリングで測り、
      タイムアウトを超えたら引数なしコールバックを呼んで自動で再アームする不可視ウィジェット。
なぜ: スレッドやスケジューラを持たずに、ホストのフレームループだけで周期処理を実現するため。

振る舞いの要点:
- `tick()` は無効時は何もしない。有効時は `elapsed > timeout`（厳密に大きい）で発火する。
  timeout=0 でも同一ミリ秒内の連続 tick では発火しない。
- 発火時は「再アーム → コールバック」の順。コールバック内から再度 tick されても
  同じ区間で二重発火しない。
- `set_enabled()` は値に関わらずアンカーを現在時刻へ戻す（再有効化直後に溜まった分で発火しない）。
- `set_timeout()` はアンカーを動かさない。経過済み時間より短くすると次の tick で発火する。
- コールバックの例外は捕捉しない（tick の呼び出し元へそのまま伝播する）。
- 時刻が巻き戻った（now < anchor）場合は発火せず、アンカーを現在時刻へ付け替えて警告を出す。

ウィジェット契約上の扱い:
- 大きさ 0・原点 (0, 0)・入力フックはすべて no-op。
- `is_invalidated()` は常に True、`draw()` の本体は `tick()` のみ。
  これは「再描画が必要」のフラグを「毎フレーム呼んでほしい」の意味で流用するもので、
  描画パスしか持たないホストでも毎フレーム到達させるための互換経路。
- 能力タグは UPDATABLE のみ。WidgetStore は更新パスで `tick()` を呼び、描画パスでは呼ばない。

使用例:
    timer = TimerWidget()
    timer.set_timeout(500)
    timer.on_timeout(lambda: print("tick"))
    store.add_widget(timer)
"""

from __future__ import annotations

import logging
import numbers
from typing import Callable

from ..core.point import Point, Size, make_origin_point, make_unsized
from ..core.time_source import TimeSource, default_time_source
from .widget import Capability, DrawContext, Widget

logger = logging.getLogger(__name__)

TimeoutCallback = Callable[[], None]


def _noop() -> None:
    pass


class TimerWidget(Widget):
    """一定時間ごとにコールバックを呼ぶ、画面上に現れないウィジェット。"""

    def __init__(self, time_source: TimeSource | None = None):
        super().__init__()
        self._time_source = time_source if time_source is not None else default_time_source()
        self._enabled = True
        self._anchor = self._time_source.now_ms()
        self._timeout = 0
        self._callback: TimeoutCallback = _noop

    # ---- 状態 ----
    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def timeout(self) -> int:
        """現在のタイムアウト [ms]。"""
        return self._timeout

    def elapsed(self) -> int:
        """最後のアーム時刻からの経過 [ms]（無効時/巻き戻り時は 0）。"""
        if not self._enabled:
            return 0
        return max(0, self._time_source.now_ms() - self._anchor)

    # ---- 操作 ----
    def set_enabled(self, enabled: bool) -> None:
        """有効/無効を切り替え、値に関わらず計測をやり直す。"""
        self._enabled = bool(enabled)
        self._anchor = self._time_source.now_ms()
        logger.debug("timer %s (anchor=%d)", "enabled" if self._enabled else "disabled", self._anchor)

    def set_timeout(self, timeout: int) -> None:
        """タイムアウト [ms] を差し替える（アンカーは動かさない）。

        整数のみ受け付ける。小数や bool は黙って丸めず `TypeError`、負値は `ValueError`。
        """
        if isinstance(timeout, bool) or not isinstance(timeout, numbers.Integral):
            raise TypeError(f"timeout must be an integer number of ms, got {timeout!r}")
        if timeout < 0:
            raise ValueError(f"timeout must be >= 0 ms, got {timeout}")
        self._timeout = int(timeout)

    def on_timeout(self, callback: TimeoutCallback | None) -> None:
        """発火時に呼ぶ関数を差し替える。None で no-op に戻す。"""
        if callback is None:
            callback = _noop
        elif not callable(callback):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")
        self._callback = callback

    def tick(self, dt: float | None = None) -> None:
        """経過時間を確認し、タイムアウトを超えていれば再アームして発火する。

        `dt` は Tickable 互換のために受け取るだけで使わない（経過は時刻源から測る）。
        """
        if not self._enabled:
            return

        now = self._time_source.now_ms()
        elapsed = now - self._anchor
        if elapsed < 0:
            logger.warning(
                "clock went backwards by %d ms; re-arming timer without firing", -elapsed
            )
            self._anchor = now
            return

        if elapsed > self._timeout:
            self._anchor = now
            logger.debug("timer fired after %d ms (timeout=%d)", elapsed, self._timeout)
            self._callback()

    # ---- Widget 契約 ----
    def capabilities(self) -> Capability:
        return Capability.UPDATABLE

    def get_origin(self) -> Point:
        return make_origin_point()

    def get_size(self) -> Size:
        return make_unsized()

    def is_invalidated(self) -> bool:
        # 「毎フレーム到達してほしい」の意（上記モジュール説明を参照）
        return True

    def draw(self, context: DrawContext) -> None:
        self.tick()


__all__ = ["TimerWidget", "TimeoutCallback"]
