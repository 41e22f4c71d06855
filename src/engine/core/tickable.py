"""
どこで: `engine.core` の更新インターフェース。
何を: 1フレーム更新 `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: フレーム駆動のオブジェクト（WidgetStore/TimerWidget 等）を FrameClock から一様に扱うため。

補足:
- `dt` は前フレームからの経過秒。ミリ秒時計で自前に経過を測る実装（TimerWidget）は無視してよい。
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Tickable(Protocol):
    """1 フレーム分の更新を行うインターフェース。"""

    def tick(self, dt: float) -> None:
        """内部状態を `dt` 秒ぶん進める。"""
