"""
タイマで色が切り替わる矩形のデモ。

- 500ms ごとに矩形の色を反転する。
- 1 秒ごとに経過秒数をログへ出す。
- 矩形にマウスを乗せている間は点滅を止める（タイマを無効化）。
"""

from __future__ import annotations

import logging

from api import BaseWidget, Point, Size, TimerWidget, run

logger = logging.getLogger(__name__)

ON = (0.1, 0.4, 0.9, 1.0)
OFF = (0.85, 0.85, 0.85, 1.0)


class BlinkBox(BaseWidget):
    """ホバー中は点滅タイマを止める矩形。"""

    def __init__(self, origin: Point, size: Size, blink: TimerWidget):
        super().__init__(origin, size, color=ON)
        self._lit = True
        self._blink = blink
        blink.on_timeout(self.toggle)

    def toggle(self) -> None:
        self._lit = not self._lit
        self.set_color(ON if self._lit else OFF)

    def mouse_entered(self, widget_id: int) -> None:
        self._blink.set_enabled(False)

    def mouse_exited(self, widget_id: int) -> None:
        self._blink.set_enabled(True)


def build_widgets() -> list:
    blink = TimerWidget()
    blink.set_timeout(500)
    box = BlinkBox(Point(220, 140), Size(200, 200), blink)

    seconds = TimerWidget()
    seconds.set_timeout(1000)
    count = {"n": 0}

    def report() -> None:
        count["n"] += 1
        logger.info("%d second(s) elapsed", count["n"])

    seconds.on_timeout(report)
    return [blink, seconds, box]


if __name__ == "__main__":
    run(build_widgets(), caption="Timer demo")
