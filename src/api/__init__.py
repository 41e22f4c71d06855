"""
どこで: `api` 入口（高レベル公開 API）。
何を: ランナー `run`・タイマ/ウィジェット/ストア・ジオメトリ・時刻源を再輸出。
なぜ: 利用者が単一名前空間からウィジェット生成→登録→実行まで完結できるようにするため。

Usage:
    from api import TimerWidget, run

    timer = TimerWidget()
    timer.set_timeout(1000)
    timer.on_timeout(lambda: print("1 second"))
    run([timer])
"""

from engine.core.point import Point, Size, make_point, make_size
from engine.core.time_source import ManualClock, MonotonicClock, SystemClock, TimeSource
from engine.widget.config import Configurable
from engine.widget.store import WidgetStore
from engine.widget.timer import TimerWidget
from engine.widget.widget import BaseWidget, Capability, Widget

from .runner import run_widgets as run
from .runner import run_widgets as run_widgets

__all__ = [
    # 実行
    "run",
    "run_widgets",
    # ウィジェット
    "TimerWidget",
    "BaseWidget",
    "Widget",
    "Capability",
    "Configurable",
    "WidgetStore",
    # ジオメトリ / 時刻源
    "Point",
    "Size",
    "make_point",
    "make_size",
    "TimeSource",
    "SystemClock",
    "MonotonicClock",
    "ManualClock",
]

__version__ = "2026.10"
