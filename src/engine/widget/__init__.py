"""
どこで: `engine.widget` サブパッケージ。
何を: ウィジェット契約（Widget/Capability）・設定ストア・タイマ・ホストツリーを提供。
なぜ: ホストが可視/不可視ウィジェットを同じ契約で駆動できるようにするため。
"""

from .config import Configurable
from .store import WidgetStore
from .timer import TimerWidget
from .widget import BaseWidget, Capability, Widget

__all__ = [
    "BaseWidget",
    "Capability",
    "Configurable",
    "TimerWidget",
    "Widget",
    "WidgetStore",
]
