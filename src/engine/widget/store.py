"""
どこで: `engine.widget` のホストツリー。
何を: ウィジェットに ID を振って保持し、毎フレームの更新パス（UPDATABLE へ `tick`）と
      描画パス（再描画が必要な DRAWABLE へ `draw`）、ヒットテストとマウス入力の配送を行う。
なぜ: 可視ウィジェットとタイマのような不可視ウィジェットを、能力タグに従って一様に駆動するため。

補足:
- ID は 1 から払い出す（0 は「該当なし/ルート」を表す）。
- 重なり順は追加順。後から追加したものほど手前（ヒットテストで優先）。
- 各ウィジェットのフックが送出した例外は捕捉しない。
"""

from __future__ import annotations

import logging
from typing import Iterator

from ..core.point import Point, contains
from .widget import Capability, DrawContext, Widget

logger = logging.getLogger(__name__)

NO_WIDGET = 0


class WidgetStore:
    """ウィジェットの所有者兼フレームドライバ（Tickable）。"""

    def __init__(self) -> None:
        self._widgets: dict[int, Widget] = {}
        self._next_id = 1
        self._hovered = NO_WIDGET

    # ---- 登録 / 問合せ ----
    def add_widget(self, widget: Widget) -> int:
        """ウィジェットを登録し、払い出した ID を返す。"""
        widget_id = self._next_id
        self._next_id += 1
        self._widgets[widget_id] = widget
        logger.debug("added %s as widget %d", type(widget).__name__, widget_id)
        return widget_id

    def get_widget(self, widget_id: int) -> Widget:
        return self._widgets[widget_id]

    def remove_widget(self, widget_id: int) -> Widget:
        """登録を解除して返す。未登録 ID は `KeyError`。"""
        widget = self._widgets.pop(widget_id)
        if self._hovered == widget_id:
            self._hovered = NO_WIDGET
        logger.debug("removed widget %d", widget_id)
        return widget

    def widgets(self) -> Iterator[tuple[int, Widget]]:
        return iter(list(self._widgets.items()))

    def __len__(self) -> int:
        return len(self._widgets)

    def _with(self, capability: Capability) -> list[tuple[int, Widget]]:
        return [(wid, w) for wid, w in self._widgets.items() if capability in w.capabilities()]

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        """更新パス: UPDATABLE なウィジェットを追加順に 1 回ずつ進める。"""
        for _wid, widget in self._with(Capability.UPDATABLE):
            widget.tick(dt)

    # -------- draw --------
    def needs_redraw(self) -> bool:
        return any(w.is_invalidated() for _wid, w in self._with(Capability.DRAWABLE))

    def draw(self, context: DrawContext, *, force: bool = False) -> int:
        """描画パス: 再描画が必要な DRAWABLE を描き、描いた数を返す。

        `force=True` は毎フレーム画面を消去するホスト向けで、すべての DRAWABLE を描く。
        """
        drawn = 0
        for _wid, widget in self._with(Capability.DRAWABLE):
            if force or widget.is_invalidated():
                widget.draw(context)
                drawn += 1
        return drawn

    # -------- input --------
    def find_widget(self, point: Point) -> int:
        """`point` を含む最前面の INTERACTIVE ウィジェット ID（無ければ 0）。"""
        for wid, widget in reversed(self._with(Capability.INTERACTIVE)):
            if contains(widget.get_origin(), widget.get_size(), point):
                return wid
        return NO_WIDGET

    @property
    def hovered(self) -> int:
        return self._hovered

    def mouse_moved(self, point: Point) -> int:
        """ホバー先が変わったら exited → entered の順で通知し、現在のホバー ID を返す。"""
        target = self.find_widget(point)
        if target != self._hovered:
            previous = self._hovered
            self._hovered = target
            if previous != NO_WIDGET and previous in self._widgets:
                self._widgets[previous].mouse_exited(previous)
            if target != NO_WIDGET:
                self._widgets[target].mouse_entered(target)
        return target

    def mouse_scrolled(self, point: Point) -> int:
        """スクロール量 `point` を現在のホバー先へ配送する（無ければ 0）。"""
        if self._hovered != NO_WIDGET:
            self._widgets[self._hovered].mouse_scrolled(self._hovered, point)
        return self._hovered


__all__ = ["WidgetStore", "NO_WIDGET"]
