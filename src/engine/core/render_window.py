"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア）と描画コールバック登録、ウィジェット座標系
      （左上原点・Y 下向き）での塗り矩形描画 `PygletDrawContext`、マウス入力の転送を提供。
なぜ: ウィジェット層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(640, 480, bg_color=(1, 1, 1, 1))
    ctx = PygletDrawContext(win)

    def draw_widgets():
        store.draw(ctx, force=True)
        ctx.flush()

    win.add_draw_callback(draw_widgets)
    win.set_input_target(store)
    pyglet.app.run()
"""

from __future__ import annotations

from typing import Callable, Protocol

import pyglet
from pyglet.gl import Config, glClearColor

from .point import Point, ScrollAccumulator, Size, widget_rect_bottom, window_to_widget


class InputTarget(Protocol):
    """マウス入力の転送先（WidgetStore が満たす）。"""

    def mouse_moved(self, point: Point) -> int: ...

    def mouse_scrolled(self, point: Point) -> int: ...


def _to_rgba255(color: tuple[float, float, float, float]) -> tuple[int, int, int, int]:
    return tuple(max(0, min(255, int(round(c * 255)))) for c in color)  # type: ignore[return-value]


class PygletDrawContext:
    """ウィジェット座標の描画要求を pyglet の Batch に積み、`flush()` でまとめて描く。"""

    def __init__(self, window: pyglet.window.Window):
        self._window = window
        self._batch = pyglet.graphics.Batch()
        self._shapes: list[pyglet.shapes.Rectangle] = []

    def fill_rect(
        self, origin: Point, size: Size, color: tuple[float, float, float, float]
    ) -> None:
        if size.is_empty():
            return
        # pyglet は左下原点なので Y を反転する
        y = widget_rect_bottom(self._window.height, origin, size)
        rect = pyglet.shapes.Rectangle(
            origin.x, y, size.w, size.h, color=_to_rgba255(color), batch=self._batch
        )
        self._shapes.append(rect)

    def flush(self) -> None:
        """積んだ図形を描画して破棄する。"""
        self._batch.draw()
        for shape in self._shapes:
            shape.delete()
        self._shapes.clear()


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
        caption: str = "Pyxiwidget",
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            bg_color: 背景色 RGBA（0.0〜1.0）。
            caption: タイトルバーの文字列。
        """
        # 矩形の縁を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        super().__init__(width=width, height=height, caption=caption, config=config)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._input_target: InputTarget | None = None
        self._scroll = ScrollAccumulator()

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def set_input_target(self, target: InputTarget | None) -> None:
        """マウス移動/スクロールの転送先を設定する（None で解除）。"""
        self._input_target = target

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_mouse_motion(self, x, y, dx, dy):  # Pyglet 既定のイベント名
        if self._input_target is not None:
            self._input_target.mouse_moved(window_to_widget(self.height, x, y))

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y):  # Pyglet 既定のイベント名
        if self._input_target is not None:
            self._input_target.mouse_moved(window_to_widget(self.height, x, y))
            step = self._scroll.push(scroll_x, scroll_y)
            if step is not None:
                self._input_target.mouse_scrolled(step)
