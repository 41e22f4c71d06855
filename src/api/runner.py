"""
どこで: `api.runner`（実行ランナー）。
何を: ウィジェット群を `WidgetStore` に登録し、pyglet ウィンドウとフレームループで駆動する。
なぜ: 少ない記述でタイマ付きのウィジェットツリーを対話的に実行できるようにするため。

実行フロー（概要）:
1) ロギング初期化（`PXW_LOG_LEVEL`）。
2) FPS/サイズ/背景色/タイトルを「引数 > 構成ファイル > 既定」で解決。
3) `WidgetStore` を生成してウィジェットを登録。
4) `init_only=True` ならここで store を返す（pyglet を import しない）。
5) `RenderWindow` と `PygletDrawContext` を生成し、描画パスを描画コールバックに登録。
6) `FrameClock([store])` を `pyglet.clock.schedule_interval` で駆動（更新パス = タイマの tick）。
7) `pyglet.app.run()`。ESC/クローズで終了し、スケジュールを解除して進めたフレーム数をログに出す。

例外:
- ウィジェット（タイマのコールバックを含む）が送出した例外は捕捉せず、
  フレームループ（`pyglet.app.run()`）の呼び出し元まで伝播する。
"""

from __future__ import annotations

import logging
from typing import Iterable

from common.logging import setup_default_logging
from engine.widget.store import WidgetStore
from engine.widget.widget import Widget

from .runner_utils import resolve_background, resolve_caption, resolve_fps, resolve_window_size

logger = logging.getLogger(__name__)


def run_widgets(
    widgets: Iterable[Widget],
    *,
    size: tuple[int, int] | None = None,
    fps: int | None = None,
    background: tuple[float, ...] | None = None,
    caption: str | None = None,
    init_only: bool = False,
) -> WidgetStore | None:
    """ウィジェットを登録したウィンドウを開き、閉じられるまでフレームループを回す。

    Parameters
    ----------
    widgets : Iterable[Widget]
        登録するウィジェット（追加順が重なり順/更新順になる）。
    size : tuple[int, int] | None
        ウィンドウサイズ [px]。None で構成ファイル/既定（640x480）。
    fps : int | None
        フレームレート。None で構成ファイル/`PXW_DEFAULT_FPS`。
    background : tuple[float, ...] | None
        背景色 RGB(A) 0..1。None で構成ファイル/白。
    caption : str | None
        ウィンドウタイトル。
    init_only : bool, default False
        True でウィンドウを作らず、登録済みの `WidgetStore` を返す。

    Returns
    -------
    WidgetStore | None
        `init_only=True` のときのみ store を返す。
    """
    setup_default_logging()

    fps = resolve_fps(fps)
    width, height = resolve_window_size(size)
    bg = resolve_background(background)
    title = resolve_caption(caption)

    store = WidgetStore()
    for widget in widgets:
        store.add_widget(widget)

    if init_only:
        return store

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import PygletDrawContext, RenderWindow

    window = RenderWindow(width, height, bg_color=bg, caption=title)
    context = PygletDrawContext(window)

    def draw_widgets() -> None:
        store.draw(context, force=True)
        context.flush()

    window.add_draw_callback(draw_widgets)
    window.set_input_target(store)

    frame_clock = FrameClock([store])
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)
    logger.info("running %d widget(s) at %d fps (%dx%d)", len(store), fps, width, height)
    try:
        pyglet.app.run()
    finally:
        pyglet.clock.unschedule(frame_clock.tick)
        logger.info("stopped after %d frame(s)", frame_clock.frames)
    return None


__all__ = ["run_widgets"]
