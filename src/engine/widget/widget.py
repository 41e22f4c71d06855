"""
どこで: `engine.widget` の共通契約。
何を: ウィジェットツリーの全メンバが満たす `Widget` 契約（ジオメトリ報告/入力フック/描画/設定）、
      能力タグ `Capability`（DRAWABLE/UPDATABLE/INTERACTIVE）、描画先 `DrawContext`、
      および可視矩形の最小実装 `BaseWidget` を定義する。
なぜ: ホスト（WidgetStore）が可視/不可視ウィジェットを一様に扱いつつ、
      「再描画が必要」と「毎フレーム更新したい」を別の能力として区別できるようにするため。

能力タグの使い分け:
- DRAWABLE    : 描画パスで `is_invalidated()` が真なら `draw()` が呼ばれる。
- UPDATABLE   : 更新パスで毎フレーム `tick(dt)` が呼ばれる。
- INTERACTIVE : ヒットテストとマウス入力の配送対象になる。
"""

from __future__ import annotations

import enum
from typing import Protocol

from ..core.point import Point, Size, make_origin_point, make_unsized
from .config import (
    CONFIG_BODY_SIZE,
    CONFIG_INVALIDATE,
    CONFIG_MAIN_COLOR,
    CONFIG_ORIGIN,
    Configurable,
)

# RGBA（0..1）
Color = tuple[float, float, float, float]


class Capability(enum.Flag):
    """ホストが各ウィジェットに対して行う処理の種別。"""

    NONE = 0
    DRAWABLE = enum.auto()
    UPDATABLE = enum.auto()
    INTERACTIVE = enum.auto()


class DrawContext(Protocol):
    """描画プリミティブの発行先（ウィンドウ実装が提供する）。"""

    def fill_rect(self, origin: Point, size: Size, color: Color) -> None: ...


class Widget:
    """ウィジェット契約の既定実装（すべて no-op / 大きさ 0）。

    サブクラスは必要なフックだけを上書きし、`capabilities()` で自身の能力を申告する。
    """

    def __init__(self) -> None:
        self._config = Configurable()

    # ---- 設定 ----
    def config(self) -> Configurable:
        return self._config

    # ---- 能力 ----
    def capabilities(self) -> Capability:
        return Capability.DRAWABLE | Capability.INTERACTIVE

    # ---- ジオメトリ ----
    def get_origin(self) -> Point:
        return make_origin_point()

    def get_size(self) -> Size:
        return make_unsized()

    def is_invalidated(self) -> bool:
        return False

    # ---- 入力フック ----
    def mouse_entered(self, widget_id: int) -> None:
        pass

    def mouse_exited(self, widget_id: int) -> None:
        pass

    def mouse_scrolled(self, widget_id: int, point: Point) -> None:
        pass

    def button_down(self, widget_id: int, button: int) -> None:
        pass

    def button_up(self, widget_id: int, button: int) -> None:
        pass

    def key_pressed(self, widget_id: int, key: int) -> None:
        pass

    # ---- フレーム ----
    def tick(self, dt: float | None = None) -> None:
        pass

    def draw(self, context: DrawContext) -> None:
        pass


class BaseWidget(Widget):
    """単色の塗り矩形を描くだけの可視ウィジェット。

    位置/大きさ/色は `config()` に保持し、変更時に再描画フラグを立てる。
    """

    def __init__(
        self,
        origin: Point | None = None,
        size: Size | None = None,
        color: Color = (1.0, 1.0, 1.0, 1.0),
    ):
        super().__init__()
        self.set_origin(origin or make_origin_point())
        self.set_size(size or make_unsized())
        self.set_color(color)

    def set_origin(self, origin: Point) -> None:
        self._config.set(CONFIG_ORIGIN, origin)
        self.invalidate()

    def set_size(self, size: Size) -> None:
        self._config.set(CONFIG_BODY_SIZE, size)
        self.invalidate()

    def set_color(self, color: Color) -> None:
        r, g, b, a = color
        self._config.set(CONFIG_MAIN_COLOR, (float(r), float(g), float(b), float(a)))
        self.invalidate()

    def invalidate(self) -> None:
        self._config.set(CONFIG_INVALIDATE, True)

    def get_origin(self) -> Point:
        return self._config.get(CONFIG_ORIGIN, make_origin_point())

    def get_size(self) -> Size:
        return self._config.get(CONFIG_BODY_SIZE, make_unsized())

    def is_invalidated(self) -> bool:
        return bool(self._config.get(CONFIG_INVALIDATE, False))

    def draw(self, context: DrawContext) -> None:
        context.fill_rect(self.get_origin(), self.get_size(), self._config.get(CONFIG_MAIN_COLOR))
        self._config.set(CONFIG_INVALIDATE, False)


__all__ = ["Capability", "Color", "DrawContext", "Widget", "BaseWidget"]
