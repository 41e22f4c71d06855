"""
どこで: `engine.core` の 2D 整数ジオメトリ。
何を: ウィジェット座標系（左上原点・Y 下向き・ピクセル単位）の `Point`/`Size` と生成ヘルパ。
なぜ: ウィジェットツリーの位置/大きさ報告とヒットテストを軽量な値型で統一するため。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """画面上の位置（ピクセル）。"""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size:
    """矩形の大きさ（ピクセル）。"""

    w: int = 0
    h: int = 0

    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0


def make_point(x: int, y: int) -> Point:
    return Point(int(x), int(y))


def make_size(w: int, h: int) -> Size:
    return Size(int(w), int(h))


def make_origin_point() -> Point:
    """原点 (0, 0)。"""
    return Point(0, 0)


def make_unsized() -> Size:
    """大きさ 0x0（描画/ヒットテスト対象外を示す）。"""
    return Size(0, 0)


def contains(origin: Point, size: Size, point: Point) -> bool:
    """`point` が `origin`/`size` の矩形内（右/下端は含まない）にあるか。

    大きさ 0 の矩形は何も含まない。
    """
    if size.is_empty():
        return False
    return origin.x <= point.x < origin.x + size.w and origin.y <= point.y < origin.y + size.h


def window_to_widget(window_height: int, x: float, y: float) -> Point:
    """ウィンドウ座標（左下原点・Y 上向き）のピクセルをウィジェット座標へ変換する。

    ピクセル行 `y` はウィジェット行 `window_height - 1 - y` に対応する。
    """
    return Point(int(x), window_height - 1 - int(y))


def widget_rect_bottom(window_height: int, origin: Point, size: Size) -> int:
    """ウィジェット矩形の最下行をウィンドウ座標（左下原点）で返す。"""
    return window_height - origin.y - size.h


class ScrollAccumulator:
    """小数のスクロール量を蓄積し、整数ステップに達した分だけ取り出す。

    端数は次回へ繰り越すため、トラックパッドの細かいスクロールも失われない。
    """

    def __init__(self) -> None:
        self._x = 0.0
        self._y = 0.0

    def push(self, dx: float, dy: float) -> Point | None:
        """蓄積して整数部を返す（どちらの軸も 0 なら None）。"""
        self._x += float(dx)
        self._y += float(dy)
        step_x, step_y = int(self._x), int(self._y)
        if step_x == 0 and step_y == 0:
            return None
        self._x -= step_x
        self._y -= step_y
        return Point(step_x, step_y)


__all__ = [
    "Point",
    "Size",
    "ScrollAccumulator",
    "make_point",
    "make_size",
    "make_origin_point",
    "make_unsized",
    "contains",
    "widget_rect_bottom",
    "window_to_widget",
]
