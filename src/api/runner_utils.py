"""
どこで: `api.runner_utils`（純粋関数/小ヘルパ）。
何を: FPS・ウィンドウサイズ・背景色・タイトルの解決（明示指定 > 構成ファイル > 既定）。
なぜ: `api.runner` を薄く保ち、ウィンドウを開かずにテストできるようにするため。
"""

from __future__ import annotations

from typing import Any, Mapping

from common.settings import get as _get_settings

RGBA = tuple[float, float, float, float]

DEFAULT_SIZE = (640, 480)
DEFAULT_BACKGROUND: RGBA = (1.0, 1.0, 1.0, 1.0)
DEFAULT_CAPTION = "Pyxiwidget"


def _window_section(cfg: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if cfg is None:
        from util.utils import window_config

        return window_config()
    section = cfg.get("window", {})
    return section if isinstance(section, Mapping) else {}


def resolve_fps(requested_fps: int | None, cfg: Mapping[str, Any] | None = None) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（<=0 は `ValueError`）。
    - それ以外は構成ファイル `window.fps`、失敗時は `PXW_DEFAULT_FPS`。
    """
    if requested_fps is not None:
        v = int(requested_fps)
        if v <= 0:
            raise ValueError(f"fps must be > 0, got {requested_fps}")
        return v
    default = _get_settings().DEFAULT_FPS
    try:
        return max(1, int(_window_section(cfg).get("fps", default)))
    except (TypeError, ValueError):
        return max(1, int(default))


def resolve_window_size(
    size: tuple[int, int] | None, cfg: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """ウィンドウサイズ [px] を解決する。明示指定が正でなければ `ValueError`。"""
    if size is not None:
        try:
            w, h = int(size[0]), int(size[1])
        except (TypeError, ValueError, IndexError) as e:
            raise ValueError(f"invalid window size: {size!r}") from e
        if w <= 0 or h <= 0:
            raise ValueError(f"window size must be positive, got: {(w, h)}")
        return w, h
    section = _window_section(cfg)
    try:
        w = int(section.get("width", DEFAULT_SIZE[0]))
        h = int(section.get("height", DEFAULT_SIZE[1]))
    except (TypeError, ValueError):
        return DEFAULT_SIZE
    if w <= 0 or h <= 0:
        return DEFAULT_SIZE
    return w, h


def resolve_background(
    background: tuple[float, ...] | None, cfg: Mapping[str, Any] | None = None
) -> RGBA:
    """背景色 RGBA（0..1）を解決する。RGB 指定なら不透明として補う。"""
    raw: Any = background
    if raw is None:
        raw = _window_section(cfg).get("background", DEFAULT_BACKGROUND)
    try:
        values = [float(c) for c in raw]
    except (TypeError, ValueError):
        return DEFAULT_BACKGROUND
    if len(values) == 3:
        values.append(1.0)
    if len(values) != 4:
        return DEFAULT_BACKGROUND
    r, g, b, a = (max(0.0, min(1.0, c)) for c in values)
    return (r, g, b, a)


def resolve_caption(caption: str | None, cfg: Mapping[str, Any] | None = None) -> str:
    if caption is not None:
        return str(caption)
    return str(_window_section(cfg).get("caption", DEFAULT_CAPTION))
