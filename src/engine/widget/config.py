"""
どこで: `engine.widget` の設定ストア。
何を: ウィジェットごとのキー/値ストア `Configurable` と、既知キー定数を提供。
なぜ: 位置/大きさ/色などの共有プロパティを、ウィジェット種別に依らない一様な形で保持するため。

補足:
- 値の型検証は行わない（解釈は各ウィジェットの責務）。
- 未登録キーの参照は例外にせず既定値を返す。
"""

from __future__ import annotations

from typing import Any, Iterator

CONFIG_ORIGIN = "origin"
CONFIG_BODY_SIZE = "body_size"
CONFIG_MAIN_COLOR = "main_color"
CONFIG_INVALIDATE = "invalidate"


class Configurable:
    """文字列キーで任意値を保持する小さなストア。"""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def remove(self, key: str) -> None:
        """キーを削除する（未登録なら何もしない）。"""
        self._values.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self._values

    def keys(self) -> list[str]:
        return list(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Configurable({self._values!r})"


__all__ = [
    "Configurable",
    "CONFIG_ORIGIN",
    "CONFIG_BODY_SIZE",
    "CONFIG_MAIN_COLOR",
    "CONFIG_INVALIDATE",
]
