"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_choice, env_int

TIMER_CLOCKS = ("wall", "monotonic")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class _Settings:
    # Timer の既定時刻源（wall: UNIX epoch ms / monotonic: 単調時計 ms）
    TIMER_CLOCK: str = "wall"

    # ロギング
    LOG_LEVEL: str = "INFO"

    # ランナー
    DEFAULT_FPS: int = 60


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 選択肢型は `env_choice`、int は `env_int` を使用。
    - 不正値は既定値へフォールバックし、FPS は 1 以上に丸める。
    """
    _settings.TIMER_CLOCK = env_choice("PXW_TIMER_CLOCK", TIMER_CLOCKS, "wall")
    _settings.LOG_LEVEL = env_choice("PXW_LOG_LEVEL", LOG_LEVELS, "info").upper()
    _settings.DEFAULT_FPS = env_int("PXW_DEFAULT_FPS", 60, min_value=1) or 60


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "TIMER_CLOCKS"]
