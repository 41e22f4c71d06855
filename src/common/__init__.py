"""
どこで: `common` パッケージ。
何を: ロギング初期化・環境変数パース・型付き設定といった横断的ユーティリティ。
なぜ: engine/api のどの層からも依存できる最内層として、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
