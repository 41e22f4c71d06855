"""
どこで: `common.env`
何を: 環境変数の軽量パースヘルパ（int/選択肢）を提供。
なぜ: 各所に散在する `os.getenv` + 例外/境界ガードを簡素化するため。
"""

from __future__ import annotations

import os
from typing import Iterable, Optional


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得（存在しない/不正値は既定値）。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        既定値（`None` を渡すと `None` を許容）。
    min_value : Optional[int]
        下限（指定時、結果が下回れば下限に丸める）。

    Returns
    -------
    Optional[int]
        取得した整数値。未設定/不正時は `default` を返す。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """選択肢のいずれかを取る文字列環境変数を取得する。

    大文字/小文字は無視し、小文字へ正規化して返す。候補外・未設定は `default`。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    allowed = {c.lower() for c in choices}
    return s if s in allowed else default


__all__ = ["env_int", "env_choice"]
