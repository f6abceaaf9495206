"""
どこで: `rp5.common.env`
何を: 環境変数の軽量パースヘルパを提供。
なぜ: `RP5_ROOT`/`RP5_CONFIG`/`RP5_LOG_LEVEL` の読み取りを一箇所に寄せ、空文字や `~` を一貫して扱うため。
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """文字列環境変数を取得（未設定/空白のみは既定値）。"""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_path(name: str, default: Optional[Path] = None) -> Optional[Path]:
    """パス環境変数を取得する。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[Path]
        未設定時に返す値。

    Returns
    -------
    Optional[Path]
        `~` と `$VAR` を展開した Path。未設定/空の場合は `default`。
    """
    raw = env_str(name)
    if raw is None:
        return default
    return Path(os.path.expandvars(os.path.expanduser(raw)))


__all__ = ["env_str", "env_path"]
