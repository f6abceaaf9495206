"""
rp5 向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- CLI 入口から 1 度だけ `setup_default_logging()` を呼び、stderr への最小構成を適用する。
- ヘルプ/バージョン/致命的な診断は `print` で利用者へ直接出し、ログには流さない。
"""

from __future__ import annotations

import logging
import sys

from .env import env_str

DEFAULT_LEVEL = "WARNING"


def resolve_level(level: int | str | None = None) -> int:
    """ログレベルを解決する（引数 > `RP5_LOG_LEVEL` > WARNING）。"""
    if level is None:
        level = env_str("RP5_LOG_LEVEL", DEFAULT_LEVEL)
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 出力先は stderr（stdout はスケッチ側の出力と help 表示に残す）
    """
    root = logging.getLogger()
    if root.handlers:
        # Assume the host application has configured logging
        return
    logging.basicConfig(
        level=resolve_level(level),
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging", "resolve_level"]
