"""
どこで: `rp5.common`。
何を: 環境変数ヘルパ・ロギング初期化・実行設定（`RunnerConfig`）をまとめる。
なぜ: ランナー各部が暗黙のグローバルに頼らず、同じ設定値を明示的に受け取れるようにするため。
"""

from .logging import setup_default_logging
from .settings import RunnerConfig, load_settings

__all__ = ["RunnerConfig", "load_settings", "setup_default_logging"]
