"""
どこで: `rp5.cli`（コンソールエントリ）。
何を: `sys.argv` を読み、ロギングと設定を用意してから `Runner` に委譲する。
なぜ: `rp5` コマンドと `python -m rp5` の入口を 1 つにするため。
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from rp5.common.logging import setup_default_logging
from rp5.common.settings import load_settings
from rp5.exporters import CreateError, ExportError, UnpackError
from rp5.runner.dispatcher import Runner
from rp5.runner.options import parse

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI を実行して終了コードを返す。

    致命的な条件（スケッチ無し/同梱 jar 無し）は `SystemExit` としてそのまま伝播する。
    """
    setup_default_logging()
    tokens = list(sys.argv[1:] if argv is None else argv)
    options = parse(tokens)
    runner = Runner(load_settings())
    try:
        return runner.execute(options)
    except (CreateError, ExportError, UnpackError) as e:
        logger.debug("%s failed: %s", options.action.value, e, exc_info=True)
        print(e, file=sys.stderr)
        return 1


__all__ = ["main"]
