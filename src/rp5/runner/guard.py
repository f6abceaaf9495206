"""
どこで: `rp5.runner.guard`。
何を: 起動前にスケッチパスの存在を確認し、無ければ診断を出して終了する。
なぜ: 存在しないスケッチでランタイム（JVM）を立ち上げる無駄を避けるため。
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)


class SketchNotFound(SystemExit):
    """スケッチパスが存在しない場合に送出される終了要求（終了コード 1）。"""

    def __init__(self, path: str) -> None:
        super().__init__(1)
        self.path = path


def ensure_exists(path: str) -> None:
    """`path` が存在しなければメッセージを出して `SketchNotFound` で終了する。"""
    if os.path.exists(path):
        return
    print(f"Couldn't find: {path}", file=sys.stderr)
    logger.debug("sketch path missing: %s (cwd=%s)", path, os.getcwd())
    raise SketchNotFound(path)


__all__ = ["SketchNotFound", "ensure_exists"]
