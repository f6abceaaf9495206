"""
どこで: `rp5.exporters.unpacker`。
何を: インストールルート同梱の `samples`/`library` をカレントディレクトリへコピーする。
なぜ: 利用者が手元でサンプルを実行・改変できるようにするため。
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Optional

from rp5.common.settings import RunnerConfig

logger = logging.getLogger(__name__)

UNPACK_TARGETS = ("samples", "library")
USAGE = "Usage: rp5 unpack [samples | library]"


class UnpackError(Exception):
    """展開元ディレクトリがインストールルートに存在しない場合に送出される。"""


def unpack(target: str, config: RunnerConfig, dest_dir: Optional[Path] = None) -> Optional[Path]:
    """`target` を `dest_dir`（既定はカレント）直下へコピーし、コピー先を返す。

    `target` が `samples`/`library` 以外なら使用法を表示して None を返す（終了はしない）。
    """
    if target not in UNPACK_TARGETS:
        print(USAGE)
        return None
    src = config.install_root / target
    if not src.is_dir():
        raise UnpackError(f"{src} does not exist")
    dest = (dest_dir or Path.cwd()) / target
    shutil.copytree(src, dest, dirs_exist_ok=True)
    logger.info("unpacked %s -> %s", src, dest)
    return dest


__all__ = ["unpack", "UnpackError", "UNPACK_TARGETS", "USAGE"]
