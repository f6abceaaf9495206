"""
どこで: `rp5.exporters.app`。
何を: スケッチと `data/` を `<name>_app/lib/` にまとめ、`rp5 run` を呼ぶ起動スクリプトを添える。
なぜ: スケッチ一式を 1 ディレクトリで持ち運べるようにするため（インストーラ生成は対象外）。
"""

from __future__ import annotations

import logging
import shlex
import shutil
import stat
from pathlib import Path

logger = logging.getLogger(__name__)

LAUNCHER_TEMPLATE = """\
#!/bin/sh
cd "$(dirname "$0")/lib" && exec rp5 run {sketch} "$@"
"""


class ExportError(Exception):
    """アプリ書き出しに失敗した場合（スケッチ無し/出力先が既存）に送出される。"""


class ApplicationExporter:
    """スケッチをアプリ形式のディレクトリへ書き出す。"""

    def __init__(self, dest_dir: Path | None = None) -> None:
        self.dest_dir = dest_dir

    def export(self, sketch: str) -> Path:
        """書き出し先ディレクトリを返す。"""
        src = Path(sketch)
        if not src.is_file():
            raise ExportError(f"Couldn't find: {sketch}")
        out = (self.dest_dir or Path.cwd()) / f"{src.stem}_app"
        if out.exists():
            raise ExportError(f"{out} already exists")

        lib = out / "lib"
        lib.mkdir(parents=True)
        shutil.copy2(src, lib / src.name)
        data = src.parent / "data"
        if data.is_dir():
            shutil.copytree(data, lib / "data")

        launcher = out / src.stem
        launcher.write_text(
            LAUNCHER_TEMPLATE.format(sketch=shlex.quote(src.name)), encoding="utf-8"
        )
        launcher.chmod(launcher.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        logger.info("exported %s -> %s", src, out)
        return out


__all__ = ["ApplicationExporter", "ExportError"]
