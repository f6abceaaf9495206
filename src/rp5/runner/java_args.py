"""
どこで: `rp5.runner.java_args`（JVM 引数リゾルバ）。
何を: プラットフォーム固有項目 + スケッチ同梱ファイル or ユーザ設定 から JVM 追加引数を組み立てる。
なぜ: 引数の出所と優先順位（ファイル > 設定、両方は混ぜない）を 1 箇所で保証するため。

例:
    sketch/data/java_args.txt に `-Xmx256m -Xms256m` がある場合
    - system jruby 経由:   ["-J-Xmx256m", "-J-Xms256m"]
    - 同梱 jar（--nojruby）: ["-Xmx256m", "-Xms256m"]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rp5.common.settings import RunnerConfig
from rp5.util.platform import PlatformKind, PlatformProvider, current_platform

logger = logging.getLogger(__name__)

ARGS_FILE = Path("data") / "java_args.txt"
# jruby ランチャに「内側の JVM へ渡す」ことを指示する接頭辞
JVM_PASSTHROUGH = "-J"
DOCK_NAME = "Ruby-Processing"


def dock_items(config: RunnerConfig, kind: PlatformKind) -> list[str]:
    """Mac の Dock 表示用の項目（Darwin 以外は空）。"""
    if kind is not PlatformKind.DARWIN:
        return []
    return [f"-Xdock:name={DOCK_NAME}", f"-Xdock:icon={config.dock_icon}"]


def args_file_for(sketch_path: str) -> Path:
    return Path(sketch_path).parent / ARGS_FILE


def _read_args_file(path: Path) -> Optional[list[str]]:
    if not path.exists():
        return None
    # 非 UTF-8 バイトは surrogateescape で保持する
    return path.read_bytes().decode("utf-8", errors="surrogateescape").split()


def resolve(
    sketch_path: str,
    skip_system_runtime: bool,
    config: RunnerConfig,
    *,
    platform: PlatformProvider = current_platform,
) -> list[str]:
    """JVM 追加引数を返す。

    1) Darwin 系なら Dock 項目 2 つ
    2) `<sketch のディレクトリ>/data/java_args.txt` があればその空白区切りトークン
    3) 無ければ設定 `java_args` の空白区切りトークン
    4) `skip_system_runtime` が False なら全項目に `-J` を付ける

    ファイル/設定キーの欠如はエラーにしない。
    """
    args = dock_items(config, platform())

    arg_file = args_file_for(sketch_path)
    from_file = _read_args_file(arg_file)
    if from_file is not None:
        logger.debug("java args from %s: %s", arg_file, from_file)
        args += from_file
    elif config.java_args is not None:
        logger.debug("java args from config: %s", config.java_args)
        args += config.java_args.split()

    if not skip_system_runtime:
        args = [f"{JVM_PASSTHROUGH}{a}" for a in args]
    return args


__all__ = ["resolve", "dock_items", "args_file_for", "JVM_PASSTHROUGH"]
