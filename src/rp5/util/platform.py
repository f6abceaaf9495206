"""
どこで: `rp5.util.platform`。
何を: ホスト OS の種別を `PlatformKind` として返す小さなプロバイダ。
なぜ: OS 文字列の判定を 1 箇所に閉じ込め、テストで差し替えられるようにするため。
"""

from __future__ import annotations

import platform
import sys
from enum import Enum, auto
from typing import Callable


class PlatformKind(Enum):
    """ランナーが区別するホスト種別。"""

    DARWIN = auto()
    LINUX = auto()
    WINDOWS = auto()
    OTHER = auto()


PlatformProvider = Callable[[], PlatformKind]


def classify(host_os: str) -> PlatformKind:
    """OS 名文字列を分類する（`darwin`/`mac` は大文字小文字を無視して Darwin 系）。"""
    s = host_os.lower()
    if "darwin" in s or "mac" in s:
        return PlatformKind.DARWIN
    if s.startswith("linux"):
        return PlatformKind.LINUX
    if s.startswith(("win", "cygwin", "msys")):
        return PlatformKind.WINDOWS
    return PlatformKind.OTHER


def current_platform() -> PlatformKind:
    """実行中ホストの `PlatformKind` を返す。"""
    kind = classify(sys.platform)
    if kind is PlatformKind.OTHER:
        # Jython などでは sys.platform が "java..." になるため OS 名で再判定
        kind = classify(platform.system())
    return kind


__all__ = ["PlatformKind", "PlatformProvider", "classify", "current_platform"]
