"""
どこで: `rp5.exporters`（ランナーの協調コンポーネント）。
何を: スケッチ雛形の生成（Creator）、アプリ形式への書き出し（ApplicationExporter）、
      同梱サンプル/ライブラリの展開（Unpacker）。
なぜ: ランナー本体の判断ロジックから単純なファイル生成/コピー処理を分離するため。
"""

from .app import ApplicationExporter, ExportError
from .creator import CreateError, Creator
from .unpacker import UNPACK_TARGETS, UnpackError, unpack

__all__ = [
    "ApplicationExporter",
    "CreateError",
    "Creator",
    "ExportError",
    "UNPACK_TARGETS",
    "UnpackError",
    "unpack",
]
