"""
どこで: `rp5.runner`（コア）。
何を: 引数パース → アクション振り分け → 存在確認/JVM 引数解決 → プロセス移譲。
なぜ: `rp5` の判断ロジック（優先順位・分岐・終了条件）をここに集約するため。
"""

from .dispatcher import HELP_MESSAGE, Runner
from .guard import SketchNotFound, ensure_exists
from .java_args import resolve
from .launcher import (
    LaunchCommand,
    MissingRuntimeArtifact,
    exec_replace,
    launch,
    spawn_and_wait,
)
from .options import Action, Options, parse

__all__ = [
    "Action",
    "HELP_MESSAGE",
    "LaunchCommand",
    "MissingRuntimeArtifact",
    "Options",
    "Runner",
    "SketchNotFound",
    "ensure_exists",
    "exec_replace",
    "launch",
    "parse",
    "resolve",
    "spawn_and_wait",
]
