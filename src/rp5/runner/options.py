"""
どこで: `rp5.runner.options`（引数パーサ）。
何を: 生のトークン列を `Options`（アクション/パス/後続引数/真偽フラグ）へ変換する。
なぜ: 位置に依存しないフラグ除去と位置引数の解釈を、検証抜きの純関数として切り出すため。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

SKETCH_EXT = ".rb"


class Action(Enum):
    """`rp5` が受け付けるアクション（閉じた列挙）。"""

    RUN = "run"
    WATCH = "watch"
    LIVE = "live"
    CREATE = "create"
    APP = "app"
    UNPACK = "unpack"
    BUNDLE = "bundle"
    VERSION = "version"
    HELP = "help"

    @classmethod
    def from_token(cls, token: Optional[str]) -> "Action":
        """先頭トークンをアクションへ写像する。

        - コマンド名は完全一致（`version`/`help` はフラグ形のみ受け付ける）
        - `-v` を含む（`-v`/`--version`）→ VERSION、`-h` を含む → HELP
        - それ以外/未指定 → HELP
        """
        if token is None:
            return cls.HELP
        if token in _COMMANDS:
            return cls(token)
        if "-v" in token:
            return cls.VERSION
        return cls.HELP


_COMMANDS = frozenset(
    a.value for a in Action if a not in (Action.VERSION, Action.HELP)
)

# フラグ名 -> Options 属性名
FLAGS = {
    "--p3d": "use_p3d",
    "--jruby": "force_system_runtime",
    "--nojruby": "skip_system_runtime",
    "--bundler": "use_bundler",
    "--bare": "bare",
}


@dataclass
class Options:
    """1 回の起動分のオプション。"""

    action: Action = Action.HELP
    path: str = ""
    trailing_args: list[str] = field(default_factory=list)
    use_p3d: bool = False
    force_system_runtime: bool = False  # --jruby（非推奨、警告のみ）
    skip_system_runtime: bool = False  # --nojruby（同梱 jar を使う）
    use_bundler: bool = False
    bare: bool = False


def default_sketch_path(cwd: Optional[str] = None) -> str:
    """パス省略時の既定値（カレントディレクトリ名 + `.rb`）。"""
    return Path(cwd or os.getcwd()).name + SKETCH_EXT


def parse(tokens: Sequence[str], *, cwd: Optional[str] = None) -> Options:
    """トークン列を `Options` に変換する（失敗しない）。

    認識したフラグはどの位置にあっても取り除き、残りを位置引数として解釈する:
    `tokens[0]` → action、`tokens[1]` → path、以降 → trailing_args。
    action/path の妥当性はここでは検証しない。
    """
    opts = Options()
    rest: list[str] = []
    for tok in tokens:
        attr = FLAGS.get(tok)
        if attr is not None:
            setattr(opts, attr, True)
        else:
            rest.append(tok)

    opts.action = Action.from_token(rest[0] if rest else None)
    opts.path = rest[1] if len(rest) > 1 else default_sketch_path(cwd)
    opts.trailing_args = rest[2:]
    return opts


__all__ = ["Action", "Options", "FLAGS", "parse", "default_sketch_path"]
