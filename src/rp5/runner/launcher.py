"""
どこで: `rp5.runner.launcher`（プロセスランチャ）。
何を: ランタイム選択・環境変数・JVM 引数を 1 つの `LaunchCommand` にまとめ、プロセスへ制御を渡す。
なぜ: 「自プロセスを置き換える（戻らない）」と「子を起動して待つ」を別関数として明示し、取り違えを防ぐため。

制御移譲の 2 モデル:
- `exec_replace(cmd)`: 現プロセスのイメージを置き換える。成功時は決して戻らない。
  終了コードは置き換え先プロセスのものになる。
- `spawn_and_wait(cmd)`: 子プロセスを起動して終了を待ち、終了コードを返す（`bundle` 専用）。

起動形:
- 既定（system jruby）:
    jruby <java_args> <runner.rb> <sketch> <args...>
- `--nojruby`（同梱 jar）:
    GEM_HOME=<gem_home> GEM_PATH=<gem_home> java <java_args> -cp <jar> org.jruby.Main <runner.rb> <sketch> <args...>
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, NoReturn, Sequence

from rp5.common.settings import RunnerConfig
from rp5.util.platform import PlatformProvider, current_platform

from .java_args import resolve
from .options import Options

logger = logging.getLogger(__name__)

SYSTEM_RUNTIME = "jruby"
JAVA = "java"
JRUBY_MAIN = "org.jruby.Main"
INSTALL_HINT = "Try running `install_jruby_complete`"


class MissingRuntimeArtifact(SystemExit):
    """同梱 `jruby-complete.jar` が必要なのに存在しない場合の終了要求（終了コード 1）。"""

    def __init__(self, path: Path) -> None:
        super().__init__(1)
        self.path = path


@dataclass(frozen=True)
class LaunchCommand:
    """最終的に実行するコマンド（1 度だけ消費される）。

    - `program`: PATH から探索されるプログラム名。
    - `env`: 現環境へ上書きする変数。
    - `args`: `program` に続く平坦化済み引数列。
    """

    program: str
    args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def command_line(self) -> str:
        """`VAR=value program args...` 形式の 1 行表現（ログ/表示用）。"""
        env_part = [f"{k}={shlex.quote(v)}" for k, v in self.env.items()]
        return " ".join(env_part + [shlex.join(self.argv)])

    def environ(self) -> dict[str, str]:
        merged = dict(os.environ)
        merged.update(self.env)
        return merged


def _flatten(*parts: str | Sequence[str] | Path) -> tuple[str, ...]:
    out: list[str] = []
    for p in parts:
        if isinstance(p, (str, Path)):
            out.append(str(p))
        else:
            out.extend(str(x) for x in p)
    return tuple(out)


def require_jruby_complete(config: RunnerConfig) -> Path:
    """同梱 jar のパスを返す。無ければ案内を出して `MissingRuntimeArtifact` で終了する。"""
    jar = config.jruby_complete
    if jar.exists():
        return jar
    print(f"{jar} does not exist\n{INSTALL_HINT}", file=sys.stderr)
    raise MissingRuntimeArtifact(jar)


def vendored_env(config: RunnerConfig, *, use_bundler: bool = False) -> dict[str, str]:
    """同梱 jar 経路で上書きする環境変数（`vendors/gem_home` を gem の置き場とする）。"""
    gem_home = str(config.gem_home)
    env = {"GEM_HOME": gem_home, "GEM_PATH": gem_home}
    if use_bundler:
        env["RUBYOPT"] = "-rbundler/setup"
    return env


def build_command(
    script_name: str,
    sketch_path: str,
    trailing_args: Sequence[str],
    options: Options,
    config: RunnerConfig,
    *,
    platform: PlatformProvider = current_platform,
) -> LaunchCommand:
    """起動スクリプト名・スケッチ・後続引数から `LaunchCommand` を組み立てる。"""
    runner = config.runner_script(script_name)
    java_args = resolve(sketch_path, options.skip_system_runtime, config, platform=platform)
    if options.force_system_runtime:
        logger.warning("The --jruby flag is no longer required")

    if options.skip_system_runtime:
        jar = require_jruby_complete(config)
        return LaunchCommand(
            program=JAVA,
            args=_flatten(java_args, "-cp", jar, JRUBY_MAIN, runner, sketch_path, trailing_args),
            env=vendored_env(config, use_bundler=options.use_bundler),
        )
    if options.use_bundler:
        logger.info("--bundler has no effect when using system jruby")
    return LaunchCommand(
        program=SYSTEM_RUNTIME,
        args=_flatten(java_args, runner, sketch_path, trailing_args),
    )


def build_bundle_command(config: RunnerConfig) -> LaunchCommand:
    """同梱 jar で `bundle install` を走らせるコマンド。"""
    jar = require_jruby_complete(config)
    return LaunchCommand(
        program=JAVA,
        args=_flatten("-jar", jar, "-S", "bundle", "install"),
        env=vendored_env(config),
    )


def exec_replace(command: LaunchCommand) -> NoReturn:
    """現プロセスを `command` で置き換える（戻らない）。

    起動失敗（PATH に無い等）は OS が報告する `OSError` としてそのまま伝播する。
    """
    logger.debug("exec: %s", command.command_line())
    sys.stdout.flush()
    sys.stderr.flush()
    os.execvpe(command.program, command.argv, command.environ())


def spawn_and_wait(command: LaunchCommand) -> int:
    """子プロセスとして `command` を起動し、終了を待って終了コードを返す。"""
    logger.debug("spawn: %s", command.command_line())
    completed = subprocess.run(command.argv, env=command.environ(), check=False)
    return completed.returncode


def launch(
    script_name: str,
    sketch_path: str,
    trailing_args: Sequence[str],
    options: Options,
    config: RunnerConfig,
    *,
    platform: PlatformProvider = current_platform,
) -> NoReturn:
    """スケッチ用ランタイムへ制御を渡す。成功時は戻らない。"""
    command = build_command(
        script_name, sketch_path, trailing_args, options, config, platform=platform
    )
    exec_replace(command)


__all__ = [
    "LaunchCommand",
    "MissingRuntimeArtifact",
    "build_command",
    "build_bundle_command",
    "exec_replace",
    "spawn_and_wait",
    "launch",
    "require_jruby_complete",
    "vendored_env",
]
