"""
どこで: `rp5.runner.dispatcher`（コマンドディスパッチャ）。
何を: `Options.action` ごとにハンドラを 1 つ呼ぶ平坦な振り分け（中間状態なし）。
なぜ: アクションの追加漏れを表で検出でき、各ハンドラを個別にテストできるようにするため。

遷移:
- run/watch/live → 存在確認 → ランチャ（戻らない）
- create → Creator / app → ApplicationExporter / unpack → Unpacker
- bundle → 同梱 jar で `bundle install` を子プロセス実行して待つ
- version → バージョン表示 / help（未知の入力を含む）→ ヘルプ表示
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rp5.common.settings import RunnerConfig, default_config_path
from rp5.exporters import ApplicationExporter, Creator, unpack
from rp5.util.platform import PlatformProvider, current_platform
from rp5.version import VERSION

from .guard import ensure_exists
from .launcher import build_bundle_command, launch, spawn_and_wait
from .options import Action, Options

logger = logging.getLogger(__name__)

HELP_MESSAGE = """\
  Version: {version}

  Ruby-Processing is a little shim between Processing and JRuby that helps
  you create sketches of code art.

  Usage:
    rp5 [run | watch | live | create [width height] | app | unpack] path/to/sketch

    run:        run sketch once
    watch:      watch for changes on the file and relaunch it on the fly
    live:       launch sketch and give an interactive IRB shell
    create:     create new sketch. Use --bare to generate simpler sketches without a class
    app:        create an application version of the sketch
    unpack:     unpack samples or library
    bundle:     Runs `bundle install` using the vendored jarred jruby

  Common options:
    --nojruby:  do not use the installed version of jruby, instead use our vendored
                jarred one (required for shader sketches, and some others).
    --bundler:  Load bundler environment (has no effect when using system jruby)

  Configuration file:
    A YAML configuration file is located at {config_path}

    Possible options are:

      java_args:        pass additional arguments to Java VM upon launching.
                        Useful for increasing available memory (for example:
                        -Xms256m -Xmx256m) or force 32 bits mode (-d32).
      sketchbook_path:  specify Processing sketchbook path to load additional
                        libraries

  Examples:
    rp5 unpack samples
    rp5 run samples/contributed/jwishy.rb
    rp5 create some_new_sketch 640 480
    rp5 create some_new_sketch --p3d 640 480
    rp5 watch some_new_sketch.rb
    rp5 bundle
    rp5 run sketch.rb --nojruby --bundler

  Everything Else:
    http://wiki.github.com/jashkenas/ruby-processing
"""

# アクション -> 起動スクリプト名
RUNNER_SCRIPTS = {
    Action.RUN: "run.rb",
    Action.WATCH: "watch.rb",
    Action.LIVE: "live.rb",
}


class Runner:
    """`rp5` のアクションを実行する。

    設定（`RunnerConfig`）と協調オブジェクトは外から渡す。テストでは
    `platform` や `creator`/`exporter` を差し替えられる。
    """

    def __init__(
        self,
        config: RunnerConfig,
        *,
        platform: PlatformProvider = current_platform,
        creator: Optional[Creator] = None,
        exporter: Optional[ApplicationExporter] = None,
    ) -> None:
        self.config = config
        self.platform = platform
        self.creator = creator or Creator()
        self.exporter = exporter or ApplicationExporter()
        self._handlers: dict[Action, Callable[[Options], int]] = {
            Action.RUN: self._spin_up,
            Action.WATCH: self._spin_up,
            Action.LIVE: self._spin_up,
            Action.CREATE: self.create,
            Action.APP: self.app,
            Action.UNPACK: self.unpack,
            Action.BUNDLE: self.bundle,
            Action.VERSION: self.show_version,
            Action.HELP: self.show_help,
        }

    @property
    def handled_actions(self) -> frozenset[Action]:
        return frozenset(self._handlers)

    def execute(self, options: Options) -> int:
        """アクションを 1 つ実行し、終了コードを返す（run/watch/live は戻らない）。"""
        handler = self._handlers[options.action]
        logger.debug("dispatch %s path=%s", options.action.value, options.path)
        return handler(options)

    # --- アクション -------------------------------------------------------
    def _spin_up(self, options: Options) -> int:
        ensure_exists(options.path)
        launch(
            RUNNER_SCRIPTS[options.action],
            options.path,
            options.trailing_args,
            options,
            self.config,
            platform=self.platform,
        )

    def create(self, options: Options) -> int:
        path = self.creator.create(
            options.path, options.trailing_args, options.use_p3d, options.bare
        )
        print(f"Created {path}")
        return 0

    def app(self, options: Options) -> int:
        out = self.exporter.export(options.path)
        print(f"Exported {out}")
        return 0

    def unpack(self, options: Options) -> int:
        unpack(options.path, self.config)
        return 0

    def bundle(self, options: Options) -> int:  # noqa: ARG002
        status = spawn_and_wait(build_bundle_command(self.config))
        if status != 0:
            logger.error("bundle install exited with status %d", status)
        return status

    def show_version(self, options: Options) -> int:  # noqa: ARG002
        print(f"Ruby-Processing version {VERSION}")
        return 0

    def show_help(self, options: Options) -> int:  # noqa: ARG002
        config_path = self.config.config_path or default_config_path()
        print(HELP_MESSAGE.format(version=VERSION, config_path=config_path))
        return 0


__all__ = ["Runner", "HELP_MESSAGE", "RUNNER_SCRIPTS"]
