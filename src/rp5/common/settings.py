"""
どこで: `rp5.common.settings`
何を: インストールルートとユーザ設定（YAML）を束ねた `RunnerConfig` を生成する。
なぜ: ルート定数や設定辞書をグローバル参照せず、Resolver/Launcher へ明示的に渡すため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from rp5.util.utils import find_install_root, load_config

from .env import env_path

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".rp5rc"

# インストールルートからの固定相対パス
RUNNERS_DIR = Path("lib") / "ruby-processing" / "runners"
JRUBY_COMPLETE = Path("lib") / "ruby" / "jruby-complete.jar"
GEM_HOME = Path("vendors") / "gem_home"
DOCK_ICON = (
    Path("lib") / "templates" / "application" / "Contents" / "Resources" / "sketch.icns"
)


def default_config_path() -> Path:
    """ユーザ設定ファイルの既定位置（`RP5_CONFIG` > `~/.rp5rc`）。"""
    return env_path("RP5_CONFIG", Path.home() / CONFIG_FILE_NAME)  # type: ignore[return-value]


@dataclass(frozen=True)
class RunnerConfig:
    """ランナー 1 回分の実行設定（不変）。

    - `install_root`: 起動スクリプト/同梱 jar/サンプルを含むルート。
    - `config`: ユーザ設定 YAML の内容（読めなければ空辞書）。
    - `config_path`: 読み込み元（help 表示用）。
    """

    install_root: Path
    config: Mapping[str, Any] = field(default_factory=dict)
    config_path: Optional[Path] = None

    def runner_script(self, script_name: str) -> Path:
        return self.install_root / RUNNERS_DIR / script_name

    @property
    def jruby_complete(self) -> Path:
        return self.install_root / JRUBY_COMPLETE

    @property
    def gem_home(self) -> Path:
        return self.install_root / GEM_HOME

    @property
    def dock_icon(self) -> Path:
        return self.install_root / DOCK_ICON

    @property
    def java_args(self) -> Optional[str]:
        """設定の `java_args`（空白区切り文字列）。

        - YAML のリストは要素を空白で連結して受け付ける。
        - 未設定/空/マッピングは None（マッピングは警告を出す）。
        """
        raw = self.config.get("java_args")
        if raw is None:
            return None
        if isinstance(raw, (list, tuple)):
            text = " ".join(str(a) for a in raw if a is not None)
        elif isinstance(raw, dict):
            logger.warning("ignoring java_args: expected a string or a list, got a mapping")
            return None
        else:
            text = str(raw)
        return text if text.strip() else None

    @property
    def sketchbook_path(self) -> Optional[str]:
        # 起動先ランタイムが参照する。ランナー自身は解釈しない。
        raw = self.config.get("sketchbook_path")
        return None if raw is None else str(raw)


def load_settings(
    install_root: Optional[Path] = None, config_path: Optional[Path] = None
) -> RunnerConfig:
    """`RunnerConfig` を構築して返す。

    優先順:
    - ルート: 引数 > `RP5_ROOT` > パッケージ位置からの探索
    - 設定: 引数 > `RP5_CONFIG` > `~/.rp5rc`
    """
    root = (
        install_root
        or env_path("RP5_ROOT")
        or find_install_root(Path(__file__).resolve().parents[1])
    )
    cfg_path = config_path or default_config_path()
    return RunnerConfig(
        install_root=Path(root),
        config=load_config(cfg_path),
        config_path=cfg_path,
    )


__all__ = ["RunnerConfig", "load_settings", "default_config_path", "CONFIG_FILE_NAME"]
