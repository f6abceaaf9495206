"""共通フィクスチャ。

- tmp_path 上に最小のインストールルート（起動スクリプト/サンプル）を組み立てる
- プラットフォーム差し替え用のプロバイダ
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from rp5.common.settings import RunnerConfig
from rp5.util.platform import PlatformKind


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """利用者の ~/.rp5rc や RP5_* 環境変数の影響を受けないようにする。"""
    monkeypatch.delenv("RP5_ROOT", raising=False)
    monkeypatch.delenv("RP5_LOG_LEVEL", raising=False)
    monkeypatch.setenv("RP5_CONFIG", str(tmp_path / "no_such_rp5rc"))


@pytest.fixture()
def install_root(tmp_path: Path) -> Path:
    root = tmp_path / "rp5_root"
    runners = root / "lib" / "ruby-processing" / "runners"
    runners.mkdir(parents=True)
    for name in ("run.rb", "watch.rb", "live.rb"):
        (runners / name).write_text("# runner\n", encoding="utf-8")
    samples = root / "samples" / "basics"
    samples.mkdir(parents=True)
    (samples / "rotate.rb").write_text("def setup\nend\n", encoding="utf-8")
    (root / "library" / "vecmath").mkdir(parents=True)
    return root


@pytest.fixture()
def jar(install_root: Path) -> Path:
    path = install_root / "lib" / "ruby" / "jruby-complete.jar"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"PK")
    return path


@pytest.fixture()
def config(install_root: Path) -> RunnerConfig:
    return RunnerConfig(install_root=install_root)


@pytest.fixture()
def sketch(tmp_path: Path) -> Path:
    d = tmp_path / "sketches" / "wishy"
    d.mkdir(parents=True)
    path = d / "wishy.rb"
    path.write_text("def setup\nend\n", encoding="utf-8")
    return path


def _fixed(kind: PlatformKind) -> Callable[[], PlatformKind]:
    return lambda: kind


@pytest.fixture()
def linux() -> Callable[[], PlatformKind]:
    return _fixed(PlatformKind.LINUX)


@pytest.fixture()
def darwin() -> Callable[[], PlatformKind]:
    return _fixed(PlatformKind.DARWIN)
