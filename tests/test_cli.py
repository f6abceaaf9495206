from __future__ import annotations

import pytest

from rp5 import cli
from rp5.version import VERSION


@pytest.mark.smoke
def test_main_version(capsys) -> None:  # noqa: ANN001
    assert cli.main(["-v"]) == 0
    assert VERSION in capsys.readouterr().out


@pytest.mark.smoke
def test_main_help_mentions_config_path(capsys, tmp_path) -> None:  # noqa: ANN001
    assert cli.main(["--help"]) == 0
    assert str(tmp_path / "no_such_rp5rc") in capsys.readouterr().out


def test_main_unpack_bad_target_returns_zero(capsys) -> None:  # noqa: ANN001
    assert cli.main(["unpack", "docs"]) == 0
    assert "Usage: rp5 unpack" in capsys.readouterr().out


def test_main_create_error_is_reported(tmp_path, monkeypatch, capsys) -> None:  # noqa: ANN001
    monkeypatch.chdir(tmp_path)
    (tmp_path / "taken.rb").write_text("", encoding="utf-8")
    assert cli.main(["create", "taken"]) == 1
    assert "already exists" in capsys.readouterr().err


@pytest.mark.integration
def test_main_run_missing_sketch_exits_nonzero(tmp_path, install_root, monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setenv("RP5_ROOT", str(install_root))
    with pytest.raises(SystemExit) as ei:
        cli.main(["run", str(tmp_path / "ghost.rb")])
    assert ei.value.code == 1


@pytest.mark.integration
def test_main_run_hands_off_to_jruby(sketch, install_root, monkeypatch) -> None:  # noqa: ANN001
    from rp5.runner import launcher

    monkeypatch.setenv("RP5_ROOT", str(install_root))
    captured = {}

    def _execvpe(file, argv, env):  # noqa: ANN001
        captured.update(file=file, argv=argv)
        raise SystemExit(0)

    monkeypatch.setattr(launcher.os, "execvpe", _execvpe)
    with pytest.raises(SystemExit):
        cli.main(["run", str(sketch), "--p3d", "extra"])
    assert captured["file"] == "jruby"
    assert captured["argv"][-2:] == [str(sketch), "extra"]


def test_main_logs_collaborator_failure(tmp_path, monkeypatch, caplog) -> None:  # noqa: ANN001
    monkeypatch.chdir(tmp_path)
    with caplog.at_level("DEBUG", logger="rp5.cli"):
        assert cli.main(["app", "ghost.rb"]) == 1
    assert "app failed" in caplog.text
