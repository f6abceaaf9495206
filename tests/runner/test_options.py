from __future__ import annotations

import pytest

from rp5.runner.options import Action, default_sketch_path, parse


def test_parse_run_with_path() -> None:
    opts = parse(["run", "foo.rb"])
    assert opts.action is Action.RUN
    assert opts.path == "foo.rb"
    assert opts.trailing_args == []
    assert not opts.skip_system_runtime


def test_parse_create_with_size_and_p3d() -> None:
    opts = parse(["create", "mysketch", "640", "480", "--p3d"])
    assert opts.action is Action.CREATE
    assert opts.path == "mysketch"
    assert opts.trailing_args == ["640", "480"]
    assert opts.use_p3d is True


def test_flags_are_removed_wherever_they_occur() -> None:
    opts = parse(["--nojruby", "run", "--jruby", "a.rb", "x", "--bundler", "y", "--bare"])
    assert opts.action is Action.RUN
    assert opts.path == "a.rb"
    assert opts.trailing_args == ["x", "y"]
    assert opts.skip_system_runtime and opts.force_system_runtime
    assert opts.use_bundler and opts.bare
    assert not opts.use_p3d


def test_missing_path_defaults_to_cwd_basename(tmp_path) -> None:  # noqa: ANN001
    d = tmp_path / "my_sketch"
    d.mkdir()
    opts = parse(["run"], cwd=str(d))
    assert opts.path == "my_sketch.rb"
    assert default_sketch_path(str(d)) == "my_sketch.rb"


@pytest.mark.parametrize(
    "token, expected",
    [
        ("run", Action.RUN),
        ("watch", Action.WATCH),
        ("live", Action.LIVE),
        ("create", Action.CREATE),
        ("app", Action.APP),
        ("unpack", Action.UNPACK),
        ("bundle", Action.BUNDLE),
        ("-v", Action.VERSION),
        ("--version", Action.VERSION),
        ("-h", Action.HELP),
        ("--help", Action.HELP),
        ("version", Action.HELP),  # フラグ形のみ受け付ける
        ("Run", Action.HELP),
        ("frobnicate", Action.HELP),
    ],
)
def test_action_from_token(token: str, expected: Action) -> None:
    assert parse([token, "s.rb"]).action is expected


def test_empty_tokens_map_to_help() -> None:
    opts = parse([])
    assert opts.action is Action.HELP
    assert opts.trailing_args == []


def test_parse_does_not_mutate_input() -> None:
    tokens = ["run", "a.rb", "--p3d"]
    parse(tokens)
    assert tokens == ["run", "a.rb", "--p3d"]
