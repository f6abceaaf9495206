import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from rp5.runner.options import FLAGS, parse

_plain = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters="-_./"),
    min_size=1,
    max_size=8,
).filter(lambda s: s not in FLAGS)


@given(
    tokens=st.lists(_plain, max_size=6),
    flags=st.lists(st.sampled_from(["--p3d", "--jruby", "--nojruby"]), max_size=4),
    data=st.data(),
)
def test_flag_position_does_not_change_positionals(tokens, flags, data):
    mixed = list(tokens)
    for flag in flags:
        pos = data.draw(st.integers(0, len(mixed)))
        mixed.insert(pos, flag)
    with_flags = parse(mixed, cwd="/tmp/sketch")
    without = parse(tokens, cwd="/tmp/sketch")
    assert with_flags.trailing_args == without.trailing_args
    assert with_flags.path == without.path
    assert with_flags.action is without.action
    assert with_flags.use_p3d == ("--p3d" in flags)
    assert with_flags.skip_system_runtime == ("--nojruby" in flags)
