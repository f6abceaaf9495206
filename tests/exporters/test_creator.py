from __future__ import annotations

import pytest

from rp5.exporters.creator import CreateError, Creator, camel_case


def test_create_class_sketch(tmp_path) -> None:  # noqa: ANN001
    path = Creator().create(str(tmp_path / "my_sketch"), ["640", "480"], p3d=False)
    assert path == tmp_path / "my_sketch.rb"
    src = path.read_text(encoding="utf-8")
    assert "class MySketch < Processing::App" in src
    assert "size 640, 480\n" in src
    assert "MySketch.new unless defined? $app" in src


def test_create_bare_p3d_with_defaults(tmp_path) -> None:  # noqa: ANN001
    path = Creator().create(str(tmp_path / "cube.rb"), [], p3d=True, bare=True)
    src = path.read_text(encoding="utf-8")
    assert "class" not in src
    assert "size 500, 500, P3D" in src


def test_create_refuses_to_overwrite(tmp_path) -> None:  # noqa: ANN001
    (tmp_path / "dup.rb").write_text("keep", encoding="utf-8")
    with pytest.raises(CreateError):
        Creator().create(str(tmp_path / "dup"), [], p3d=False)
    assert (tmp_path / "dup.rb").read_text(encoding="utf-8") == "keep"


@pytest.mark.parametrize("args", [["wide"], ["640", "0"]])
def test_create_rejects_bad_size(tmp_path, args) -> None:  # noqa: ANN001
    with pytest.raises(CreateError):
        Creator().create(str(tmp_path / "bad"), args, p3d=False)
    assert not (tmp_path / "bad.rb").exists()


@pytest.mark.parametrize(
    "stem, expected",
    [("my_sketch", "MySketch"), ("jwishy", "Jwishy"), ("fire-01", "Fire01"), ("3d_box", "Sketch3dBox")],
)
def test_camel_case(stem: str, expected: str) -> None:
    assert camel_case(stem) == expected
