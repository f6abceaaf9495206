"""
どこで: `rp5.exporters.creator`。
何を: 新規スケッチ `<name>.rb` を雛形（クラス版/ベア版、2D/P3D）から生成する。
なぜ: `rp5 create` で定型の setup/draw を毎回手書きしなくて済むようにするため。
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 500
DEFAULT_HEIGHT = 500

CLASS_TEMPLATE = """\
require 'ruby-processing'

class {class_name} < Processing::App
  def setup
    size {size}
  end

  def draw

  end
end

{class_name}.new unless defined? $app
"""

BARE_TEMPLATE = """\
def setup
  size {size}
end

def draw

end
"""


class CreateError(Exception):
    """スケッチを生成できない場合（既存ファイル/不正なサイズ指定）に送出される。"""


def camel_case(stem: str) -> str:
    """`my_sketch-01` -> `MySketch01`（Ruby のクラス名として使う）。"""
    words = [w for w in re.split(r"[^0-9A-Za-z]+", stem) if w]
    name = "".join(w[:1].upper() + w[1:] for w in words)
    if not name or name[0].isdigit():
        name = "Sketch" + name
    return name


def _parse_size(args: Sequence[str]) -> tuple[int, int]:
    try:
        width = int(args[0]) if len(args) > 0 else DEFAULT_WIDTH
        height = int(args[1]) if len(args) > 1 else DEFAULT_HEIGHT
    except ValueError as e:
        raise CreateError(f"width/height must be integers, got: {list(args[:2])}") from e
    if width <= 0 or height <= 0:
        raise CreateError(f"width/height must be positive, got: {(width, height)}")
    return width, height


class Creator:
    """スケッチ雛形の生成器。"""

    def render(self, name: str, args: Sequence[str], p3d: bool, bare: bool = False) -> str:
        width, height = _parse_size(args)
        size = f"{width}, {height}" + (", P3D" if p3d else "")
        if bare:
            return BARE_TEMPLATE.format(size=size)
        stem = Path(name).stem if name.endswith(".rb") else Path(name).name
        return CLASS_TEMPLATE.format(class_name=camel_case(stem), size=size)

    def create(
        self, name: str, args: Sequence[str], p3d: bool, bare: bool = False
    ) -> Path:
        """`name` に対応する `.rb` を書き出し、そのパスを返す。

        - `.rb` が無ければ付与する。親ディレクトリは必要に応じて作成する。
        - 既存ファイルは上書きしない（`CreateError`）。
        """
        path = Path(name if name.endswith(".rb") else name + ".rb")
        if path.exists():
            raise CreateError(f"{path} already exists")
        source = self.render(name, args, p3d, bare)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        logger.info("created sketch %s (p3d=%s, bare=%s)", path, p3d, bare)
        return path


__all__ = ["Creator", "CreateError", "camel_case"]
