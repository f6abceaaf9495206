"""
どこで: `rp5` 入口（パッケージ）。
何を: バージョン情報と CLI エントリ `main` を再輸出。
なぜ: `python -m rp5` とコンソールスクリプトの双方から同じ入口を使えるようにするため。

rp5: Ruby-Processing スケッチを JRuby 上で起動するコマンドディスパッチャ

Usage:
    rp5 run path/to/sketch.rb
    rp5 create my_sketch 640 480 --p3d
    rp5 run sketch.rb --nojruby --bundler
"""

from .version import VERSION

__all__ = [
    "VERSION",
    "__version__",
]

# バージョン情報
__version__ = VERSION
