"""`python -m rp5` 用エントリポイント。"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
