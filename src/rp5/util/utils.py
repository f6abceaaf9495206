from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# インストールルートの目印（起動スクリプト群の置き場所）
_ROOT_MARKER = Path("lib") / "ruby-processing"


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


def find_install_root(start: Path) -> Path:
    """インストールルートを推定して返す。

    - `start` から上位へ辿り、`lib/ruby-processing/` を含むもっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (parent / _ROOT_MARKER).is_dir():
            return parent
    # 典型: <repo>/src/rp5 -> <repo>
    return cur.parent.parent


def load_config(path: Optional[Path]) -> Dict[str, Any]:
    """ユーザ設定 YAML を読み込んで辞書で返す（フェイルソフト）。

    - 存在しない/読めない/マッピングでない場合は空辞書を返す。
    - 認識するキーは `java_args` と `sketchbook_path`。それ以外もそのまま残す。
    """
    if path is None or not path.exists():
        return {}
    return _safe_load_yaml(path)
