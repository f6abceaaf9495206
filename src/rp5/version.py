"""`rp5` のバージョン文字列（`rp5 --version` の表示と help に使用）。"""

VERSION = "2.6.2"
