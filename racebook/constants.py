"""Constants for the racebook query layer."""

# 発走/開始時刻から導出するステータス
STATUS_OPEN = "OPEN"
STATUS_CLOSED = "CLOSED"

# イベント表示名の区切り（"<home> vs <away>"）
EVENT_NAME_SEPARATOR = " vs "

# CLIのデフォルトDBファイル
DEFAULT_DB_PATH = "data/racebook.db"
