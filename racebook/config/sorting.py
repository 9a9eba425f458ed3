"""ソート可能フィールド設定

order_by で指定できる論理フィールド名と実際のカラム名の対応。
カラム名はプレースホルダにできないため、ここに無いフィールドは無視される。
"""

RACE_SORTABLE_FIELDS: dict[str, str] = {
    "name": "name",
    "number": "number",
    "advertised_start_time": "advertised_start_time",
}

EVENT_SORTABLE_FIELDS: dict[str, str] = {
    "home_side_name": "home_side_name",
    "away_side_name": "away_side_name",
    "league": "league",
    "sport": "sport",
    "advertised_start_time": "advertised_start_time",
}
