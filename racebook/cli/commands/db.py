"""DB初期化コマンド"""

import click

from racebook.constants import DEFAULT_DB_PATH
from racebook.db import get_engine, init_db


@click.command("init-db")
@click.option("--db", default=DEFAULT_DB_PATH, show_default=True, type=click.Path(), help="DBファイルパス")
def init_database(db: str):
    """races/eventsテーブルを作成する（既存の場合は何もしない）"""
    engine = get_engine(db)
    try:
        init_db(engine)
    finally:
        engine.dispose()

    click.echo(f"データベースを初期化しました: {db}")
