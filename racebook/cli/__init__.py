"""Click CLIメインモジュール"""

import logging

import click

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="DEBUGログ（生成SQLなど）を出力")
def main(verbose: bool):
    """レース/スポーツイベント参照CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
    )


# コマンドの登録
from racebook.cli.commands.db import init_database
from racebook.cli.commands.events import get_event, list_events
from racebook.cli.commands.races import list_races

main.add_command(init_database)
main.add_command(list_races)
main.add_command(list_events)
main.add_command(get_event)


__all__ = [
    "main",
]
