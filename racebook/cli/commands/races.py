"""レース一覧コマンド"""

import click

from racebook.cli.formatters import dumps, format_races_table, to_json_dict
from racebook.cli.utils.errors import report_errors
from racebook.constants import DEFAULT_DB_PATH
from racebook.db import get_engine
from racebook.models import ListRacesFilter, ListRacesRequest
from racebook.repositories.races_repository import RacesRepository
from racebook.services import RacingService


@click.command("list-races")
@click.option("--db", default=DEFAULT_DB_PATH, show_default=True, type=click.Path(), help="DBファイルパス")
@click.option("--meeting-id", "meeting_ids", multiple=True, type=int, help="開催ID（複数指定可）")
@click.option("--visible/--hidden", default=None, help="表示フラグで絞り込み")
@click.option("--order-by", default=None, help='ソート指定（例: "advertised_start_time, name desc"）')
@click.option("--json", "as_json", is_flag=True, default=False, help="JSONで出力")
def list_races(
    db: str,
    meeting_ids: tuple[int, ...],
    visible: bool | None,
    order_by: str | None,
    as_json: bool,
):
    """レース一覧を表示する"""
    engine = get_engine(db)
    try:
        with report_errors():
            repo = RacesRepository(engine)
            repo.init()
            request = ListRacesRequest(
                filter=ListRacesFilter(meeting_ids=meeting_ids, visible=visible),
                order_by=order_by,
            )
            response = RacingService(repo).list_races(request)
    finally:
        engine.dispose()

    if as_json:
        click.echo(dumps([to_json_dict(race) for race in response.races]))
        return

    if not response.races:
        click.echo("該当するレースはありません。")
        return

    click.echo(format_races_table(response.races))
    click.echo("")
    click.echo(f"{len(response.races)}件")
