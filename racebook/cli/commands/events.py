"""イベント一覧/取得コマンド"""

import click

from racebook.cli.formatters import dumps, format_events_table, to_json_dict
from racebook.cli.utils.errors import report_errors
from racebook.constants import DEFAULT_DB_PATH
from racebook.db import get_engine
from racebook.models import GetEventRequest, ListEventsFilter, ListEventsRequest
from racebook.repositories.events_repository import EventsRepository
from racebook.services import SportsService


@click.command("list-events")
@click.option("--db", default=DEFAULT_DB_PATH, show_default=True, type=click.Path(), help="DBファイルパス")
@click.option("--sport", "sports", multiple=True, help="競技名（複数指定可）")
@click.option("--league", "leagues", multiple=True, type=int, help="リーグID（複数指定可）")
@click.option("--side", "sides", multiple=True, help="ホーム/アウェイいずれかのチーム名（複数指定可）")
@click.option("--id", "ids", multiple=True, type=int, help="イベントID（複数指定可）")
@click.option("--visible/--hidden", default=None, help="表示フラグで絞り込み")
@click.option("--order-by", default=None, help='ソート指定（例: "sport, advertised_start_time desc"）')
@click.option("--json", "as_json", is_flag=True, default=False, help="JSONで出力")
def list_events(
    db: str,
    sports: tuple[str, ...],
    leagues: tuple[int, ...],
    sides: tuple[str, ...],
    ids: tuple[int, ...],
    visible: bool | None,
    order_by: str | None,
    as_json: bool,
):
    """イベント一覧を表示する"""
    engine = get_engine(db)
    try:
        with report_errors():
            repo = EventsRepository(engine)
            repo.init()
            request = ListEventsRequest(
                filter=ListEventsFilter(
                    sports=sports,
                    leagues=leagues,
                    visible=visible,
                    sides=sides,
                    ids=ids,
                ),
                order_by=order_by,
            )
            response = SportsService(repo).list_events(request)
    finally:
        engine.dispose()

    if as_json:
        click.echo(dumps([to_json_dict(event) for event in response.events]))
        return

    if not response.events:
        click.echo("該当するイベントはありません。")
        return

    click.echo(format_events_table(response.events))
    click.echo("")
    click.echo(f"{len(response.events)}件")


@click.command("get-event")
@click.argument("event_id", type=int)
@click.option("--db", default=DEFAULT_DB_PATH, show_default=True, type=click.Path(), help="DBファイルパス")
@click.option("--json", "as_json", is_flag=True, default=False, help="JSONで出力")
def get_event(event_id: int, db: str, as_json: bool):
    """IDを指定してイベントを1件表示する"""
    engine = get_engine(db)
    try:
        with report_errors():
            repo = EventsRepository(engine)
            repo.init()
            event = SportsService(repo).get_event(GetEventRequest(id=event_id))
    finally:
        engine.dispose()

    if as_json:
        click.echo(dumps(to_json_dict(event)))
        return

    click.echo(format_events_table([event]))
