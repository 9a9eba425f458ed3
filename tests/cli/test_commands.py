"""CLIコマンドのテスト"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from click.testing import CliRunner
from sqlalchemy.orm import Session

from racebook.cli import main
from racebook.db import get_engine, init_db
from racebook.models import EventRecord, RaceRecord


class TestCommands:
    """list-races / list-events / get-event / init-db のテスト"""

    @pytest.fixture
    def runner(self):
        """CliRunner fixture"""
        return CliRunner()

    @pytest.fixture
    def temp_db(self, tmp_path):
        """テスト用データ入りのSQLiteデータベースを作成"""
        db_path = tmp_path / "test.db"
        engine = get_engine(str(db_path))
        init_db(engine)

        past = (datetime.now(timezone.utc) - timedelta(hours=1)).replace(tzinfo=None)
        future = (datetime.now(timezone.utc) + timedelta(hours=1)).replace(tzinfo=None)

        with Session(engine) as session, session.begin():
            session.add_all(
                [
                    RaceRecord(id=1, meeting_id=5, name="Alpha", number=2, visible=True, advertised_start_time=past),
                    RaceRecord(id=2, meeting_id=6, name="Bravo", number=1, visible=False, advertised_start_time=future),
                    EventRecord(
                        id=1,
                        sport="football",
                        league=3,
                        home_side_name="Lions",
                        away_side_name="Tigers",
                        visible=True,
                        advertised_start_time=future,
                    ),
                    EventRecord(
                        id=2,
                        sport="tennis",
                        league=12,
                        home_side_name="Smith",
                        away_side_name="Jones",
                        visible=True,
                        advertised_start_time=past,
                    ),
                ]
            )
        engine.dispose()
        return str(db_path)

    def test_init_db(self, runner, tmp_path):
        db_path = tmp_path / "new" / "racebook.db"

        result = runner.invoke(main, ["init-db", "--db", str(db_path)])

        assert result.exit_code == 0
        assert db_path.exists()

    def test_list_races_table(self, runner, temp_db):
        result = runner.invoke(main, ["list-races", "--db", temp_db, "--order-by", "number"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split()[:4] == ["ID", "MEETING", "NO", "NAME"]
        assert "Bravo" in lines[2]
        assert "Alpha" in lines[3]
        assert "2件" in result.output

    def test_list_races_filter_json(self, runner, temp_db):
        result = runner.invoke(
            main, ["list-races", "--db", temp_db, "--meeting-id", "5", "--visible", "--json"]
        )

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert [race["id"] for race in payload] == [1]
        assert payload[0]["status"] == "CLOSED"
        assert payload[0]["advertised_start_time"].endswith("+00:00")

    def test_list_races_empty(self, runner, temp_db):
        result = runner.invoke(main, ["list-races", "--db", temp_db, "--meeting-id", "99"])

        assert result.exit_code == 0
        assert "該当するレースはありません" in result.output

    def test_list_events_by_side(self, runner, temp_db):
        result = runner.invoke(main, ["list-events", "--db", temp_db, "--side", "Tigers", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert [event["name"] for event in payload] == ["Lions vs Tigers"]
        assert payload[0]["status"] == "OPEN"

    def test_list_events_table(self, runner, temp_db):
        result = runner.invoke(main, ["list-events", "--db", temp_db, "--order-by", "sport desc"])

        assert result.exit_code == 0
        assert "Smith vs Jones" in result.output.splitlines()[2]

    def test_get_event(self, runner, temp_db):
        result = runner.invoke(main, ["get-event", "2", "--db", temp_db, "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["sport"] == "tennis"

    def test_get_event_not_found(self, runner, temp_db):
        result = runner.invoke(main, ["get-event", "42", "--db", temp_db])

        assert result.exit_code == 1
        assert "no event with id: 42" in result.output
