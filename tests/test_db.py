"""データベース接続モジュールのテスト"""

import threading
from pathlib import Path

from sqlalchemy import Engine, inspect, text

from racebook.db import get_engine, init_db


class TestGetEngine:
    """get_engine関数のテスト"""

    def test_エンジンを作成できる(self, tmp_path: Path) -> None:
        """SQLiteエンジンを作成できることを確認"""
        engine = get_engine(str(tmp_path / "test.db"))

        try:
            assert isinstance(engine, Engine)
            assert "sqlite" in str(engine.url)
        finally:
            engine.dispose()

    def test_指定したパスにデータベースファイルを作成する(self, tmp_path: Path) -> None:
        """親ディレクトリごとSQLiteファイルが作成されることを確認"""
        db_path = tmp_path / "subdir" / "test.db"
        engine = get_engine(str(db_path))

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))

            assert db_path.exists()
        finally:
            engine.dispose()

    def test_メモリDBは接続間で共有される(self) -> None:
        """インメモリDBが別接続・別スレッドからも見えることを確認"""
        engine = get_engine(":memory:")

        try:
            with engine.begin() as conn:
                conn.execute(text("CREATE TABLE t (id INTEGER PRIMARY KEY)"))
                conn.execute(text("INSERT INTO t (id) VALUES (1)"))

            results = []

            def read():
                with engine.connect() as conn:
                    results.append(conn.execute(text("SELECT id FROM t")).scalar())

            thread = threading.Thread(target=read)
            thread.start()
            thread.join()

            assert results == [1]
        finally:
            engine.dispose()


class TestInitDb:
    """init_db関数のテスト"""

    def test_races_eventsテーブルを作成する(self, tmp_path: Path) -> None:
        engine = get_engine(str(tmp_path / "test.db"))

        try:
            init_db(engine)
            init_db(engine)  # 複数回呼び出しても安全

            assert set(inspect(engine).get_table_names()) >= {"races", "events"}
        finally:
            engine.dispose()
