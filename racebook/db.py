"""データベース接続モジュール

SQLAlchemyを使用してSQLiteデータベースへの接続を管理する。
"""

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

from racebook.models.base import Base


def get_engine(db_path: str, timeout: float | None = None) -> Engine:
    """SQLiteデータベースエンジンを作成する

    エンジンはプロセス内で共有される。接続はプールから呼び出しごとに払い出される。

    Args:
        db_path: データベースファイルのパス。
                 ":memory:" を指定するとインメモリDBを作成。
        timeout: ロック待ちのタイムアウト秒数（Noneの場合はドライバのデフォルト）

    Returns:
        SQLAlchemyのEngineオブジェクト
    """
    connect_args: dict = {}
    if timeout is not None:
        connect_args["timeout"] = timeout

    # インメモリDBは全接続で同じDBを共有させる
    if db_path == ":memory:":
        connect_args["check_same_thread"] = False
        return create_engine(
            "sqlite://", connect_args=connect_args, poolclass=StaticPool
        )

    parent_dir = Path(db_path).parent
    parent_dir.mkdir(parents=True, exist_ok=True)

    url = f"sqlite:///{db_path}"
    return create_engine(url, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """データベースのテーブルを初期化する

    Base.metadata.create_all()を呼び出し、
    定義されているすべてのテーブルを作成する。
    すでにテーブルが存在する場合は何もしない（冪等性あり）。

    Args:
        engine: SQLAlchemyのEngineオブジェクト
    """
    Base.metadata.create_all(engine)
