"""SQLiteリソースリポジトリの共通実装"""

import logging
import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import Connection, Engine

from racebook.exceptions import RowScanError
from racebook.query.catalog import LIST
from racebook.query.filters import compile_filter
from racebook.query.materializer import materialize
from racebook.query.ordering import compile_order
from racebook.query.resources import ResourceSpec

logger = logging.getLogger(__name__)

T = TypeVar("T")

Seeder = Callable[[Connection], None]


class SQLResourceRepository(Generic[T]):
    """単一テーブルを読み出す汎用リポジトリ

    フィルタ・ソート・行の変換はResourceSpecで切り替える。
    Engineはスレッド間で共有でき、list()は呼び出しごとに接続を取得する。
    """

    def __init__(
        self, engine: Engine, spec: ResourceSpec, seeder: Seeder | None = None
    ) -> None:
        """初期化

        Args:
            engine: SQLAlchemyのEngine
            spec: リソース定義
            seeder: init()時に一度だけ呼ばれるデータ投入関数（省略可）
        """
        self.engine = engine
        self.spec = spec
        self._seeder = seeder
        self._init_lock = threading.Lock()
        self._initialized = False
        self._init_error: Exception | None = None

    def init(self) -> None:
        """テーブル作成とデータ投入を一度だけ実行する

        2回目以降の呼び出しは何もしない。初回が失敗していた場合は
        同じ例外を再送出する。

        Raises:
            Exception: 初回の初期化で発生した例外
        """
        with self._init_lock:
            if not self._initialized:
                self._initialized = True
                try:
                    self._setup()
                except Exception as e:
                    logger.warning("Failed to initialize %s repository: %s", self.spec.name, e)
                    self._init_error = e

        if self._init_error is not None:
            raise self._init_error

    def _setup(self) -> None:
        with self.engine.begin() as conn:
            self.spec.table.create(conn, checkfirst=True)
            if self._seeder is not None:
                self._seeder(conn)
        logger.info("Initialized %s repository", self.spec.name)

    def build_query(
        self, filter: Any = None, order_by: str | None = None
    ) -> tuple[str, list[Any]]:
        """一覧取得用のSQLと位置引数を組み立てる

        WHERE句の後にORDER BY句を付ける。

        Args:
            filter: フィルタ（Noneなら絞り込み無し）
            order_by: ソート指定文字列（Noneならソート無し）

        Returns:
            (SQL, 位置引数のリスト)
        """
        query = self.spec.queries[LIST]
        query, args = compile_filter(query, filter, self.spec.predicates)
        query = compile_order(query, order_by, self.spec.sortable_fields)
        return query, args

    def list(self, filter: Any = None, order_by: str | None = None) -> list[T]:
        """条件に合う行を取得してドメインオブジェクトのリストを返す

        Args:
            filter: フィルタ（Noneなら絞り込み無し）
            order_by: ソート指定文字列（例: "advertised_start_time, name desc"）

        Returns:
            ドメインオブジェクトのリスト（該当なしの場合は空リスト）

        Raises:
            sqlalchemy.exc.DBAPIError: クエリ実行に失敗した場合
            RowScanError: 行の変換に失敗した場合
        """
        query, args = self.build_query(filter, order_by)
        logger.debug("%s list query: %s (%d args)", self.spec.name, query, len(args))

        with self.engine.connect() as conn:
            rows = conn.exec_driver_sql(query, tuple(args)).fetchall()

        try:
            return materialize(rows, self.spec.row_factory)
        except RowScanError as e:
            logger.warning("Failed to scan %s rows: %s", self.spec.name, e)
            raise
