"""CLIのエラー変換"""

from contextlib import contextmanager
from typing import Generator

import click
from sqlalchemy.exc import SQLAlchemyError

from racebook.exceptions import RacebookError


@contextmanager
def report_errors() -> Generator[None, None, None]:
    """リポジトリ/DBの例外をClickExceptionに変換する（終了コード1）"""
    try:
        yield
    except (RacebookError, SQLAlchemyError) as e:
        raise click.ClickException(str(e)) from e
