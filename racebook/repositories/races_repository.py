"""レースリポジトリ"""

from sqlalchemy import Engine

from racebook.models.resources import Race
from racebook.query.resources import RACES
from racebook.repositories.base import Seeder, SQLResourceRepository


class RacesRepository(SQLResourceRepository[Race]):
    """racesテーブルのリポジトリ

    list(filter: ListRacesFilter | None, order_by: str | None) -> list[Race]
    """

    def __init__(self, engine: Engine, seeder: Seeder | None = None) -> None:
        super().__init__(engine, RACES, seeder)
