from sqlmodel import Field

from volley_stats.db.models.base import BaseModelDB

class Player(BaseModelDB, table=True):
    __tablename__ = "players"

    name: str = Field(nullable=False)
    jersey_number: int = Field(nullable=False)
