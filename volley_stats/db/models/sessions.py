from datetime import datetime, timezone

from sqlmodel import Field
from sqlalchemy import DateTime

from volley_stats.db.models.base import BaseModelDB

class StatsSession(BaseModelDB, table=True):
    """Fenêtre d'enregistrement nommée ; jamais modifiée ni supprimée par l'application."""
    __tablename__ = "sessions"

    name: str = Field(nullable=False)
    date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        nullable=False,
    )
