from datetime import datetime, timezone

from sqlmodel import Field
from sqlalchemy import CheckConstraint, DateTime

from volley_stats.db.models.base import BaseModelDB

MIN_RATING = 0
MAX_RATING = 3


class PassStat(BaseModelDB, table=True):
    __tablename__ = "pass_stats"
    __table_args__ = (
        CheckConstraint(
            f"rating BETWEEN {MIN_RATING} AND {MAX_RATING}",
            name="ck_pass_stats_rating_range",
        ),
    )

    session_id: int = Field(foreign_key="sessions.id", index=True, nullable=False)
    player_id: int = Field(foreign_key="players.id", index=True, nullable=False)

    rating: int = Field(nullable=False)
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        nullable=False,
        index=True,
    )
