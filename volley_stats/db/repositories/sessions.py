from volley_stats.db.repositories.base import BaseRepository
from volley_stats.db.models.sessions import StatsSession


class StatsSessionRepository(BaseRepository[StatsSession]):
    model = StatsSession
