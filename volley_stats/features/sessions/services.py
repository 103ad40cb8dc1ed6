import logging
from typing import Any

from volley_stats.core.errors import NotFoundError, ValidationError
from volley_stats.db.models.sessions import StatsSession
from volley_stats.db.repositories.sessions import StatsSessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self, repo: StatsSessionRepository):
        self.repo = repo

    def create(self, name: Any) -> StatsSession:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Session name is required")
        created = self.repo.create(name=name.strip())
        logger.info("Session %s created (%s)", created.id, created.name)
        return created

    def get(self, session_id: int) -> StatsSession:
        found = self.repo.get(session_id)
        if not found:
            raise NotFoundError("Session not found.")
        return found
