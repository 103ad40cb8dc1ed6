"""
➡️ But : Enregistrer les passes notées et recalculer les agrégats par joueur.

PassStatService :
- record() : valide la note (0..3), vérifie session et joueur, insère, renvoie l'agrégat frais.
- undo_last() : supprime la passe la plus récente du couple (session, joueur) puis recalcule.
- session_stats() / player_stats() : agrégats COUNT/AVG, jamais mis en cache.

Les agrégats sont recalculés à chaque lecture depuis la table pass_stats.
"""

import logging
from typing import Any, List, Tuple

from volley_stats.core.errors import NotFoundError, ValidationError
from volley_stats.db.models.pass_stats import PassStat, MIN_RATING, MAX_RATING
from volley_stats.db.repositories.pass_stats import PassStatRepository
from volley_stats.db.repositories.players import PlayerRepository
from volley_stats.db.repositories.sessions import StatsSessionRepository
from volley_stats.features.pass_stats.schemas import PlayerStatsOut

logger = logging.getLogger(__name__)


def validate_rating(rating: Any) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError("Rating must be an integer")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return rating


class PassStatService:
    def __init__(
        self,
        *,
        pass_repo: PassStatRepository,
        player_repo: PlayerRepository,
        session_repo: StatsSessionRepository,
    ):
        self.passes = pass_repo
        self.players = player_repo
        self.sessions = session_repo

    # --------------- Helpers ---------------
    def _ensure_session_exists(self, session_id: int) -> None:
        if not self.sessions.get(session_id):
            raise NotFoundError("Session not found.")

    def _ensure_player_exists(self, player_id: int) -> None:
        if not self.players.get(player_id):
            raise NotFoundError("Player not found.")

    # --------------- Reads ---------------
    def session_stats(self, session_id: int) -> List[PlayerStatsOut]:
        return [PlayerStatsOut.model_validate(r) for r in self.passes.session_stats(session_id)]

    def player_stats(self, session_id: int, player_id: int) -> PlayerStatsOut:
        row = self.passes.player_stats(session_id, player_id)
        if row is None:
            return PlayerStatsOut(player_id=player_id)
        return PlayerStatsOut.model_validate(row)

    # --------------- Writes ---------------
    def record(self, session_id: int, player_id: int, rating: Any) -> Tuple[PassStat, PlayerStatsOut]:
        value = validate_rating(rating)
        self._ensure_session_exists(session_id)
        self._ensure_player_exists(player_id)

        created = self.passes.create(session_id=session_id, player_id=player_id, rating=value)
        logger.info("Pass %s recorded: session=%s player=%s rating=%s",
                    created.id, session_id, player_id, value)
        return created, self.player_stats(session_id, player_id)

    def undo_last(self, session_id: int, player_id: int) -> PlayerStatsOut:
        logger.info("Undoing last pass for session=%s player=%s", session_id, player_id)
        deleted_id = self.passes.delete_last(session_id, player_id)
        if deleted_id is None:
            logger.info("No passes found to undo")
            raise NotFoundError("No passes found to undo")
        logger.info("Pass %s deleted", deleted_id)
        return self.player_stats(session_id, player_id)
