"""
➡️ But : Contenir la logique métier du registre des joueurs : valider, orchestrer le repo, lever les erreurs.

PlayerService : nom non vide, numéro de maillot entier positif, 404 si le joueur à modifier n'existe pas.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import Any, Sequence, Tuple

from volley_stats.core.errors import NotFoundError, ValidationError
from volley_stats.db.models.players import Player
from volley_stats.db.repositories.players import PlayerRepository

logger = logging.getLogger(__name__)


def validate_player_fields(name: Any, jersey_number: Any) -> Tuple[str, int]:
    """Retourne (nom nettoyé, numéro) ou lève ValidationError."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name and jersey number are required")
    # bool est un int en Python : on le refuse explicitement
    if isinstance(jersey_number, bool) or not isinstance(jersey_number, int):
        raise ValidationError("Jersey number must be an integer")
    if jersey_number <= 0:
        raise ValidationError("Jersey number must be a positive integer")
    return name.strip(), jersey_number


class PlayerService:
    def __init__(self, repo: PlayerRepository):
        self.repo = repo

    def list(self) -> Sequence[Player]:
        return self.repo.list()

    def get(self, player_id: int) -> Player:
        player = self.repo.get(player_id)
        if not player:
            raise NotFoundError("Player not found.")
        return player

    def create(self, name: Any, jersey_number: Any) -> Player:
        clean_name, number = validate_player_fields(name, jersey_number)
        player = self.repo.create(name=clean_name, jersey_number=number)
        logger.info("Player %s added (#%s, id=%s)", player.name, player.jersey_number, player.id)
        return player

    def update(self, player_id: int, name: Any, jersey_number: Any) -> Player:
        clean_name, number = validate_player_fields(name, jersey_number)
        player = self.get(player_id)
        return self.repo.update(player, name=clean_name, jersey_number=number)

    def delete(self, player_id: int) -> bool:
        """
        Suppression idempotente : retourne False si le joueur était déjà absent.
        Les passes du joueur sont supprimées avec lui.
        """
        player = self.repo.get(player_id)
        if not player:
            logger.info("Player %s already absent, nothing to delete", player_id)
            return False
        removed = self.repo.delete_with_passes(player)
        logger.info("Player %s deleted with %s pass(es)", player_id, removed)
        return True
