"""
➡️ But : Contrôleur côté client : relie les actions du marqueur aux appels API
et réhydrate ScoreboardState depuis les réponses du serveur.

Les erreurs visibles par l'utilisateur passent par le callback `notify`
(l'équivalent des alertes bloquantes de l'interface).
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from volley_stats.client.api import ApiClient
from volley_stats.client.state import PlayerFormRow, PlayerStatsView, ScoreboardState
from volley_stats.core.errors import NotFoundError, StorageError, ValidationError
from volley_stats.features.export import services as export

logger = logging.getLogger(__name__)

RATINGS = (0, 1, 2, 3)


def _log_notify(message: str) -> None:
    logger.warning(message)


class Scorer:
    def __init__(
        self,
        api: ApiClient,
        *,
        state: Optional[ScoreboardState] = None,
        notify: Callable[[str], None] = _log_notify,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.api = api
        self.state = state or ScoreboardState()
        self.notify = notify
        self.clock = clock

    # -------- Start-up --------

    def start(self) -> None:
        """Crée la session puis charge les joueurs ; un échec n'empêche pas l'autre étape."""
        try:
            self.create_session()
        except (ValidationError, StorageError) as e:
            logger.error("Error creating session: %s", e)
        try:
            self.fetch_players()
        except StorageError as e:
            logger.error("Error fetching players: %s", e)

    def create_session(self) -> int:
        created = self.api.create_session(f"Session {self.clock():%d/%m/%Y %H:%M:%S}")
        self.state.session_id = created["id"]
        logger.info("Session created: %s", self.state.session_id)
        return self.state.session_id

    def _require_session(self) -> int:
        # création paresseuse si le démarrage a échoué
        if self.state.session_id is None:
            logger.info("No session id, creating new session")
            return self.create_session()
        return self.state.session_id

    # -------- Players --------

    def fetch_players(self) -> None:
        self.state.replace_players(self.api.list_players())

    def add_player(self, row: PlayerFormRow) -> bool:
        name = row.name.strip()
        if not name:
            self.notify("Please enter a player name")
            return False
        try:
            number = int(row.jersey_number)
        except ValueError:
            self.notify("Please enter a valid jersey number")
            return False

        try:
            created = self.api.add_player(name, number)
        except (ValidationError, StorageError) as e:
            logger.error("Error adding player %s: %s", name, e)
            self.notify(f"Failed to add player {name}. Please try again.")
            return False
        self.state.add_player(created)
        return True

    def add_players_from_form(self) -> int:
        """Ajoute chaque ligne remplie du formulaire ; réinitialise le formulaire si au moins un succès."""
        success_count = sum(1 for row in self.state.filled_form_rows() if self.add_player(row))
        if success_count > 0:
            self.notify(f"Successfully added {success_count} player(s)!")
            self.state.reset_form()
        return success_count

    def delete_player(self, player_id: int) -> None:
        try:
            self.api.delete_player(player_id)
        except StorageError as e:
            logger.error("Error deleting player %s: %s", player_id, e)
            return
        self.state.remove_player(player_id)

    # -------- Passes --------

    def record_pass(self, player_id: int, rating: int) -> Optional[PlayerStatsView]:
        if isinstance(rating, bool) or not isinstance(rating, int) or rating not in RATINGS:
            raise ValidationError(f"Rating must be one of {RATINGS}")
        session_id = self._require_session()
        try:
            created = self.api.add_pass(session_id, player_id, rating)
        except (ValidationError, NotFoundError, StorageError) as e:
            logger.error("Error adding pass for player %s: %s", player_id, e)
            return None
        return self.state.merge_stats(created["stats"])

    def undo_pass(self, player_id: int) -> Optional[PlayerStatsView]:
        session_id = self.state.session_id
        if session_id is None:
            logger.info("No session id available for undo")
            return None
        try:
            data = self.api.undo_last_pass(session_id, player_id)
        except NotFoundError:
            self.notify("No passes to undo")
            return None
        except (ValidationError, StorageError) as e:
            logger.error("Error undoing pass for player %s: %s", player_id, e)
            self.notify("Failed to undo pass. Please try again.")
            return None

        if data.get("stats"):
            return self.state.merge_stats(data["stats"])
        self.refresh_stats()
        return self.state.stats_for(player_id)

    def refresh_stats(self) -> None:
        if self.state.session_id is None:
            logger.info("No session id available for fetching stats")
            return
        self.state.replace_stats(self.api.session_stats(self.state.session_id))

    # -------- Export --------

    def export(self, fmt: str, directory: Union[str, Path] = ".") -> Path:
        """Écrit volleyball_stats.<fmt> depuis les statistiques en cache."""
        content, _, filename = export.render(self.state.stats, fmt)
        target = Path(directory) / filename
        target.write_bytes(content)
        return target
