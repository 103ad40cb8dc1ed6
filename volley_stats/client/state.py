"""
➡️ But : État d'affichage explicite et sérialisable du tableau de marque.

ScoreboardState regroupe ce que l'interface garde en mémoire :
- la session courante,
- les joueurs connus,
- les cartes actives (6 au maximum, dans l'ordre d'affichage),
- les agrégats par joueur (remplacés en bloc à chaque réponse serveur),
- les lignes du formulaire d'ajout groupé.

🔹 Avantages :

Aucun état global dispersé : tout passe par cet objet (model_dump_json / model_validate_json).
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field as PydField

MAX_ACTIVE_CARDS = 6


class PlayerView(BaseModel):
    id: int
    name: str
    jersey_number: int


class PlayerStatsView(BaseModel):
    player_id: int
    name: Optional[str] = None
    jersey_number: Optional[int] = None
    total_passes: int = 0
    average_rating: float = 0.0


class PlayerFormRow(BaseModel):
    name: str = ""
    jersey_number: str = ""

    def is_filled(self) -> bool:
        return bool(self.name.strip() and self.jersey_number.strip())


def _blank_rows() -> List[PlayerFormRow]:
    return [PlayerFormRow()]


class ScoreboardState(BaseModel):
    session_id: Optional[int] = None
    players: List[PlayerView] = PydField(default_factory=list)
    active_ids: List[int] = PydField(default_factory=list)
    stats: Dict[int, PlayerStatsView] = PydField(default_factory=dict)
    form_rows: List[PlayerFormRow] = PydField(default_factory=_blank_rows)

    # -------- Players --------

    def get_player(self, player_id: int) -> Optional[PlayerView]:
        return next((p for p in self.players if p.id == player_id), None)

    def replace_players(self, rows: Iterable[Dict[str, Any]]) -> None:
        self.players = [PlayerView.model_validate(r) for r in rows]
        known = {p.id for p in self.players}
        self.active_ids = [pid for pid in self.active_ids if pid in known]

    def add_player(self, row: Dict[str, Any]) -> PlayerView:
        player = PlayerView.model_validate(row)
        self.players.append(player)
        return player

    def remove_player(self, player_id: int) -> None:
        self.players = [p for p in self.players if p.id != player_id]
        self.active_ids = [pid for pid in self.active_ids if pid != player_id]
        self.stats.pop(player_id, None)

    # -------- Active cards --------

    @property
    def active_players(self) -> List[PlayerView]:
        return [p for p in (self.get_player(pid) for pid in self.active_ids) if p is not None]

    @property
    def available_players(self) -> List[PlayerView]:
        return [p for p in self.players if p.id not in self.active_ids]

    def activate(self, player_id: int) -> bool:
        """Place le joueur sur une carte ; False si plein, inconnu ou déjà actif."""
        if len(self.active_ids) >= MAX_ACTIVE_CARDS:
            return False
        if player_id in self.active_ids or self.get_player(player_id) is None:
            return False
        self.active_ids.append(player_id)
        return True

    def deactivate(self, player_id: int) -> None:
        self.active_ids = [pid for pid in self.active_ids if pid != player_id]

    def move_left(self, player_id: int) -> None:
        if player_id not in self.active_ids:
            return
        idx = self.active_ids.index(player_id)
        if idx > 0:
            ids = self.active_ids
            ids[idx - 1], ids[idx] = ids[idx], ids[idx - 1]

    def move_right(self, player_id: int) -> None:
        if player_id not in self.active_ids:
            return
        idx = self.active_ids.index(player_id)
        if idx < len(self.active_ids) - 1:
            ids = self.active_ids
            ids[idx], ids[idx + 1] = ids[idx + 1], ids[idx]

    # -------- Stats --------

    def stats_for(self, player_id: int) -> PlayerStatsView:
        return self.stats.get(player_id) or PlayerStatsView(player_id=player_id)

    def merge_stats(self, row: Dict[str, Any]) -> PlayerStatsView:
        stat = PlayerStatsView.model_validate(row)
        self.stats[stat.player_id] = stat
        return stat

    def replace_stats(self, rows: Iterable[Dict[str, Any]]) -> None:
        self.stats = {s.player_id: s for s in (PlayerStatsView.model_validate(r) for r in rows)}

    # -------- Bulk entry form --------

    def add_form_row(self) -> None:
        self.form_rows.append(PlayerFormRow())

    def remove_form_row(self, index: int) -> None:
        rows = [r for i, r in enumerate(self.form_rows) if i != index]
        self.form_rows = rows or _blank_rows()

    def update_form_row(self, index: int, field: str, value: str) -> None:
        if field not in PlayerFormRow.model_fields:
            raise KeyError(field)
        row = self.form_rows[index]
        self.form_rows[index] = row.model_copy(update={field: value})

    def reset_form(self) -> None:
        self.form_rows = _blank_rows()

    def filled_form_rows(self) -> List[PlayerFormRow]:
        return [r for r in self.form_rows if r.is_filled()]
