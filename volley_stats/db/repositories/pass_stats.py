from dataclasses import dataclass
from typing import List, Optional

from sqlmodel import select, func
from sqlalchemy import and_

from volley_stats.db.repositories.base import BaseRepository
from volley_stats.db.models.pass_stats import PassStat
from volley_stats.db.models.players import Player


@dataclass
class PlayerAggregateRow:
    """Ligne brute de la requête d'agrégation (jamais persistée)."""
    player_id: int
    name: Optional[str]
    jersey_number: Optional[int]
    total_passes: int
    average_rating: float


class PassStatRepository(BaseRepository[PassStat]):
    model = PassStat

    # ---------- AGGREGATES ----------

    def _aggregate_statement(self, session_id: int):
        # LEFT JOIN : un joueur sans passe dans la session ressort avec 0
        return (
            select(
                Player.id.label("player_id"),
                Player.name,
                Player.jersey_number,
                func.count(PassStat.id).label("total_passes"),
                func.avg(PassStat.rating).label("average_rating"),
            )
            .select_from(Player)
            .join(
                PassStat,
                and_(PassStat.player_id == Player.id, PassStat.session_id == session_id),
                isouter=True,
            )
            .group_by(Player.id, Player.name, Player.jersey_number)
        )

    @staticmethod
    def _to_row(row) -> PlayerAggregateRow:
        # AVG renvoie NULL sans passe, et un Decimal sur Postgres
        avg = row.average_rating
        return PlayerAggregateRow(
            player_id=row.player_id,
            name=row.name,
            jersey_number=row.jersey_number,
            total_passes=int(row.total_passes or 0),
            average_rating=float(avg) if avg is not None else 0.0,
        )

    def session_stats(self, session_id: int) -> List[PlayerAggregateRow]:
        stmt = self._aggregate_statement(session_id).order_by(Player.id.asc())
        return [self._to_row(r) for r in self.session.exec(stmt).all()]

    def player_stats(self, session_id: int, player_id: int) -> Optional[PlayerAggregateRow]:
        stmt = self._aggregate_statement(session_id).where(Player.id == player_id)
        row = self.session.exec(stmt).first()
        return self._to_row(row) if row is not None else None

    # ---------- UNDO ----------

    def get_last(self, session_id: int, player_id: int, *, lock: bool = False) -> Optional[PassStat]:
        """
        Dernière passe du couple (session, joueur).
        Ordre : timestamp décroissant puis id décroissant (départage des horodatages égaux).
        """
        stmt = (
            select(PassStat)
            .where(PassStat.session_id == session_id, PassStat.player_id == player_id)
            .order_by(PassStat.timestamp.desc(), PassStat.id.desc())
            .limit(1)
        )
        if lock:
            # ignoré par SQLite, verrou de ligne sur Postgres
            stmt = stmt.with_for_update()
        return self.session.exec(stmt).first()

    def delete_last(self, session_id: int, player_id: int) -> Optional[int]:
        """
        Supprime la dernière passe dans une seule transaction.
        Retourne l'id supprimé, ou None s'il n'y avait rien à supprimer.
        """
        last = self.get_last(session_id, player_id, lock=True)
        if last is None:
            self.session.rollback()
            return None
        deleted_id = last.id
        self.session.delete(last)
        self.commit()
        return deleted_id
