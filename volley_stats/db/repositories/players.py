from sqlmodel import select

from volley_stats.db.repositories.base import BaseRepository

from volley_stats.db.models.players import Player
from volley_stats.db.models.pass_stats import PassStat

class PlayerRepository(BaseRepository[Player]):
    model = Player

    def delete_with_passes(self, player: Player) -> int:
        """
        Supprime le joueur et toutes ses passes dans une même transaction.
        Retourne le nombre de passes supprimées.
        """
        passes = self.session.exec(select(PassStat).where(PassStat.player_id == player.id)).all()
        for p in passes:
            self.session.delete(p)
        # les passes doivent partir avant le joueur (FK sur Postgres)
        self._flush()
        self.session.delete(player)
        self.commit()
        return len(passes)
