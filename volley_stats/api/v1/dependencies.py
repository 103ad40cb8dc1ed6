"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_player_service() : crée un PlayerService à partir d'une session DB.

get_pass_stat_service() : assemble les trois repositories nécessaires aux passes.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à remplacer dans les tests (app.dependency_overrides[get_session]).
"""

from fastapi import Depends
from sqlmodel import Session

from volley_stats.db.session import get_session

from volley_stats.db.repositories.players import PlayerRepository
from volley_stats.db.repositories.sessions import StatsSessionRepository
from volley_stats.db.repositories.pass_stats import PassStatRepository

from volley_stats.features.players.services import PlayerService
from volley_stats.features.sessions.services import SessionService
from volley_stats.features.pass_stats.services import PassStatService


# -----------------------------
# Repositories
# -----------------------------
def get_player_repository(session: Session = Depends(get_session)) -> PlayerRepository:
    return PlayerRepository(session)

def get_session_repository(session: Session = Depends(get_session)) -> StatsSessionRepository:
    return StatsSessionRepository(session)

def get_pass_stat_repository(session: Session = Depends(get_session)) -> PassStatRepository:
    return PassStatRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_player_service(
    player_repo: PlayerRepository = Depends(get_player_repository),
) -> PlayerService:
    return PlayerService(player_repo)

def get_session_service(
    session_repo: StatsSessionRepository = Depends(get_session_repository),
) -> SessionService:
    return SessionService(session_repo)

def get_pass_stat_service(
    pass_repo: PassStatRepository = Depends(get_pass_stat_repository),
    player_repo: PlayerRepository = Depends(get_player_repository),
    session_repo: StatsSessionRepository = Depends(get_session_repository),
) -> PassStatService:
    # FastAPI met get_session en cache par requête : les trois repos partagent la même session
    return PassStatService(
        pass_repo=pass_repo,
        player_repo=player_repo,
        session_repo=session_repo,
    )
