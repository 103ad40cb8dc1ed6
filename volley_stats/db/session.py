"""
➡️ But : Configurer la base (SQLite ou Postgres) et gérer les sessions de base de données.

engine : connexion construite depuis settings.DATABASE_URL (sqlite:///volleyball.db par défaut).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)).
"""

import logging
from typing import Dict, Any, Optional
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from volley_stats.db.models.players import Player
from volley_stats.db.models.sessions import StatsSession
from volley_stats.db.models.pass_stats import PassStat

from volley_stats.core.config import settings

logger = logging.getLogger(__name__)

def _build_engine() -> Engine:
    url = settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = settings.is_sqlite

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    # echo seulement en dev pour ne pas polluer les logs en prod
    engine = create_engine(
        url,
        echo=(settings.ENV == "dev"),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres ; inutile pour SQLite
    )
    return engine

engine: Engine = _build_engine()

def init_db(bind: Optional[Engine] = None) -> None:
    """
    Crée les tables si elles n'existent pas (players, sessions, pass_stats).
    """
    target = bind or engine
    SQLModel.metadata.create_all(target)
    logger.info("Database tables initialized (%s)", target.url.get_backend_name())


def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
