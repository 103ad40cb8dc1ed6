import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from sqlmodel import Session, select

from volley_stats.core.errors import ValidationError
from volley_stats.db.models.players import Player
from volley_stats.features.players.services import validate_player_fields

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "seed_data.yaml"


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Seed YAML must contain a root mapping.")
    return data


# -----------------------------
# Seed Players
# -----------------------------
def seed_players(session: Session, data: Dict[str, Any]) -> int:
    """
    Seed idempotent de l'effectif.
    - Si au moins un joueur existe déjà, on ne réinsère rien.
    - Utilise la clé YAML `players:` (name, jersey_number).
    """
    if session.exec(select(Player)).first():
        logger.info("Players already exist, nothing inserted.")
        return 0

    players: List[Dict[str, Any]] = data.get("players") or []
    if not players:
        logger.warning("No players in seed YAML (key 'players').")
        return 0

    objs: List[Player] = []
    for i, p in enumerate(players):
        try:
            name, number = validate_player_fields(p.get("name"), p.get("jersey_number"))
        except ValidationError as e:
            raise ValueError(f"Invalid player at index {i}: {e}") from e
        objs.append(Player(name=name, jersey_number=number))

    session.add_all(objs)
    session.commit()
    logger.info("%s players inserted.", len(objs))
    return len(objs)


def seed_all(session: Session, seed_path: Union[str, Path]) -> None:
    data = load_seed_yaml(seed_path)
    seed_players(session, data)
