from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictInt, Field as PydField


# ---------- IN ----------

class PassStatCreateIn(BaseModel):
    session_id: int
    player_id: int
    rating: StrictInt = PydField(..., description="Note de la passe (0 à 3)", examples=[2])


# ---------- OUT ----------

class PlayerStatsOut(BaseModel):
    """Agrégat (total_passes, average_rating) d'un joueur dans une session."""
    model_config = ConfigDict(from_attributes=True)

    player_id: int
    name: Optional[str] = None
    jersey_number: Optional[int] = None
    total_passes: int = 0
    average_rating: float = 0.0


class PassStatOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: int
    player_id: int
    rating: int
    timestamp: datetime


class PassStatWithStatsOut(PassStatOut):
    stats: PlayerStatsOut


class UndoPassOut(BaseModel):
    message: str
    stats: PlayerStatsOut
