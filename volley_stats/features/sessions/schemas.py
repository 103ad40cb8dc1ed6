from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field as PydField


class SessionCreateIn(BaseModel):
    name: str = PydField(..., description="Nom de la session", examples=["Session 18/10/2026 19:30"])


class SessionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    date: datetime
