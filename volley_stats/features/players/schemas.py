from pydantic import BaseModel, ConfigDict, StrictInt, Field as PydField


# ---------- IN / UPDATE ----------

class PlayerCreateIn(BaseModel):
    name: str = PydField(..., description="Nom du joueur", examples=["Ana"])
    jersey_number: StrictInt = PydField(..., description="Numéro de maillot (entier positif)", examples=[7])


class PlayerUpdateIn(PlayerCreateIn):
    pass


# ---------- OUT ----------

class PlayerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    jersey_number: int


class PlayerDeleteOut(BaseModel):
    message: str
    deleted: bool
