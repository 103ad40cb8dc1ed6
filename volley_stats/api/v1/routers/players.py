"""
➡️ But : Définir les endpoints du registre des joueurs.

C'est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Les routes ne contiennent ni SQL ni logique métier.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from volley_stats.api.v1.dependencies import get_player_service
from volley_stats.core.errors import NotFoundError, ValidationError
from volley_stats.features.players.schemas import (
    PlayerCreateIn,
    PlayerUpdateIn,
    PlayerOut,
    PlayerDeleteOut,
)
from volley_stats.features.players.services import PlayerService

router = APIRouter(
    prefix="/players",
    tags=["players"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les joueurs",
    description="Retourne tous les joueurs, dans l'ordre d'insertion.",
    response_model=List[PlayerOut],
)
def list_players(svc: PlayerService = Depends(get_player_service)):
    return svc.list()


@router.post(
    "",
    summary="Ajouter un joueur",
    status_code=status.HTTP_201_CREATED,
    response_model=PlayerOut,
)
def create_player(payload: PlayerCreateIn, svc: PlayerService = Depends(get_player_service)):
    try:
        return svc.create(payload.name, payload.jersey_number)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put(
    "/{player_id}",
    summary="Mettre à jour un joueur",
    response_model=PlayerOut,
)
def update_player(
    payload: PlayerUpdateIn,
    player_id: int = Path(..., ge=1),
    svc: PlayerService = Depends(get_player_service),
):
    try:
        return svc.update(player_id, payload.name, payload.jersey_number)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/{player_id}",
    summary="Supprimer un joueur (et ses passes)",
    description="Idempotent : `deleted` vaut false si le joueur était déjà absent.",
    response_model=PlayerDeleteOut,
)
def delete_player(player_id: int, svc: PlayerService = Depends(get_player_service)):
    deleted = svc.delete(player_id)
    message = "Player deleted successfully" if deleted else "Player already absent"
    return PlayerDeleteOut(message=message, deleted=deleted)
