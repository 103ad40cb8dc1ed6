"""
➡️ But : Endpoints d'enregistrement des passes, d'agrégats par session, d'annulation et d'export.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.responses import StreamingResponse
import io

from volley_stats.api.v1.dependencies import get_pass_stat_service
from volley_stats.core.errors import NotFoundError, ValidationError
from volley_stats.features.export import services as export
from volley_stats.features.pass_stats.schemas import (
    PassStatCreateIn,
    PassStatOut,
    PassStatWithStatsOut,
    PlayerStatsOut,
    UndoPassOut,
)
from volley_stats.features.pass_stats.services import PassStatService

router = APIRouter(
    tags=["pass_stats"],
    responses={404: {"description": "Not Found"}},
)


@router.post(
    "/pass_stats",
    summary="Enregistrer une passe notée",
    description="Insère une passe (note 0 à 3) et renvoie l'agrégat à jour du joueur pour la session.",
    status_code=status.HTTP_201_CREATED,
    response_model=PassStatWithStatsOut,
)
def create_pass_stat(payload: PassStatCreateIn, svc: PassStatService = Depends(get_pass_stat_service)):
    try:
        created, stats = svc.record(payload.session_id, payload.player_id, payload.rating)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PassStatWithStatsOut(**PassStatOut.model_validate(created).model_dump(), stats=stats)


@router.get(
    "/session/{session_id}/stats",
    summary="Statistiques de la session",
    description="Un agrégat par joueur enregistré, y compris ceux sans passe (0 / 0).",
    response_model=List[PlayerStatsOut],
)
def get_session_stats(
    session_id: int = Path(..., ge=1),
    svc: PassStatService = Depends(get_pass_stat_service),
):
    return svc.session_stats(session_id)


@router.get(
    "/session/{session_id}/player/{player_id}/stats",
    summary="Statistiques d'un joueur dans la session",
    response_model=PlayerStatsOut,
)
def get_player_stats(
    session_id: int = Path(..., ge=1),
    player_id: int = Path(..., ge=1),
    svc: PassStatService = Depends(get_pass_stat_service),
):
    return svc.player_stats(session_id, player_id)


@router.delete(
    "/session/{session_id}/player/{player_id}/last_pass",
    summary="Annuler la dernière passe d'un joueur",
    response_model=UndoPassOut,
    responses={404: {"description": "No passes found to undo"}},
)
def undo_last_pass(
    session_id: int = Path(..., ge=1),
    player_id: int = Path(..., ge=1),
    svc: PassStatService = Depends(get_pass_stat_service),
):
    try:
        stats = svc.undo_last(session_id, player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UndoPassOut(message="Last pass deleted successfully", stats=stats)


@router.get(
    "/session/{session_id}/export",
    summary="Exporter les statistiques (xlsx ou pdf)",
)
def export_session_stats(
    session_id: int = Path(..., ge=1),
    format: export.ExportFormat = Query(export.ExportFormat.xlsx),
    svc: PassStatService = Depends(get_pass_stat_service),
):
    stats = {s.player_id: s for s in svc.session_stats(session_id)}
    try:
        content, media_type, filename = export.render(stats, format)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return StreamingResponse(
        io.BytesIO(content),
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
