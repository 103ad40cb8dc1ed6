from fastapi import APIRouter, Depends, HTTPException, Path, status

from volley_stats.api.v1.dependencies import get_session_service
from volley_stats.core.errors import NotFoundError, ValidationError
from volley_stats.features.sessions.schemas import SessionCreateIn, SessionOut
from volley_stats.features.sessions.services import SessionService

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={404: {"description": "Not Found"}},
)


@router.post(
    "",
    summary="Créer une session",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionOut,
)
def create_session(payload: SessionCreateIn, svc: SessionService = Depends(get_session_service)):
    try:
        return svc.create(payload.name)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "/{session_id}",
    summary="Récupérer une session",
    response_model=SessionOut,
)
def get_session(
    session_id: int = Path(..., ge=1),
    svc: SessionService = Depends(get_session_service),
):
    try:
        return svc.get(session_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
