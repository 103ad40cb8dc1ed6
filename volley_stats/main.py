"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l'instance FastAPI (app).

Configure :

CORS (autorisations de qui peut appeler ces API)

logs (stdout + fichier optionnel) et journal des requêtes

gestion des erreurs (400 / 404 / 500)

schéma OpenAPI personnalisé

Inclut les routers (ex : /api/players).

Initialise la base au démarrage (@app.on_event("startup")).

🔹 Avantages :

Point unique d'exécution : uvicorn volley_stats.main:app --reload.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from volley_stats.core.config import settings
from volley_stats.core.errors import StorageError
from volley_stats.core.logging import setup_logging
from volley_stats.core.openapi import custom_openapi
from volley_stats.db.session import init_db

from volley_stats.api.v1.routers import players, sessions, pass_stats

import uvicorn

setup_logging(log_dir=settings.LOG_DIR, level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "players", "description": "Registre des joueurs"},
        {"name": "sessions", "description": "Sessions d'enregistrement"},
        {"name": "pass_stats", "description": "Passes notées, agrégats, annulation et export"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)


# Journal des requêtes
@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


# -----------------------------
# Errors
# -----------------------------
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # champ manquant ou mal typé : 400 plutôt que le 422 par défaut
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal storage error"},
    )


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal storage error"},
    )


# Routers
app.include_router(players.router, prefix=settings.API_PREFIX)
app.include_router(sessions.router, prefix=settings.API_PREFIX)
app.include_router(pass_stats.router, prefix=settings.API_PREFIX)


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}


# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    init_db()

if __name__ == "__main__":
    uvicorn.run("volley_stats.main:app", host=settings.HOST, port=settings.PORT, reload=(settings.ENV == "dev"))
