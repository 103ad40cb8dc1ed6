"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée,

documenter les conventions communes (notes, erreurs, horodatage).
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de suivi des statistiques de réception (volley-ball).\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC, attribuées par le serveur.\n"
            "- Une note de passe est un entier entre 0 et 3.\n"
            "- Erreurs : `{\"detail\": ...}` avec 400 (entrée invalide), "
            "404 (introuvable / rien à annuler), 500 (stockage).\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
