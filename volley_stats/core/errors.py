"""
➡️ But : Taxonomie d'erreurs commune au serveur et au client.

ValidationError -> 400, NotFoundError -> 404, StorageError -> 500.
Aucune erreur n'est rejouée automatiquement : elles terminent la requête.
"""


class ValidationError(ValueError):
    """Entrée manquante ou mal formée."""


class NotFoundError(LookupError):
    """Ressource absente (joueur, session, ou aucune passe à annuler)."""


class StorageError(Exception):
    """Échec de la couche d'accès aux données."""
