import logging
from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, Session, select
from sqlalchemy.exc import SQLAlchemyError

from volley_stats.core.errors import StorageError

logger = logging.getLogger(__name__)

# Type générique pour le modèle (Player, StatsSession, PassStat)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, list.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Toute erreur SQLAlchemy à l'écriture devient une StorageError (après rollback).
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- TRANSACTION ----------

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Commit failed for %s", self.model.__name__)
            raise StorageError("Database write failed.") from exc

    def _flush(self) -> None:
        try:
            self.session.flush()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Flush failed for %s", self.model.__name__)
            raise StorageError("Database write failed.") from exc

    # ---------- READ ----------

    def list(self, offset: int = 0, limit: Optional[int] = None) -> Sequence[ModelT]:
        """Retourne les enregistrements dans l'ordre d'insertion (id croissant)."""
        statement = select(self.model).order_by(self.model.id.asc()).offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        return self.session.exec(statement).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        """
        Crée et persiste un nouvel enregistrement.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        entity = self.model(**fields)
        self.session.add(entity)
        if commit:
            self.commit()
            self.session.refresh(entity)
        else:
            # flush pour obtenir l'ID sans commit (utile pour FKs)
            self._flush()
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """
        Met à jour un enregistrement existant.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        if commit:
            self.commit()
            self.session.refresh(entity)
        else:
            self._flush()
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT, *, commit: bool = True) -> None:
        """
        Supprime un enregistrement.
        commit=False permet d'orchestrer une transaction globale au niveau service.
        """
        self.session.delete(entity)
        if commit:
            self.commit()
        else:
            self._flush()
