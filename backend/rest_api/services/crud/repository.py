"""
Repository Pattern for database access.

Provides a clean abstraction layer between business logic and data access.
The catalog services use find_all, find_by_id, add, delete and save_changes.

Usage:
    from rest_api.services.crud.repository import BaseRepository

    repo = BaseRepository(ProductSubCategory, db)

    categories = repo.find_all()
    category = repo.find_by_id(42)

    # With eager loading
    repo.find_all(options=[selectinload(ProductSubCategory.product_category)])

    repo.add(ProductSubCategory(title="Citrus", product_category_id=1))
    repo.save_changes()
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from rest_api.models import Base
from shared.infrastructure.db import safe_commit

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Repository providing common database operations for one model.

    ``default_options`` (loader options such as selectinload) are applied
    to every read unless a call passes its own.
    """

    def __init__(
        self,
        model: type[ModelT],
        session: Session,
        *,
        default_options: list[Any] | None = None,
    ):
        self._model = model
        self._session = session
        self._default_options = default_options or []

    @property
    def model(self) -> type[ModelT]:
        """The SQLAlchemy model class."""
        return self._model

    @property
    def session(self) -> Session:
        """The database session."""
        return self._session

    def _base_query(self) -> Select:
        """Create base select query."""
        return select(self._model)

    def _apply_options(self, query: Select, options: list[Any] | None) -> Select:
        """Apply eager loading options."""
        options = self._default_options if options is None else options
        if options:
            query = query.options(*options)
        return query

    def find_by_id(
        self,
        entity_id: int,
        *,
        options: list[Any] | None = None,
    ) -> ModelT | None:
        """
        Find entity by primary key.

        Args:
            entity_id: The primary key value.
            options: SQLAlchemy loader options (selectinload, joinedload).

        Returns:
            Entity or None if not found.
        """
        query = self._base_query().where(self._model.id == entity_id)
        query = self._apply_options(query, options)
        return self._session.scalar(query)

    def find_all(
        self,
        *,
        options: list[Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelT]:
        """
        Find all entities.

        Args:
            options: SQLAlchemy loader options.
            order_by: Column or expression to order by (defaults to id).

        Returns:
            Sequence of entities.
        """
        query = self._apply_options(self._base_query(), options)
        query = query.order_by(self._model.id if order_by is None else order_by)
        return self._session.scalars(query).all()

    def add(self, entity: ModelT) -> ModelT:
        """Add entity to session (not committed)."""
        self._session.add(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        """Delete entity from session (not committed)."""
        self._session.delete(entity)

    def save_changes(self) -> None:
        """
        Commit pending changes.

        Raises:
            SQLAlchemyError: After rolling back, if the database rejects them.
        """
        safe_commit(self._session)
