"""
Base Service Classes for Clean Architecture.

CLEAN-ARCH: Provides abstract base classes for application services that:
- Use Repository for data access (not direct queries)
- Use EntityBuilder for DTO transformation
- Run the validation gate before every mutation
- Report persistence failures to the audit bus

Architecture:
    Router (thin) → Service (business logic) → Repository (data access) → Model

Usage:
    from rest_api.services.base_service import BaseCRUDService

    class TreatingTypeService(BaseCRUDService[TreatingType, TreatingTypeDTO]):
        def __init__(self, db: Session, audit_bus: AuditEventBus):
            super().__init__(
                db,
                audit_bus,
                model=TreatingType,
                builder=treating_type_builder,
                entity_type=EntityType.TREATING_TYPE,
                validator=treating_type_validator,
                mutable_fields=("title",),
            )
"""

from __future__ import annotations

from abc import ABC
from operator import attrgetter
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar, Type

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from rest_api.models import Base, utc_now
from rest_api.services.crud.entity_builder import EntityBuilder
from rest_api.services.crud.pagination import PaginationEngine
from rest_api.services.crud.repository import BaseRepository
from rest_api.services.events import AuditEvent, AuditEventBus
from shared.config.constants import AuditAction, EntityType, Messages, RuleSets
from shared.config.logging import get_logger
from shared.config.settings import settings
from shared.utils.exceptions import NotFoundError, PersistenceError, ValidationError
from shared.utils.schemas import PaginationRequest, PaginationResponse
from shared.utils.validators import Validator

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
DTOT = TypeVar("DTOT", bound=BaseModel)

# Sort keys every entity supports
BASE_SORT_FIELDS: dict[str, Callable[[Any], Any]] = {
    "id": attrgetter("id"),
    "created": attrgetter("created"),
    "updated": attrgetter("updated"),
}

TITLE_SORT_FIELDS: dict[str, Callable[[Any], Any]] = {
    "title": attrgetter("title"),
    **BASE_SORT_FIELDS,
}

_FAILURE_MESSAGES = {
    AuditAction.CREATE: Messages.OBJECT_NOT_CREATED,
    AuditAction.UPDATE: Messages.OBJECT_NOT_UPDATED,
    AuditAction.DELETE: Messages.OBJECT_NOT_DELETED,
}


class BaseService(ABC, Generic[ModelT]):
    """
    Abstract base service for domain operations.

    Subclasses implement specific business logic while this class
    provides common infrastructure (repository access, logging).
    """

    def __init__(
        self,
        db: Session,
        model: Type[ModelT],
        *,
        load_options: list[Any] | None = None,
    ):
        self._db = db
        self._model = model
        self._repo = BaseRepository(model, db, default_options=load_options)

    @property
    def db(self) -> Session:
        """Database session."""
        return self._db

    @property
    def repo(self) -> BaseRepository[ModelT]:
        """Repository for data access."""
        return self._repo


class BaseCRUDService(BaseService[ModelT], Generic[ModelT, DTOT]):
    """
    Base service for catalog entities.

    Provides the read operations, the pagination pipeline and the
    create/update/delete mutation pipeline. Subclasses only declare
    configuration: mapper, validator, mutable fields, sort keys and
    search text.

    Responsibilities:
    - Data access via Repository (not direct queries)
    - DTO transformation via EntityBuilder
    - Validation via the entity's Validator rule sets
    - Exactly one failure audit event per rejected persistence attempt

    Success audit events are published by the caller (the router) once
    the mutation has returned.
    """

    def __init__(
        self,
        db: Session,
        audit_bus: AuditEventBus,
        *,
        model: Type[ModelT],
        builder: EntityBuilder[ModelT, DTOT],
        entity_type: EntityType,
        validator: Validator,
        mutable_fields: Sequence[str],
        sortable_fields: Mapping[str, Callable[[ModelT], Any]] = TITLE_SORT_FIELDS,
        search_text: Callable[[ModelT], str | None] | None = attrgetter("title"),
    ):
        super().__init__(
            db,
            model,
            load_options=[selectinload(getattr(model, name)) for name in builder.relations],
        )
        self._audit_bus = audit_bus
        self._builder = builder
        self._entity_type = entity_type
        self._validator = validator
        self._mutable_fields = tuple(mutable_fields)
        self._pagination = PaginationEngine(
            builder,
            sortable_fields=sortable_fields,
            search_text=search_text,
            default_take=settings.default_page_size,
            max_take=settings.max_page_size,
        )

    @property
    def entity_type(self) -> EntityType:
        return self._entity_type

    @property
    def builder(self) -> EntityBuilder[ModelT, DTOT]:
        return self._builder

    # =========================================================================
    # Read Operations
    # =========================================================================

    def get_all(self) -> list[DTOT]:
        """Every record, ordered by id."""
        return self._builder.to_transfer_many(self._repo.find_all())

    def get_pagination(self, request: PaginationRequest) -> PaginationResponse:
        """
        Filter, sort and window all records.

        Returns:
            Total of the filtered set plus the requested page.
        """
        total, values = self._pagination.paginate(self._repo.find_all(), request)
        return PaginationResponse(total=total, values=values)

    def get_by_id(self, entity_id: int | None) -> DTOT | None:
        """
        Get one record.

        Returns:
            The transfer object, or None when no record has this id.

        Raises:
            ValidationError: If entity_id is None.
        """
        if entity_id is None:
            raise ValidationError(
                Messages.OBJECT_ID_CANT_BE_NULL, entity_type=self._entity_type.value
            )
        return self._builder.to_transfer(self._repo.find_by_id(entity_id))

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, dto: DTOT) -> DTOT:
        """
        Create a record from a transfer object.

        Any id supplied by the caller is ignored; timestamps are stamped here.

        Raises:
            ValidationError: If the "create" rule set fails.
            PersistenceError: If the database rejects the insert.
        """
        self._validator.validate(dto, RuleSets.CREATE)

        now = utc_now()
        stamped = dto.model_copy(update={"id": None, "created": now, "updated": now})
        entity = self._builder.to_persisted(stamped, nested=False)

        self._repo.add(entity)
        self._save(AuditAction.CREATE)

        logger.info(
            f"{self._entity_type.value} created",
            entity_type=self._entity_type.value,
            entity_id=entity.id,
        )
        return self._builder.to_transfer(entity)

    def update(self, dto: DTOT) -> DTOT:
        """
        Copy the mutable fields of a transfer object onto the stored record.

        Raises:
            ValidationError: If the "update" rule set fails.
            NotFoundError: If no record has dto.id (not audited).
            PersistenceError: If the database rejects the update.
        """
        self._validator.validate(dto, RuleSets.UPDATE)

        entity = self._repo.find_by_id(dto.id)
        if entity is None:
            raise NotFoundError(
                self._entity_type.value,
                dto.id,
                message=Messages.NOT_EXIST_OBJECT_FOR_UPDATING,
            )

        for field_name in self._mutable_fields:
            setattr(entity, field_name, getattr(dto, field_name))
        entity.touch()

        self._save(AuditAction.UPDATE)

        logger.info(
            f"{self._entity_type.value} updated",
            entity_type=self._entity_type.value,
            entity_id=entity.id,
        )
        return self._builder.to_transfer(entity)

    def delete(self, entity_id: int | None) -> None:
        """
        Remove a record.

        Raises:
            ValidationError: If entity_id is None.
            NotFoundError: If no record has this id (not audited).
            PersistenceError: If the database rejects the delete.
        """
        if entity_id is None:
            raise ValidationError(
                Messages.INVALID_OBJECT_ID, entity_type=self._entity_type.value
            )

        entity = self._repo.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(
                self._entity_type.value,
                entity_id,
                message=Messages.NOT_EXIST_OBJECT_FOR_DELETING,
            )

        self._repo.delete(entity)
        self._save(AuditAction.DELETE)

        logger.info(
            f"{self._entity_type.value} deleted",
            entity_type=self._entity_type.value,
            entity_id=entity_id,
        )

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _save(self, action: AuditAction) -> None:
        """
        Commit the unit of work.

        On failure the session is rolled back, one failure event is
        published and PersistenceError is raised with the cause attached.
        """
        try:
            self._repo.save_changes()
        except SQLAlchemyError as e:
            self._audit_bus.publish(
                AuditEvent.failure(
                    action,
                    self._entity_type,
                    Messages.CHANGES_NOT_SAVED.format(error=e),
                )
            )
            raise PersistenceError(
                _FAILURE_MESSAGES[action],
                operation=action.value,
                entity_type=self._entity_type.value,
                error=str(e),
            ) from e
