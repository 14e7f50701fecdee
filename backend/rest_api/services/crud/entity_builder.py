"""
Entity Builder: bidirectional mapping between ORM records and DTOs.

Maps the column attributes shared by a SQLAlchemy model and its Pydantic
transfer schema, and recurses into declared relations with the same
contract. Mapping ``None`` always yields ``None``; nothing here touches
the session beyond reading already-loadable attributes.

Usage:
    category_builder = EntityBuilder(ProductCategory, ProductCategoryDTO)
    sub_category_builder = EntityBuilder(
        ProductSubCategory,
        ProductSubCategoryDTO,
        relations={"product_category": category_builder},
    )

    dto = sub_category_builder.to_transfer(record)       # embeds the category
    record = sub_category_builder.to_persisted(dto)      # builds both records
    record = sub_category_builder.to_persisted(dto, nested=False)
"""

from typing import Any, Generic, Iterable, Mapping, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

ModelT = TypeVar("ModelT")
SchemaT = TypeVar("SchemaT", bound=BaseModel)


class EntityBuilder(Generic[ModelT, SchemaT]):
    """
    Record mapper for one entity type.

    Features:
    - Auto-maps column attributes present on both sides
    - Maps nested relations through their own builders
    - Null-safe for single values and collections
    - Preserves collection order
    """

    def __init__(
        self,
        model: Type[ModelT],
        schema: Type[SchemaT],
        *,
        relations: Mapping[str, "EntityBuilder"] | None = None,
    ):
        self.model = model
        self.schema = schema
        self.relations = dict(relations or {})

        schema_fields = set(schema.model_fields)
        self._fields = [
            attr.key for attr in sa_inspect(model).column_attrs if attr.key in schema_fields
        ]

        unknown = set(self.relations) - schema_fields
        if unknown:
            raise ValueError(f"{schema.__name__} has no fields {sorted(unknown)}")

    @property
    def field_names(self) -> list[str]:
        """Column attributes mapped in both directions."""
        return list(self._fields)

    # =========================================================================
    # Record -> DTO
    # =========================================================================

    def to_transfer(self, record: ModelT | None) -> SchemaT | None:
        """Build the transfer representation of a record."""
        if record is None:
            return None

        data: dict[str, Any] = {name: getattr(record, name) for name in self._fields}
        for name, builder in self.relations.items():
            data[name] = builder.to_transfer(getattr(record, name))

        return self.schema.model_validate(data)

    def to_transfer_many(self, records: Iterable[ModelT] | None) -> list[SchemaT] | None:
        """Build transfer objects for a collection, keeping its order."""
        if records is None:
            return None
        return [self.to_transfer(record) for record in records]

    # =========================================================================
    # DTO -> Record
    # =========================================================================

    def to_persisted(self, transfer: SchemaT | None, *, nested: bool = True) -> ModelT | None:
        """
        Build a (transient) record from a transfer object.

        Unset values are left out so column defaults still apply. With
        ``nested=False`` relations are skipped and only foreign keys are copied.
        """
        if transfer is None:
            return None

        data: dict[str, Any] = {}
        for name in self._fields:
            value = getattr(transfer, name)
            if value is not None:
                data[name] = value

        if nested:
            for name, builder in self.relations.items():
                related = builder.to_persisted(getattr(transfer, name))
                if related is not None:
                    data[name] = related

        return self.model(**data)

    def to_persisted_many(
        self, transfers: Iterable[SchemaT] | None, *, nested: bool = True
    ) -> list[ModelT] | None:
        """Build records for a collection, keeping its order."""
        if transfers is None:
            return None
        return [self.to_persisted(transfer, nested=nested) for transfer in transfers]
