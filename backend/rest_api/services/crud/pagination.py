"""
Pagination Engine: filter, count, sort and window a record set.

The pipeline always runs in the same order:

    1. filter   case-insensitive substring match on the search text
    2. total    size of the filtered set (before windowing)
    3. sort     stable, by an allow-listed field; unknown keys keep the order
    4. window   skip/take over the sorted set
    5. map      records -> DTOs

Usage:
    engine = PaginationEngine(
        builder,
        sortable_fields={"title": lambda r: r.title, "id": lambda r: r.id},
        search_text=lambda r: r.title,
    )
    total, values = engine.paginate(records, PaginationRequest(query="fru", take=5))
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from pydantic.alias_generators import to_snake

from shared.config.constants import Limits
from shared.utils.schemas import PaginationRequest
from .entity_builder import EntityBuilder

ModelT = TypeVar("ModelT")
SchemaT = TypeVar("SchemaT")


@dataclass
class PageWindow:
    """
    Normalized skip/take.

    Attributes:
        skip: Records to drop from the start (>= 0)
        take: Maximum records returned (0 means an empty page)
    """

    skip: int
    take: int

    @classmethod
    def from_request(
        cls,
        request: PaginationRequest,
        *,
        default_take: int = Limits.DEFAULT_TAKE,
        max_take: int | None = None,
    ) -> "PageWindow":
        skip = Limits.DEFAULT_SKIP if request.skip is None else max(0, request.skip)
        take = default_take if request.take is None else max(0, request.take)
        if max_take is not None:
            take = min(take, max_take)
        return cls(skip=skip, take=take)

    def apply(self, items: Sequence[Any]) -> list[Any]:
        return list(items[self.skip:self.skip + self.take])


def _sort_key(extract: Callable[[Any], Any]) -> Callable[[Any], tuple]:
    # None sorts first ascending; text compares case-insensitively
    def key(record: Any) -> tuple:
        value = extract(record)
        if value is None:
            return (0, 0)
        if isinstance(value, str):
            return (1, value.casefold())
        return (1, value)

    return key


class PaginationEngine(Generic[ModelT, SchemaT]):
    """Applies a PaginationRequest to an in-memory record set."""

    def __init__(
        self,
        builder: EntityBuilder,
        *,
        sortable_fields: Mapping[str, Callable[[ModelT], Any]],
        search_text: Callable[[ModelT], str | None] | None = None,
        default_take: int = Limits.DEFAULT_TAKE,
        max_take: int | None = None,
    ):
        self._builder = builder
        self._sortable_fields = dict(sortable_fields)
        self._search_text = search_text
        self._default_take = default_take
        self._max_take = max_take

    @property
    def sortable_fields(self) -> list[str]:
        return list(self._sortable_fields)

    def filter(self, records: Sequence[ModelT], query: str | None) -> list[ModelT]:
        """Keep records whose search text contains the query (case-insensitive)."""
        if not query or self._search_text is None:
            return list(records)

        needle = query.casefold()
        matches = []
        for record in records:
            text = self._search_text(record)
            if text and needle in text.casefold():
                matches.append(record)
        return matches

    def resolve_sort_field(self, sort_by: str | None) -> Callable[[ModelT], Any] | None:
        """Accepts snake_case or camelCase keys; None for anything off the allow-list."""
        if not sort_by:
            return None
        extract = self._sortable_fields.get(sort_by)
        if extract is None:
            extract = self._sortable_fields.get(to_snake(sort_by))
        return extract

    def sort(self, records: list[ModelT], sort_by: str | None, ascending: bool = True) -> list[ModelT]:
        extract = self.resolve_sort_field(sort_by)
        if extract is None:
            return records
        return sorted(records, key=_sort_key(extract), reverse=not ascending)

    def paginate(
        self, records: Sequence[ModelT], request: PaginationRequest
    ) -> tuple[int, list[SchemaT]]:
        """
        Run the full pipeline.

        Returns:
            (total matching records, DTOs of the requested window)
        """
        filtered = self.filter(records, request.query)
        total = len(filtered)

        ordered = self.sort(filtered, request.sort_by, request.ascending)
        window = PageWindow.from_request(
            request, default_take=self._default_take, max_take=self._max_take
        )

        return total, self._builder.to_transfer_many(window.apply(ordered))
