"""
CRUD Services - Generic building blocks for entity management.

Provides:
- BaseRepository: Type-safe data access (find_all, find_by_id, add, delete, save_changes)
- EntityBuilder: Record <-> DTO mapping, nested and null-safe
- PaginationEngine: Filter, count, sort and window a record set
"""

from .repository import BaseRepository
from .entity_builder import EntityBuilder
from .pagination import PaginationEngine, PageWindow

__all__ = [
    # Repository
    "BaseRepository",
    # Entity builder
    "EntityBuilder",
    # Pagination
    "PaginationEngine",
    "PageWindow",
]
