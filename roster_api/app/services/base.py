"""
Generic entity service.

``EntityService`` holds the behaviour shared by teams and players:
validated writes through a repository, a cache pool refreshed after
every successful write, and reads, filters and sorts answered from that
cache.  Subclasses supply the entity models, the validation rules and
the recognised sort keys.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel

from roster_api.app.core.exceptions import NotFoundError, ValidationError
from roster_api.app.repositories.base import EntityRepository

from .cache_pool import CachePool

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


def _normalise_key(field: str) -> str:
    return (field or "").lower().replace("_", "")


class EntityService(Generic[T]):
    """Validation, persistence and cached reads for one entity type."""

    entity_name: str = "Entity"
    entity_model: Type[T]
    draft_model: Type[BaseModel]

    # Maps a normalised sort key (lower case, no underscores) to a key function.
    sort_keys: Dict[str, Callable[[Any], Any]] = {}

    def __init__(self, repository: EntityRepository[T]) -> None:
        self.repository = repository
        self._cache: CachePool[T] = CachePool(self.entity_name, repository.find_all)
        self._cache.refresh()

    def validate(self, entity: T) -> List[str]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create(self, draft: BaseModel) -> T:
        """Validate ``draft``, store it and return the stored entity.

        Any identifier or timestamps on the draft are ignored; the store
        assigns them.
        """
        entity = self._from_draft(draft)
        self._ensure_valid(entity)
        saved = self.repository.save(entity)
        self._cache.refresh()
        logger.info("Created %s %s", self.entity_name, saved.id)
        return saved

    def update(self, entity: T) -> T:
        """Replace a stored entity with ``entity`` after re-validating it."""
        if not entity.id:
            raise ValidationError(
                self.entity_name, [f"{self.entity_name} ID cannot be 0 for update"]
            )
        self._ensure_valid(entity)
        if not self.repository.exists_by_id(entity.id):
            raise NotFoundError(self.entity_name, entity.id)
        updated = self.repository.update(entity)
        self._cache.refresh()
        logger.info("Updated %s %s", self.entity_name, entity.id)
        return updated

    def delete(self, entity_id: int) -> None:
        if not self.repository.delete_by_id(entity_id):
            raise NotFoundError(self.entity_name, entity_id)
        self._cache.refresh()
        logger.info("Deleted %s %s", self.entity_name, entity_id)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_by_id(self, entity_id: int) -> T:
        """Look the entity up in the store, bypassing the cache."""
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    def list_all(self) -> List[T]:
        return list(self._cache.snapshot())

    def filter_by(self, predicate: Callable[[T], bool]) -> List[T]:
        return [entity for entity in self._cache.snapshot() if predicate(entity)]

    def sort_by(self, field: str, ascending: bool = True) -> List[T]:
        """Return the cached entities ordered by ``field``.

        Unknown fields order by identifier.  The sort is stable in both
        directions.
        """
        key = self.sort_keys.get(_normalise_key(field), _by_id)
        return sorted(self._cache.snapshot(), key=key, reverse=not ascending)

    def count(self) -> int:
        return len(self._cache)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _from_draft(self, draft: BaseModel) -> T:
        fields = draft.model_dump(include=set(self.draft_model.model_fields))
        return self.entity_model(**fields)

    def _ensure_valid(self, entity: T) -> None:
        errors = self.validate(entity)
        if errors:
            logger.warning("Rejected %s: %s", self.entity_name, "; ".join(errors))
            raise ValidationError(self.entity_name, errors)


def _by_id(entity: Any) -> int:
    return entity.id or 0


def text_key(attribute: str) -> Callable[[Any], str]:
    """Key function comparing a string attribute case-insensitively."""

    def key(entity: Any) -> str:
        return (getattr(entity, attribute) or "").casefold()

    return key
