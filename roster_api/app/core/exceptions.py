"""
Error kinds raised by the service layer.

Services never catch these; the API layer maps them to status codes
(validation -> 400, not found -> 404, storage -> 500).
"""

from typing import Any, Iterable, List


class EntityError(Exception):
    """Base class for errors concerning a single entity type."""

    def __init__(self, entity_name: str, message: str) -> None:
        super().__init__(message)
        self.entity_name = entity_name


class ValidationError(EntityError):
    """An entity failed validation.

    ``errors`` holds every violated rule, in the order they were
    checked, so that callers can report them all at once.
    """

    def __init__(self, entity_name: str, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__(
            entity_name,
            f"Validation failed for {entity_name}: {', '.join(self.errors)}",
        )


class NotFoundError(EntityError):
    """No entity with the given identifier exists in the store."""

    def __init__(self, entity_name: str, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(
            entity_name,
            f"{entity_name} not found with identifier: {identifier}",
        )


class StorageError(EntityError):
    """The persistence layer failed (connectivity, constraint, SQL error)."""
