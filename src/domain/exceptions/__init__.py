from domain.exceptions.link_exceptions import (
    DomainError,
    LinkNotFoundError,
    LinkStorageError,
    LinkTransportError,
    LinkValidationError,
)

__all__ = [
    "DomainError",
    "LinkNotFoundError",
    "LinkStorageError",
    "LinkTransportError",
    "LinkValidationError",
]
