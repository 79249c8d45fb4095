"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from store_admin.core.domain.entities import (
    AggregateRoot,
    Entity,
    generate_uuid_str,
    parse_datetime,
    utc_now,
)
from store_admin.core.domain.exceptions import (
    ConcurrencyException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    ErrorKind,
    InternalException,
    InvalidValueException,
    MissingValueException,
)
from store_admin.core.domain.value_objects import StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid_str",
    "utc_now",
    "parse_datetime",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    # Exceptions
    "ErrorKind",
    "DomainException",
    "EntityNotFoundException",
    "DuplicateEntityException",
    "MissingValueException",
    "InvalidValueException",
    "ConcurrencyException",
    "InternalException",
]
