"""Shared domain building blocks."""

from econsim.domain.shared.exceptions import (
    ConcurrencyError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from econsim.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConcurrencyError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ExternalServiceError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
