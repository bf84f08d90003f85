"""
==============================================================================
Service Result Module
==============================================================================

Tagged outcome returned by service operations that can fail for business
reasons. Callers check `ok` (or `error`) instead of catching exceptions.

==============================================================================
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class ServiceError(str, enum.Enum):
    """Business error kinds produced by the catalog service."""

    NOT_FOUND = "not_found"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Either a value or an error kind.

    Example:
        >>> result = service.update_product(data)
        >>> if result.error is ServiceError.NOT_FOUND:
        ...     raise exceptions.product_not_found(data.product_key)
        >>> product = result.value
    """

    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
