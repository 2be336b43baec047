"""Identifiers for order records."""

from dataclasses import dataclass
from typing import Self

from catalog.domain.value_objects import parse_id


@dataclass(frozen=True)
class UserId:
    """Identifier of the authenticated principal."""

    value: int


@dataclass(frozen=True)
class OrderId:
    """Unique identifier for an Order."""

    value: int

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=parse_id(value))


@dataclass(frozen=True)
class OrderItemId:
    value: int
