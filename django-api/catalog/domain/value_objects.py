"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self


def parse_id(value: str | int) -> int:
    """Parse a positive integer identifier; booleans are rejected."""
    if isinstance(value, bool):
        raise ValueError("Identifier must be an integer")
    parsed = int(value)
    if parsed < 1:
        raise ValueError("Identifier must be positive")
    return parsed


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=parse_id(value))


@dataclass(frozen=True)
class TicketTypeId:
    """Unique identifier for a TicketType."""

    value: int

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=parse_id(value))


@dataclass(frozen=True)
class CategoryId:
    value: int

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=parse_id(value))


@dataclass(frozen=True)
class CityId:
    value: int

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        return cls(value=parse_id(value))


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def times(self, factor: int | Decimal) -> "Money":
        return Money(self.amount * factor)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")

    def covers(self, quantity: int) -> bool:
        return quantity <= self.value
