"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket.

    The identifier is also the scannable token, so it must never be
    predictable: new ids come from uuid4 (OS random source).
    """

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value.strip()))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BatchSize:
    """Number of tickets in one issuance batch, bounded by a ceiling."""

    value: int
    ceiling: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Batch size must be an integer")
        if self.value < 1:
            raise ValueError("Batch size must be positive")
        if self.value > self.ceiling:
            raise ValueError(f"Batch size cannot exceed {self.ceiling}")


@dataclass(frozen=True)
class PageNumber:
    """1-based page index. Anything unusable falls back to the first page."""

    value: int

    @classmethod
    def parse(cls, raw: object) -> Self:
        try:
            number = int(raw)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return cls(value=1)
        return cls(value=max(number, 1))

    def offset(self, page_size: int) -> int:
        return (self.value - 1) * page_size
