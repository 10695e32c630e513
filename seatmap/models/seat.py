from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .transform import Transform

"""Seat-level domain models for the seatmap venue normalizer.

SeatMeta is the per-seat record of a normalized venue: the seat's own fields
plus the section/row context it inherits, so a consumer can place and label a
seat without walking the venue again. RowSeat/RowSeats are the lightweight
records kept in sorted row listings, and SeatNeighbors is one node of the
keyboard-navigation graph.
"""

__all__ = [
    "SeatStatus",
    "SeatMeta",
    "RowSeat",
    "RowSeats",
    "SeatNeighbors",
]


class SeatStatus(str, Enum):
    """Recognized seat states. Any other value is rejected during normalization."""
    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"
    HELD = "held"


@dataclass(frozen=True)
class SeatMeta:
    """Seat fields plus inherited section/row context."""
    id: str
    section_id: str
    section_label: str | None
    row_index: int | float
    col: int | float | None  # 未指定なら None (0 にしない: ソート順が壊れる)
    x: float  # section-local
    y: float  # section-local
    status: SeatStatus
    price_tier: Any  # passed through, not checked against a tier table
    transform: Transform

    @property
    def absolute_x(self) -> float:
        return self.transform.apply(self.x, self.y)[0]

    @property
    def absolute_y(self) -> float:
        return self.transform.apply(self.x, self.y)[1]

    @property
    def is_available(self) -> bool:
        return self.status is SeatStatus.AVAILABLE


@dataclass(frozen=True)
class RowSeat:
    """Lightweight seat record used inside a sorted row listing."""
    id: str
    col: int | float | None
    x: float
    y: float


@dataclass(frozen=True)
class RowSeats:
    """One row of a section: its index and its seats sorted by col (or x)."""
    row_index: int | float
    seats: list[RowSeat]


@dataclass(frozen=True)
class SeatNeighbors:
    """Directional neighbors of one seat. Absent directions are None."""
    left: str | None = None
    right: str | None = None
    up: str | None = None
    down: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Return only the directions that have a neighbor."""
        return {
            direction: seat_id
            for direction, seat_id in (
                ("left", self.left),
                ("right", self.right),
                ("up", self.up),
                ("down", self.down),
            )
            if seat_id is not None
        }
