from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .seat import RowSeats, SeatMeta, SeatNeighbors
from .transform import Transform

"""Normalized venue models.

NormalizedVenue is built once per normalize_venue() call and is read-only
afterwards: a changed source venue is normalized again from scratch rather than
patched in place.
"""

__all__ = [
    "NormalizeOptions",
    "SectionInfo",
    "NormalizedVenue",
]


@dataclass(frozen=True)
class NormalizeOptions:
    """Caller options for normalize_venue().

    price_by_tier is consulted only by NormalizedVenue.get_price(); it never
    influences validation or indexing.
    """
    price_by_tier: Mapping[Any, float] | None = None
    precompute_neighbors: bool = False


@dataclass(frozen=True)
class SectionInfo:
    """Section summary in input order (rows excluded)."""
    id: str
    label: str | None
    transform: Transform


@dataclass(frozen=True)
class NormalizedVenue:
    """Flat, indexed view of a venue.

    Attributes:
        venue_id: Source ``venueId``
        name: Source ``name``
        map: Source ``map`` ({width, height}), passed through unchanged
        sections: One SectionInfo per input section, input order
        seats_by_id: seat id -> SeatMeta
        rows_by_section: section id -> rows sorted by row_index, seats sorted by col/x
        flat_seats: Every SeatMeta in traversal order (section -> row -> seat)
        neighbors: seat id -> SeatNeighbors, None unless precompute_neighbors was set
        price_by_tier: Copy of the caller's tier -> price table
    """
    venue_id: str
    name: str | None
    map: Any
    sections: list[SectionInfo]
    seats_by_id: dict[str, SeatMeta]
    rows_by_section: dict[str, list[RowSeats]]
    flat_seats: list[SeatMeta]
    neighbors: dict[str, SeatNeighbors] | None = None
    price_by_tier: dict[Any, float] = field(default_factory=dict)

    @property
    def seat_count(self) -> int:
        return len(self.flat_seats)

    def get_price(self, tier: Any) -> float | None:
        """Direct lookup in the price table. Unknown tiers return None (no default price)."""
        return self.price_by_tier.get(tier)
