from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

from ..models.seat import RowSeat, RowSeats
from ..models.transform import is_finite_number

"""Row/section assembly for the venue normalizer.

Seats in a row are ordered by ``col``. The fallback to ``x`` is decided per
compared pair, not per row: when either of the two seats lacks a usable
``col`` the pair is ordered by ``x``. Rows within a section are ordered by
``row_index`` with gaps left as they are (no renumbering). Both sorts are
stable, so equal keys keep their declaration order.
"""

__all__ = [
    "compare_row_seats",
    "sort_row_seats",
    "sort_rows",
]


def _sign(delta: Any) -> int:
    return (delta > 0) - (delta < 0)


def compare_row_seats(a: RowSeat, b: RowSeat) -> int:
    """Comparator: col when both seats have one, x otherwise."""
    if is_finite_number(a.col) and is_finite_number(b.col):
        return _sign(a.col - b.col)
    return _sign(a.x - b.x)


def sort_row_seats(seats: Iterable[RowSeat]) -> list[RowSeat]:
    """Return the row's seats sorted ascending by col (x fallback)."""
    return sorted(seats, key=cmp_to_key(compare_row_seats))


def sort_rows(rows: Iterable[RowSeats]) -> list[RowSeats]:
    """Return a section's rows sorted ascending by row_index."""
    return sorted(rows, key=lambda row: row.row_index)
