from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..models.seat import RowSeat, RowSeats, SeatNeighbors

"""Keyboard-navigation neighbor graph.

Runs on the already sorted ``rows_by_section`` structure:

- left/right: previous/next seat in the same sorted row
- up/down: nearest seat in the row immediately before/after in the sorted row
  list (list position, not row_index arithmetic, so index gaps are skipped)

"Nearest" is an exact ``col`` match when the seat has a col and the target row
contains it, otherwise the first seat with the smallest ``abs(x - target_x)``
found scanning the target row left to right.

Edges are directional. Rows of different lengths or mismatched numbering give
asymmetric pairs (A.up == B while B.down != A), and that is left as computed.
"""

__all__ = [
    "find_nearest_seat",
    "compute_neighbors",
]


def find_nearest_seat(
    row_seats: Sequence[RowSeat],
    target_col: int | float | None,
    target_x: float,
) -> RowSeat | None:
    """Find the seat in ``row_seats`` closest to a column or x position.

    Parameters
    ----------
    row_seats: Seats of the target row (sorted)
    target_col: Column to match exactly; None skips the column match
    target_x: x used for the distance fallback

    Returns
    -------
    RowSeat | None: The matching seat, or None for an empty row
    """
    if not row_seats:
        return None

    if target_col is not None:
        for seat in row_seats:
            if seat.col == target_col:
                return seat

    # 同距離なら先に見つかった方 (strict <)
    closest = row_seats[0]
    min_distance = abs(closest.x - target_x)
    for seat in row_seats[1:]:
        distance = abs(seat.x - target_x)
        if distance < min_distance:
            min_distance = distance
            closest = seat
    return closest


def _nearest_id(row: RowSeats | None, seat: RowSeat) -> str | None:
    if row is None:
        return None
    match = find_nearest_seat(row.seats, seat.col, seat.x)
    return match.id if match is not None else None


def compute_neighbors(rows_by_section: Mapping[str, Sequence[RowSeats]]) -> dict[str, SeatNeighbors]:
    """Build seat id -> SeatNeighbors for every seat in the sorted row listings.

    Sections with zero rows and rows with zero seats contribute no edges.
    """
    neighbors: dict[str, SeatNeighbors] = {}
    for rows in rows_by_section.values():
        for position, row in enumerate(rows):
            previous_row = rows[position - 1] if position > 0 else None
            next_row = rows[position + 1] if position + 1 < len(rows) else None
            seats = row.seats
            for i, seat in enumerate(seats):
                neighbors[seat.id] = SeatNeighbors(
                    left=seats[i - 1].id if i > 0 else None,
                    right=seats[i + 1].id if i + 1 < len(seats) else None,
                    up=_nearest_id(previous_row, seat),
                    down=_nearest_id(next_row, seat),
                )
    return neighbors
