from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from ..models.normalized_venue import NormalizedVenue

"""Geometry and tabular helpers over a NormalizedVenue.

Seat coordinates are section-local; every helper here works in venue-absolute
coordinates obtained through each seat's inherited transform.
"""

__all__ = [
    "DEFAULT_PADDING",
    "SEAT_FRAME_COLUMNS",
    "VenueBounds",
    "venue_bounds",
    "seats_frame",
]

DEFAULT_PADDING = 80

SEAT_FRAME_COLUMNS = [
    "id",
    "section_id",
    "section_label",
    "row_index",
    "col",
    "x",
    "y",
    "absolute_x",
    "absolute_y",
    "status",
    "price_tier",
    "price",
]


@dataclass(frozen=True)
class VenueBounds:
    """Absolute bounding box of all seats plus a padded view box."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    view_box_width: float
    view_box_height: float


def venue_bounds(venue: NormalizedVenue, padding: float = DEFAULT_PADDING) -> VenueBounds | None:
    """Compute the absolute seat bounds of a venue.

    Args:
        venue: Normalized venue
        padding: Margin added on each side of the view box

    Returns:
        VenueBounds, or None when the venue has no seats
    """
    if not venue.flat_seats:
        return None
    xs = [seat.absolute_x for seat in venue.flat_seats]
    ys = [seat.absolute_y for seat in venue.flat_seats]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    return VenueBounds(
        min_x=min_x,
        max_x=max_x,
        min_y=min_y,
        max_y=max_y,
        view_box_width=max_x - min_x + padding * 2,
        view_box_height=max_y - min_y + padding * 2,
    )


def seats_frame(venue: NormalizedVenue) -> pd.DataFrame:
    """One row per seat in flat_seats order, with absolute position and price.

    ``price`` comes from venue.get_price(); unknown tiers become NaN.
    """
    records = []
    for seat in venue.flat_seats:
        price = venue.get_price(seat.price_tier)
        records.append({
            "id": seat.id,
            "section_id": seat.section_id,
            "section_label": seat.section_label,
            "row_index": seat.row_index,
            "col": seat.col,
            "x": seat.x,
            "y": seat.y,
            "absolute_x": seat.absolute_x,
            "absolute_y": seat.absolute_y,
            "status": seat.status.value,
            "price_tier": seat.price_tier,
            "price": float("nan") if price is None else price,
        })
    return pd.DataFrame.from_records(records, columns=SEAT_FRAME_COLUMNS)
