from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from ..models.normalized_venue import NormalizedVenue, NormalizeOptions, SectionInfo
from ..models.seat import RowSeat, RowSeats, SeatMeta, SeatStatus
from ..models.transform import Transform, is_finite_number
from .neighbors import compute_neighbors
from .row_assembler import sort_row_seats, sort_rows

logger = logging.getLogger(__name__)

"""Venue normalization service.

normalize_venue() turns a parsed venue document (sections -> rows -> seats)
into a NormalizedVenue: a seat index, a flat seat list in traversal order,
per-section sorted row listings and, on request, the neighbor graph.

Validation happens during the single traversal and is all-or-nothing: the
first violation raises and nothing partial is returned. The input document is
only read, never modified.
"""

__all__ = [
    "VenueError",
    "VenueStructureError",
    "SeatValidationError",
    "DuplicateSeatIdError",
    "VALID_STATUSES",
    "normalize_venue",
]

VALID_STATUSES = frozenset(status.value for status in SeatStatus)


class VenueError(Exception):
    """Base exception for venue normalization failures.

    section_id / row_index / seat_id locate the failure when known (None otherwise).
    """
    error_type = "VENUE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        section_id: Any = None,
        row_index: Any = None,
        seat_id: Any = None,
    ) -> None:
        super().__init__(message)
        self.section_id = section_id
        self.row_index = row_index
        self.seat_id = seat_id


class VenueStructureError(VenueError):
    """Venue, section or row is missing its required shape."""
    error_type = "STRUCTURAL_ERROR"


class SeatValidationError(VenueError):
    """Seat has no id, non-numeric coordinates or an unknown status."""
    error_type = "SEAT_VALIDATION_ERROR"


class DuplicateSeatIdError(VenueError):
    """Seat id already present in the index."""
    error_type = "DUPLICATE_SEAT_ID"


def _is_sequence(value: Any) -> bool:
    # JSON arrays only; str/bytes are sequences too but never valid here
    return isinstance(value, (list, tuple))


def _seat_payload(seat: Any) -> str:
    try:
        return json.dumps(seat, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(seat)


def _validate_section(section: Any) -> tuple[Any, Transform]:
    if not isinstance(section, Mapping):
        raise VenueStructureError("Invalid section structure in section unknown")
    section_id = section.get("id")
    has_id = isinstance(section_id, str) and section_id != ""
    # a numeric id is reported by value but still rejected
    known = has_id or is_finite_number(section_id)
    if not has_id or not _is_sequence(section.get("rows")):
        raise VenueStructureError(
            f"Invalid section structure in section {section_id if known else 'unknown'}",
            section_id=section_id if known else None,
        )
    try:
        transform = Transform.from_raw(section.get("transform"))
    except (TypeError, ValueError) as e:
        raise VenueStructureError(
            f"Invalid transform in section {section_id}: {e}", section_id=section_id
        ) from e
    return section_id, transform


def _validate_row(row: Any, section_id: Any) -> Any:
    if not isinstance(row, Mapping):
        raise VenueStructureError(
            f"Invalid row structure in section {section_id}, row unknown",
            section_id=section_id,
        )
    row_index = row.get("index")
    if not _is_sequence(row.get("seats")):
        raise VenueStructureError(
            f"Invalid row structure in section {section_id}, row {row_index}",
            section_id=section_id,
            row_index=row_index,
        )
    if not is_finite_number(row_index):
        raise VenueStructureError(
            f"Invalid row index in section {section_id}: {row_index!r}",
            section_id=section_id,
        )
    return row_index


def _build_seat_meta(
    seat: Any,
    section_id: Any,
    section_label: Any,
    row_index: Any,
    transform: Transform,
) -> SeatMeta:
    if (
        not isinstance(seat, Mapping)
        or not isinstance(seat.get("id"), str)
        or not seat.get("id")
        or not is_finite_number(seat.get("x"))
        or not is_finite_number(seat.get("y"))
    ):
        raise SeatValidationError(
            f"Invalid seat data: {_seat_payload(seat)}",
            section_id=section_id,
            row_index=row_index,
            seat_id=seat.get("id") if isinstance(seat, Mapping) else None,
        )

    seat_id = seat["id"]
    status = seat.get("status")
    if not isinstance(status, str) or status not in VALID_STATUSES:
        raise SeatValidationError(
            f"Invalid seat status: {status} for seat {seat_id}",
            section_id=section_id,
            row_index=row_index,
            seat_id=seat_id,
        )

    return SeatMeta(
        id=seat_id,
        section_id=section_id,
        section_label=section_label,
        row_index=row_index,
        col=seat.get("col"),
        x=seat["x"],
        y=seat["y"],
        status=SeatStatus(status),
        price_tier=seat.get("priceTier"),
        transform=transform,
    )


def normalize_venue(
    venue: Mapping[str, Any],
    options: NormalizeOptions | None = None,
) -> NormalizedVenue:
    """Validate a venue document and build its lookup structures.

    Cost is linear in the seat count for validation and indexing; the optional
    neighbor pass adds a per-row scan for the nearest-seat fallback.

    Args:
        venue: Parsed venue document (``venueId``, ``name``, ``map``, ``sections``)
        options: Price table and neighbor flag. Defaults to NormalizeOptions()

    Returns:
        A freshly allocated NormalizedVenue

    Raises:
        VenueStructureError: venue/section/row shape is invalid
        SeatValidationError: a seat is malformed or has an unknown status
        DuplicateSeatIdError: two seats share an id
    """
    opts = options or NormalizeOptions()

    if (
        not isinstance(venue, Mapping)
        or not venue.get("venueId")
        or not _is_sequence(venue.get("sections"))
    ):
        raise VenueStructureError("Invalid venue structure: missing required fields")

    seats_by_id: dict[str, SeatMeta] = {}
    rows_by_section: dict[str, list[RowSeats]] = {}
    flat_seats: list[SeatMeta] = []
    sections: list[SectionInfo] = []

    for section in venue["sections"]:
        section_id, transform = _validate_section(section)
        section_label = section.get("label")
        sections.append(SectionInfo(id=section_id, label=section_label, transform=transform))

        # 同一 id のセクションが再登場した場合は行を合流させて再ソート
        section_rows = rows_by_section.get(section_id, [])
        for row in section["rows"]:
            row_index = _validate_row(row, section_id)
            row_seats: list[RowSeat] = []
            for seat in row["seats"]:
                meta = _build_seat_meta(seat, section_id, section_label, row_index, transform)
                if meta.id in seats_by_id:
                    raise DuplicateSeatIdError(
                        f"Duplicate seat ID found: {meta.id}",
                        section_id=section_id,
                        row_index=row_index,
                        seat_id=meta.id,
                    )
                seats_by_id[meta.id] = meta
                flat_seats.append(meta)
                row_seats.append(RowSeat(id=meta.id, col=meta.col, x=meta.x, y=meta.y))
            section_rows.append(RowSeats(row_index=row_index, seats=sort_row_seats(row_seats)))
        rows_by_section[section_id] = sort_rows(section_rows)

    neighbors = compute_neighbors(rows_by_section) if opts.precompute_neighbors else None

    logger.debug(
        f"normalized venue={venue['venueId']} sections={len(sections)} "
        f"seats={len(flat_seats)} neighbors={len(neighbors) if neighbors is not None else 'off'}"
    )

    return NormalizedVenue(
        venue_id=venue["venueId"],
        name=venue.get("name"),
        map=venue.get("map"),
        sections=sections,
        seats_by_id=seats_by_id,
        rows_by_section=rows_by_section,
        flat_seats=flat_seats,
        neighbors=neighbors,
        price_by_tier=dict(opts.price_by_tier or {}),
    )
