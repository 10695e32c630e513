"""Domain models for the seatmap venue normalizer.

Input venues stay plain parsed JSON; everything here describes what the
normalizer produces and what the batch runner reports.
"""

from .config_models import NormalizerConfig
from .normalized_venue import NormalizedVenue, NormalizeOptions, SectionInfo
from .seat import RowSeat, RowSeats, SeatMeta, SeatNeighbors, SeatStatus
from .transform import Transform

__all__ = [
    # Configuration models
    "NormalizerConfig",
    # Normalized venue models
    "NormalizeOptions",
    "NormalizedVenue",
    "SectionInfo",
    "SeatMeta",
    "SeatStatus",
    "RowSeat",
    "RowSeats",
    "SeatNeighbors",
    "Transform",
]
