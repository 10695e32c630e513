from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .normalized_venue import NormalizedVenue

"""Processing result models for batch venue normalization.

These aggregate per-file outcomes into the totals printed on the SUMMARY line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics."""
    file_name: str
    status: str  # success/failed
    seat_count: int  # 0 on failure
    elapsed_seconds: float
    venue_id: str | None = None
    error_type: str | None = None


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of one batch run."""
    success_files: int
    failed_files: int
    total_seats: int  # seats across successful files
    total_neighbors: int  # neighbor entries across successful files
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_seats_per_sec: float  # total_seats / elapsed
    file_stats: list[FileStat] | None = None
    venues: dict[str, NormalizedVenue] = field(default_factory=dict)  # file name -> result
