from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .normalized_venue import NormalizedVenue

"""VenueFile domain model and FileStatus enum.

A VenueFile is the processing context of one venue JSON document during a
batch run, tracking its status from discovery to success/failed.
"""


class FileStatus(Enum):
    """Status of a venue file in a batch run.

    State transitions: pending -> processing -> (success | failed)
    """
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class VenueFile:
    """Processing context for a single venue file."""
    path: Path                              # Full path to the JSON document
    name: str                               # File name
    status: FileStatus = FileStatus.PENDING
    venue: NormalizedVenue | None = None    # Set on success only
    seat_count: int = 0
    neighbor_count: int = 0
    error_type: str | None = None           # UPPER_SNAKE classification on failure
    error: str | None = None                # Failure reason
