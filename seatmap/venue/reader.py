from __future__ import annotations

import json
from pathlib import Path
from typing import Any

"""Venue document reader.

Reads one venue JSON document from disk and returns the parsed structure.
Shape checks are left to seatmap.services.normalizer; this module only
guarantees the file exists and is valid JSON.
"""

__all__ = [
    "VenueFileError",
    "read_venue_file",
]


class VenueFileError(Exception):
    """Raised when a venue file cannot be read or parsed."""
    error_type = "VENUE_FILE_ERROR"


def read_venue_file(path: Path) -> Any:
    """Read and parse a venue JSON document.

    Parameters
    ----------
    path: venue JSON ファイルパス

    Returns
    -------
    The parsed document (normally a dict with venueId/name/map/sections)

    Raises
    ------
    VenueFileError: file missing, unreadable, not UTF-8 or not JSON
    """
    if not path.exists():
        raise VenueFileError(f"venue file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise VenueFileError(f"cannot read venue file {path}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise VenueFileError(f"invalid json in {path.name}: {e}") from e
