from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for error logging.

Structured record of one rejected venue file, written as a JSON Lines entry.
``row=-1`` is the sentinel for failures that cannot be pinned to a row
(unreadable file, venue-level structure errors, section-level errors).
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Venue file name being processed
        section: Section id, or "<VENUE>" when the failure is not section-specific
        row: Row index. Use -1 when the row is unknown
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Error message
    """
    timestamp: str  # ISO8601 UTC
    file: str
    section: str
    row: int  # 不明な場合 -1
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(file: str, section: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            section=section,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to one JSON line with exactly the dataclass keys."""
        return json.dumps(asdict(self), ensure_ascii=False)
