from __future__ import annotations

from collections import Counter
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..models.error_record import ErrorRecord
from ..models.transform import is_finite_number

"""Error log for rejected venue files.

Each failed file becomes one ErrorRecord. Records are buffered for the whole
batch and written once as JSON Lines to ``logs/errors-YYYYMMDD-HHMMSS.log``;
a batch without failures leaves no file behind.
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
    "VENUE_LEVEL_SECTION",
    "UNKNOWN_ROW",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"

VENUE_LEVEL_SECTION = "<VENUE>"
UNKNOWN_ROW = -1


def _locate(error: Any) -> tuple[str, int]:
    """(section, row) of a failure; unknown parts fall back to the venue-level sentinels."""
    section_id = getattr(error, "section_id", None)
    row_index = getattr(error, "row_index", None)
    section = VENUE_LEVEL_SECTION if section_id is None else str(section_id)
    row = int(row_index) if is_finite_number(row_index) else UNKNOWN_ROW
    return section, row


class ErrorLogBuffer:
    """Failure records of one batch run (serial use only)."""

    def __init__(self, logs_dir: Path = LOGS_DIR) -> None:
        self._records: list[ErrorRecord] = []
        self._logs_dir = logs_dir
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        # 初回アクセス時に確定し、以降の flush でも同じファイルへ追記
        if self._file_path is None:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"errors-{stamp}.log"
        return self._file_path

    @property
    def records(self) -> list[ErrorRecord]:
        return list(self._records)

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def record_failure(self, file_name: str, error: Exception) -> ErrorRecord:
        """Record a rejected venue file.

        ``error`` is a VenueError or VenueFileError; its error_type and any
        section_id/row_index it carries end up in the record.
        """
        section, row = _locate(error)
        record = ErrorRecord.create(
            file=file_name,
            section=section,
            row=row,
            error_type=getattr(error, "error_type", "UNKNOWN_ERROR"),
            message=str(error),
        )
        self.append(record)
        return record

    def counts_by_type(self) -> dict[str, int]:
        """Buffered records per error_type, most frequent first."""
        return dict(Counter(r.error_type for r in self._records).most_common())

    def __len__(self) -> int:
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file and clear the buffer.

        Returns:
            The log file path, or None when nothing was buffered
        """
        if not self._records:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            f.writelines(r.to_json_line() + "\n" for r in self._records)
        self._records.clear()
        return fp
