from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import NormalizerConfig
from ..models.normalized_venue import NormalizeOptions
from ..models.processing_result import FileStat, ProcessingResult
from ..models.venue_file import FileStatus, VenueFile
from ..venue.reader import VenueFileError, read_venue_file
from .normalizer import VenueError, normalize_venue
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Batch orchestration for venue normalization.

Scans the configured directory (or takes explicit paths), normalizes each
venue file independently, records failures in the error log and aggregates
the totals reported on the SUMMARY line. One bad file never stops the batch.
"""

VENUE_SUFFIX = ".json"


class ProcessingError(Exception):
    """Fatal batch error (nothing could be processed)."""
    pass


def scan_venue_files(directory: Path) -> list[Path]:
    """Scan directory for .json venue files (non-recursive, sorted by name).

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(
            (p for p in directory.iterdir() if p.is_file() and p.suffix == VENUE_SUFFIX),
            key=lambda p: p.name,
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def _process_single_file(
    file_path: Path,
    options: NormalizeOptions,
    error_log: ErrorLogBuffer,
) -> VenueFile:
    """Read and normalize one venue file.

    Failures are recorded in error_log and returned as a FAILED VenueFile;
    they do not propagate.
    """
    try:
        document = read_venue_file(file_path)
        venue = normalize_venue(document, options)
    except (VenueFileError, VenueError) as e:
        logger.warning(f"{file_path.name}: {e}")
        error_log.record_failure(file_path.name, e)
        return VenueFile(
            path=file_path,
            name=file_path.name,
            status=FileStatus.FAILED,
            error_type=e.error_type,
            error=str(e),
        )

    logger.info(
        f"{file_path.name}: venue={venue.venue_id} sections={len(venue.sections)} seats={venue.seat_count}"
    )
    return VenueFile(
        path=file_path,
        name=file_path.name,
        status=FileStatus.SUCCESS,
        venue=venue,
        seat_count=venue.seat_count,
        neighbor_count=len(venue.neighbors) if venue.neighbors is not None else 0,
    )


def process_all(
    config: NormalizerConfig,
    paths: list[Path] | None = None,
    error_log: ErrorLogBuffer | None = None,
) -> ProcessingResult:
    """Normalize every venue file of a batch.

    Args:
        config: Normalizer configuration (source directory, price table, neighbor flag)
        paths: Explicit venue files; None scans config.source_directory
        error_log: Buffer for failure records (a fresh one by default)

    Returns:
        ProcessingResult with aggregated metrics, file stats and normalized venues

    Raises:
        ProcessingError: source directory missing or unreadable
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()
    options = config.to_options()

    file_paths = list(paths) if paths is not None else scan_venue_files(Path(config.source_directory))

    file_stats: list[FileStat] = []
    venues = {}
    success_count = 0
    failed_count = 0
    total_seats = 0
    total_neighbors = 0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)

            file_start = datetime.now(UTC)
            venue_file = _process_single_file(file_path, options, error_log)
            file_elapsed = (datetime.now(UTC) - file_start).total_seconds()

            succeeded = venue_file.status == FileStatus.SUCCESS
            if succeeded:
                success_count += 1
                total_seats += venue_file.seat_count
                total_neighbors += venue_file.neighbor_count
                venues[venue_file.name] = venue_file.venue
            else:
                failed_count += 1

            progress.finish_file(succeeded, venue_file.seat_count)

            file_stats.append(FileStat(
                file_name=venue_file.name,
                status=venue_file.status.value,
                seat_count=venue_file.seat_count,
                elapsed_seconds=file_elapsed,
                venue_id=venue_file.venue.venue_id if venue_file.venue is not None else None,
                error_type=venue_file.error_type,
            ))

    failure_counts = error_log.counts_by_type()
    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning(f"failed to write error log: {e}")
    else:
        if log_path is not None:
            counts = " ".join(f"{k}={v}" for k, v in failure_counts.items())
            logger.info(f"error log written: {log_path} ({counts})")

    end_time = datetime.now(UTC)
    elapsed_seconds = (end_time - start_time).total_seconds()
    throughput = total_seats / elapsed_seconds if elapsed_seconds > 0 else 0.0

    return ProcessingResult(
        success_files=success_count,
        failed_files=failed_count,
        total_seats=total_seats,
        total_neighbors=total_neighbors,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_seconds,
        throughput_seats_per_sec=throughput,
        file_stats=file_stats,
        venues=venues,
    )
