from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from seatmap.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from seatmap.logging.init import enable_debug, log_summary, setup_logging
from seatmap.models.config_models import NormalizerConfig
from seatmap.models.processing_result import ProcessingResult
from seatmap.services.geometry import seats_frame, venue_bounds
from seatmap.services.normalizer import VenueError, normalize_venue
from seatmap.services.orchestrator import ProcessingError, process_all, scan_venue_files
from seatmap.services.summary import render_summary_line
from seatmap.venue.reader import VenueFileError, read_venue_file

"""CLI entrypoint.

Flow:
- Load .env, then the YAML config (--config > $SEATMAP_CONFIG > config/normalize.yml)
- Normalize the venue files given on the command line, or every *.json in
  source_directory
- Print one SUMMARY line and exit with 0 (all ok), 2 (some file failed) or 1 (fatal)
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

CONFIG_ENV_VAR = "SEATMAP_CONFIG"
INSPECT_SAMPLE_SEATS = 3


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env with python-dotenv (no-op when the file does not exist)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Venue seat-map normalizer")
    p.add_argument("paths", nargs="*", type=Path, help="Venue JSON files (default: scan source_directory)")
    p.add_argument("--config", type=Path, default=None, help="Config YAML path")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print sections & first seats per row then exit")
    p.add_argument("--export-csv", action="store_true", help="Write one seats CSV per venue to export_directory")
    return p.parse_args(argv)


def _resolve_config_path(args: argparse.Namespace) -> Path:
    if args.config is not None:
        return args.config
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def _inspect_data(cfg: NormalizerConfig, paths: list[Path]) -> int:
    if not paths:
        print("inspect: no .json files")
        return EXIT_SUCCESS_ALL
    options = cfg.to_options()
    for path in paths:
        print(f"FILE: {path.name}")
        try:
            venue = normalize_venue(read_venue_file(path), options)
        except (VenueFileError, VenueError) as e:
            print(f"  error={e}")
            continue
        bounds = venue_bounds(venue)
        available = sum(1 for seat in venue.flat_seats if seat.is_available)
        if bounds is not None:
            print(
                f"  VENUE: {venue.venue_id} seats={venue.seat_count} available={available} "
                f"bounds=({bounds.min_x}, {bounds.min_y})-({bounds.max_x}, {bounds.max_y})"
            )
        else:
            print(f"  VENUE: {venue.venue_id} seats=0 available=0")
        for section in venue.sections:
            rows = venue.rows_by_section.get(section.id, [])
            print(f"  SECTION: {section.id} label={section.label!r} rows={len(rows)}")
            for row in rows:
                sample = [seat.id for seat in row.seats[:INSPECT_SAMPLE_SEATS]]
                print(f"    row={row.row_index} seats={len(row.seats)} sample={sample}")
    return EXIT_SUCCESS_ALL


def _export_csv(cfg: NormalizerConfig, result: ProcessingResult) -> list[Path]:
    export_dir = Path(cfg.export_directory)
    export_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for venue in result.venues.values():
        out = export_dir / f"{venue.venue_id}.csv"
        seats_frame(venue).to_csv(out, index=False)
        written.append(out)
    return written


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみ sys.argv を読む ([] はテストからの明示的な空引数)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    config_path = _resolve_config_path(args)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.debug:
        enable_debug().debug("debug mode enabled")

    paths: list[Path] | None = list(args.paths) or None
    if paths is None:
        directory = Path(cfg.source_directory)
        if not directory.exists():
            logger.error(f"directory not found: {directory}")
            return EXIT_FATAL
        logger.info(f"Processing files from: {directory}")

    if args.inspect_data:
        try:
            inspect_paths = paths if paths is not None else scan_venue_files(Path(cfg.source_directory))
        except ProcessingError as e:
            logger.error(f"processing: {e}")
            return EXIT_FATAL
        return _inspect_data(cfg, inspect_paths)

    try:
        result = process_all(cfg, paths=paths)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    if args.export_csv:
        for out in _export_csv(cfg, result):
            logger.info(f"exported: {out}")

    total_files = result.success_files + result.failed_files
    summary_line = render_summary_line(total_files, result)
    # log_summary が "SUMMARY " を付与するので本文のみ渡す
    log_summary(summary_line.removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
