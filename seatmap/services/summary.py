from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch normalization runs."""


def _format_number(value: float) -> str:
    # 整数値は小数点なし、極小値は指数表記を避ける
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(value)


def render_summary_line(total_files: int, result: ProcessingResult) -> str:
    """Render the SUMMARY line for a batch run.

    Format:
    SUMMARY files={total}/{total} success={success} failed={failed} seats={seats}
    neighbors={neighbors} elapsed_sec={elapsed} throughput_sps={throughput}

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=0, total_seats=300, total_neighbors=300,
        ...     start_time=start, end_time=end, elapsed_seconds=2.0,
        ...     throughput_seats_per_sec=150.0,
        ... )
        >>> render_summary_line(1, result)
        'SUMMARY files=1/1 success=1 failed=0 seats=300 neighbors=300 elapsed_sec=2 throughput_sps=150'
    """
    return (
        f"SUMMARY files={total_files}/{total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"seats={result.total_seats} "
        f"neighbors={result.total_neighbors} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_sps={_format_number(result.throughput_seats_per_sec)}"
    )
