from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm

"""Venue progress bar (tqdm, TTY only).

Without a TTY (CI, pipes, pytest capture) no bar is created and the labeled
log lines are the only output.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """One bar per batch run; the postfix shows ok/failed files and seats so far."""

    def __init__(self, total_files: int, *, description: str = "Normalizing venues") -> None:
        self.total_files = total_files
        self.description = description
        self.current_file = 0
        self.succeeded = 0
        self.failed = 0
        self.seats = 0

        self.pbar: Any = None
        if is_tty_enabled():
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="venue",
                leave=True,
                ncols=80,
                ascii=True,
            )

    @property
    def enabled(self) -> bool:
        return self.pbar is not None

    def start_file(self, file_path: Path) -> None:
        self.current_file += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({file_path.name})")

    def finish_file(self, success: bool, seats: int = 0) -> None:
        """Count one finished venue file and advance the bar."""
        if success:
            self.succeeded += 1
            self.seats += seats
        else:
            self.failed += 1
        if self.pbar is not None:
            self.pbar.set_postfix(ok=self.succeeded, failed=self.failed, seats=self.seats)
            self.pbar.set_description(self.description)
            self.pbar.update(1)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
