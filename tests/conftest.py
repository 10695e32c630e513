# Shared pytest fixtures
from __future__ import annotations
import copy
import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Callable

import pytest

from seatmap.logging.init import LOGGER_NAME, reset_logging

SAMPLE_VENUE: dict[str, Any] = {
    "venueId": "arena-01",
    "name": "Metropolis Arena",
    "map": {"width": 1024, "height": 768},
    "sections": [
        {
            "id": "A",
            "label": "Lower Bowl A",
            "transform": {"x": 0, "y": 0, "scale": 1},
            "rows": [
                {
                    "index": 1,
                    "seats": [
                        {"id": "A-1-01", "col": 1, "x": 50, "y": 40, "priceTier": 1, "status": "available"},
                        {"id": "A-1-02", "col": 2, "x": 80, "y": 40, "priceTier": 1, "status": "reserved"},
                        {"id": "A-1-03", "col": 3, "x": 110, "y": 40, "priceTier": 2, "status": "available"},
                    ],
                },
                {
                    "index": 2,
                    "seats": [
                        {"id": "A-2-01", "col": 1, "x": 50, "y": 70, "priceTier": 1, "status": "sold"},
                        {"id": "A-2-02", "col": 2, "x": 80, "y": 70, "priceTier": 1, "status": "available"},
                    ],
                },
            ],
        },
        {
            "id": "B",
            "label": "Upper Bowl B",
            "transform": {"x": 200, "y": 100, "scale": 0.8},
            "rows": [
                {
                    "index": 1,
                    "seats": [
                        {"id": "B-1-01", "col": 1, "x": 250, "y": 140, "priceTier": 3, "status": "available"},
                    ],
                },
            ],
        },
    ],
}

PRICE_BY_TIER = {1: 120, 2: 90, 3: 60}


@pytest.fixture()
def sample_venue() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_VENUE)


@pytest.fixture()
def price_by_tier() -> dict[int, int]:
    return dict(PRICE_BY_TIER)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "venues").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./venues
price_by_tier:
  1: 120
  2: 90
  3: 60
precompute_neighbors: true
export_directory: ./exports
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "normalize.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def write_venue(temp_workdir: Path) -> Callable[[str, Any], Path]:
    """Factory writing a venue document (or raw text) into ./venues."""
    def _write(name: str, document: Any) -> Path:
        path = temp_workdir / "venues" / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def _detach_app_logger():
    """Drop handlers bound to this test's captured stdout."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    reset_logging()
