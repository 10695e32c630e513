from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .normalized_venue import NormalizeOptions

"""Configuration dataclass for the seatmap normalizer.

Built by seatmap.config.loader from config/normalize.yml after schema
validation.
"""


@dataclass(frozen=True)
class NormalizerConfig:
    """Root configuration object for batch normalization."""
    source_directory: str  # Directory scanned for *.json venue files
    price_by_tier: dict[Any, float] = field(default_factory=dict)  # tier -> price
    precompute_neighbors: bool = False
    export_directory: str = "./exports"  # CSV export target (--export-csv)

    def to_options(self) -> NormalizeOptions:
        """Options passed to normalize_venue() for every file in the batch."""
        return NormalizeOptions(
            price_by_tier=dict(self.price_by_tier),
            precompute_neighbors=self.precompute_neighbors,
        )
