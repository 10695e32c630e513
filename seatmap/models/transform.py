from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

"""Section transform model for the seatmap venue normalizer.

A section is drawn in its own local coordinate space and placed on the venue
canvas with an affine transform applied per axis:

    absolute = local * scale + offset
"""

__all__ = [
    "Transform",
    "is_finite_number",
    "is_number",
]


def is_number(value: Any) -> bool:
    """Return True for int/float values (bool is rejected even though it subclasses int)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    # json.loads accepts NaN and Infinity
    return is_number(value) and math.isfinite(value)


@dataclass(frozen=True)
class Transform:
    """Affine placement of a section on the venue canvas."""
    x: float = 0  # horizontal offset
    y: float = 0  # vertical offset
    scale: float = 1

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map section-local coordinates to venue-absolute coordinates."""
        return (x * self.scale + self.x, y * self.scale + self.y)

    @classmethod
    def from_raw(cls, raw: Any) -> Transform:
        """Build a Transform from a section's raw ``transform`` mapping.

        ``None`` yields the identity transform ``{x: 0, y: 0, scale: 1}``. Missing
        keys fall back to the identity value for that key.

        Raises:
            TypeError: raw is neither None nor a mapping
            ValueError: a supplied value is not numeric
        """
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise TypeError(f"transform must be a mapping, got {type(raw).__name__}")
        values: dict[str, float] = {}
        for key, default in (("x", 0), ("y", 0), ("scale", 1)):
            value = raw.get(key, default)
            if not is_finite_number(value):
                raise ValueError(f"transform.{key} must be a finite number, got {value!r}")
            values[key] = value
        return cls(**values)
