#!/usr/bin/env python3
"""Sample venue generator.

Generates a venue JSON document in the shape read by the seatmap normalizer:

    {venueId, name, map: {width, height},
     sections: [{id, label, transform: {x, y, scale},
                 rows: [{index, seats: [{id, col, x, y, priceTier, status}]}]}]}

The default layout is the fixed six-section arena (lower bowl premium, upper
bowl standard, VIP boxes). --rows/--seats override every section's size for
larger datasets; statuses are drawn from a seeded generator so output is
reproducible.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import numpy as np

CANVAS = {"width": 1200, "height": 800}
SEAT_SPACING = 40
ROW_SPACING = 45
SECTION_OFFSET = 50  # first seat position inside a section

SECTION_TEMPLATES: list[dict[str, Any]] = [
    {"id": "A", "label": "Lower Bowl A", "priceTier": 1, "x": 100, "y": 100, "rows": 6, "seatsPerRow": 8, "scale": 1.0},
    {"id": "B", "label": "Lower Bowl B", "priceTier": 1, "x": 500, "y": 100, "rows": 6, "seatsPerRow": 8, "scale": 1.0},
    {"id": "C", "label": "Upper Bowl C", "priceTier": 2, "x": 100, "y": 400, "rows": 5, "seatsPerRow": 10, "scale": 0.9},
    {"id": "D", "label": "Upper Bowl D", "priceTier": 2, "x": 600, "y": 400, "rows": 5, "seatsPerRow": 10, "scale": 0.9},
    {"id": "E", "label": "VIP Box E", "priceTier": 3, "x": 900, "y": 150, "rows": 4, "seatsPerRow": 6, "scale": 0.8},
    {"id": "F", "label": "VIP Box F", "priceTier": 3, "x": 900, "y": 400, "rows": 4, "seatsPerRow": 6, "scale": 0.8},
]

STATUSES = ["available", "reserved", "sold", "held"]
STATUS_WEIGHTS = [0.85, 0.10, 0.05, 0.0]


def section_templates(count: int | None = None) -> list[dict[str, Any]]:
    """First ``count`` sections; beyond six the layout repeats one canvas height lower.

    Repeated sections get a lap suffix (A2, B2, ...) so section and seat ids stay unique.
    """
    if count is None:
        return list(SECTION_TEMPLATES)
    templates = []
    for i in range(count):
        lap, base = divmod(i, len(SECTION_TEMPLATES))
        template = SECTION_TEMPLATES[base]
        if lap:
            template = {
                **template,
                "id": f"{template['id']}{lap + 1}",
                "label": f"{template['label']} ({lap + 1})",
                "y": template["y"] + lap * CANVAS["height"],
            }
        templates.append(template)
    return templates


def generate_seats(
    rng: np.random.Generator,
    section_id: str,
    row_index: int,
    seats_per_row: int,
    price_tier: int,
) -> list[dict[str, Any]]:
    statuses = rng.choice(STATUSES, size=seats_per_row, p=STATUS_WEIGHTS).tolist()
    seats = []
    for col in range(1, seats_per_row + 1):
        seats.append({
            "id": f"{section_id}-{row_index:02d}-{col:02d}",
            "col": col,
            "x": (col - 1) * SEAT_SPACING + SECTION_OFFSET,
            "y": (row_index - 1) * ROW_SPACING + SECTION_OFFSET,
            "priceTier": price_tier,
            "status": statuses[col - 1],
        })
    return seats


def generate_venue(
    seed: int = 42,
    rows: int | None = None,
    seats_per_row: int | None = None,
    sections: int | None = None,
    venue_id: str = "simple-arena-01",
    name: str = "Simple Arena",
) -> dict[str, Any]:
    """Build the venue document.

    Args:
        seed: Random seed for seat statuses
        rows: Rows per section (default: template value)
        seats_per_row: Seats per row (default: template value)
        sections: Number of sections (default: the six template sections)
        venue_id: venueId of the document
        name: Venue display name

    Returns:
        Venue document as plain dict/list structures
    """
    rng = np.random.default_rng(seed)
    templates = section_templates(sections)
    laps = max(1, -(-len(templates) // len(SECTION_TEMPLATES)))
    venue_sections = []
    for template in templates:
        row_count = rows or template["rows"]
        width = seats_per_row or template["seatsPerRow"]
        venue_sections.append({
            "id": template["id"],
            "label": template["label"],
            "transform": {"x": template["x"], "y": template["y"], "scale": template["scale"]},
            "rows": [
                {
                    "index": row_index,
                    "seats": generate_seats(rng, template["id"], row_index, width, template["priceTier"]),
                }
                for row_index in range(1, row_count + 1)
            ],
        })
    canvas = {"width": CANVAS["width"], "height": CANVAS["height"] * laps}
    return {"venueId": venue_id, "name": name, "map": canvas, "sections": venue_sections}


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a sample venue JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default six-section arena (244 seats)
  %(prog)s venues/venue.json

  # Larger dataset
  %(prog)s venues/big.json --sections 12 --rows 40 --seats 60 --seed 7
        """
    )
    parser.add_argument("output", type=Path, help="Output JSON path")
    parser.add_argument("--sections", type=int, default=None, help="Number of sections (default: 6)")
    parser.add_argument("--rows", type=int, default=None, help="Rows per section (default: template)")
    parser.add_argument("--seats", type=int, default=None, help="Seats per row (default: template)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--venue-id", default="simple-arena-01", help="venueId (default: simple-arena-01)")
    args = parser.parse_args()

    if args.sections is not None and args.sections <= 0:
        print("Error: --sections must be positive", file=sys.stderr)
        return 1
    if args.rows is not None and args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if args.seats is not None and args.seats <= 0:
        print("Error: --seats must be positive", file=sys.stderr)
        return 1

    venue = generate_venue(
        seed=args.seed,
        rows=args.rows,
        seats_per_row=args.seats,
        sections=args.sections,
        venue_id=args.venue_id,
    )
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(json.dumps(venue, indent=2), encoding="utf-8")

    total = sum(len(row["seats"]) for section in venue["sections"] for row in section["rows"])
    print(f"Generated {len(venue['sections'])} sections with {total} seats")
    for section in venue["sections"]:
        count = sum(len(row["seats"]) for row in section["rows"])
        t = section["transform"]
        print(f"  {section['id']}: {len(section['rows'])} rows, {count} seats at ({t['x']}, {t['y']})")
    print(f"Venue saved to: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
