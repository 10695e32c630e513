from __future__ import annotations

from seatmap.models.normalized_venue import NormalizeOptions
from seatmap.models.seat import RowSeat, RowSeats, SeatNeighbors
from seatmap.services.neighbors import compute_neighbors, find_nearest_seat
from seatmap.services.normalizer import normalize_venue

"""Unit tests for the keyboard-navigation neighbor graph."""


def _row(index, *seats):
    return RowSeats(row_index=index, seats=[RowSeat(id=i, col=c, x=x, y=0) for i, c, x in seats])


def _neighbors(sample_venue):
    return normalize_venue(sample_venue, NormalizeOptions(precompute_neighbors=True)).neighbors


class TestFindNearestSeat:
    def test_empty_row(self):
        assert find_nearest_seat([], 1, 10) is None

    def test_exact_col_match_beats_distance(self):
        row = _row(1, ("a", 1, 100), ("b", 2, 10))

        assert find_nearest_seat(row.seats, 1, 10).id == "a"

    def test_distance_fallback_when_col_absent_in_row(self):
        row = _row(1, ("a", 1, 0), ("b", 2, 45), ("c", 3, 90))

        assert find_nearest_seat(row.seats, 9, 50).id == "b"

    def test_distance_fallback_when_target_col_is_none(self):
        row = _row(1, ("a", 5, 0), ("b", None, 60))

        # a None target col never matches a None col in the row
        assert find_nearest_seat(row.seats, None, 55).id == "b"

    def test_tie_goes_to_first_in_scan_order(self):
        # sorted by col, so the first seat scanned sits to the right
        row = _row(1, ("right", 1, 60), ("left", 2, 40))

        assert find_nearest_seat(row.seats, 5, 50).id == "right"


def test_left_right_within_row(sample_venue):
    neighbors = _neighbors(sample_venue)

    assert neighbors["A-1-01"].left is None
    assert neighbors["A-1-01"].right == "A-1-02"
    assert neighbors["A-1-02"].left == "A-1-01"
    assert neighbors["A-1-02"].right == "A-1-03"
    assert neighbors["A-1-03"].right is None


def test_adjacent_seats_are_mutual_left_right(sample_venue):
    result = normalize_venue(sample_venue, NormalizeOptions(precompute_neighbors=True))

    for rows in result.rows_by_section.values():
        for row in rows:
            for a, b in zip(row.seats, row.seats[1:]):
                assert result.neighbors[a.id].right == b.id
                assert result.neighbors[b.id].left == a.id


def test_up_down_by_column(sample_venue):
    neighbors = _neighbors(sample_venue)

    assert neighbors["A-1-01"].up is None
    assert neighbors["A-1-01"].down == "A-2-01"
    assert neighbors["A-1-02"].down == "A-2-02"
    assert neighbors["A-2-01"].up == "A-1-01"
    assert neighbors["A-2-02"].up == "A-1-02"
    assert neighbors["A-2-02"].down is None


def test_edges_are_not_forced_symmetric(sample_venue):
    neighbors = _neighbors(sample_venue)

    # row 2 has no col 3, so A-1-03 drops to the closest x
    assert neighbors["A-1-03"].down == "A-2-02"
    assert neighbors["A-2-02"].up == "A-1-02"


def test_every_seat_has_an_entry(sample_venue):
    neighbors = _neighbors(sample_venue)

    assert set(neighbors) == {"A-1-01", "A-1-02", "A-1-03", "A-2-01", "A-2-02", "B-1-01"}
    assert neighbors["B-1-01"] == SeatNeighbors()


def test_sections_are_independent(sample_venue):
    neighbors = _neighbors(sample_venue)

    assert neighbors["B-1-01"].up is None
    assert neighbors["A-2-01"].down is None


def test_up_down_follow_sorted_row_order_not_index_arithmetic():
    rows_by_section = {
        "S": [
            _row(1, ("r1", 1, 0)),
            _row(5, ("r5", 1, 0)),
            _row(9, ("r9", 1, 0)),
        ],
    }

    neighbors = compute_neighbors(rows_by_section)

    assert neighbors["r1"].down == "r5"
    assert neighbors["r5"].up == "r1"
    assert neighbors["r5"].down == "r9"


def test_empty_row_blocks_vertical_edges():
    rows_by_section = {
        "S": [
            _row(1, ("top", 1, 0)),
            _row(2),
            _row(3, ("bottom", 1, 0)),
        ],
    }

    neighbors = compute_neighbors(rows_by_section)

    assert neighbors["top"].down is None
    assert neighbors["bottom"].up is None


def test_zero_row_section_contributes_nothing():
    assert compute_neighbors({"Z": []}) == {}
    assert compute_neighbors({}) == {}


def test_x_fallback_without_cols():
    venue = {
        "venueId": "v",
        "sections": [{
            "id": "S",
            "label": "S",
            "rows": [
                {"index": 1, "seats": [
                    {"id": "p", "x": 52, "y": 0, "status": "available"},
                ]},
                {"index": 2, "seats": [
                    {"id": "q2", "x": 90, "y": 30, "status": "available"},
                    {"id": "q1", "x": 40, "y": 30, "status": "available"},
                ]},
            ],
        }],
    }

    neighbors = normalize_venue(venue, NormalizeOptions(precompute_neighbors=True)).neighbors

    assert neighbors["p"].down == "q1"
    assert neighbors["q1"].right == "q2"
    assert neighbors["q2"].up == "p"


def test_seat_neighbors_to_dict_drops_absent_directions():
    assert SeatNeighbors(left="a", down="b").to_dict() == {"left": "a", "down": "b"}
    assert SeatNeighbors().to_dict() == {}
