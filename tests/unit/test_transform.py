from __future__ import annotations

import pytest

from seatmap.models.transform import Transform, is_finite_number, is_number


def test_identity_default():
    t = Transform()

    assert (t.x, t.y, t.scale) == (0, 0, 1)
    assert t.apply(12, 34) == (12, 34)


def test_apply_scales_then_offsets():
    t = Transform(x=200, y=100, scale=0.5)

    assert t.apply(40, 60) == (220, 130)


def test_from_raw_none_is_identity():
    assert Transform.from_raw(None) == Transform()


def test_from_raw_missing_keys_use_identity_values():
    assert Transform.from_raw({"x": 5}) == Transform(x=5, y=0, scale=1)


def test_from_raw_full():
    assert Transform.from_raw({"x": 1, "y": 2.5, "scale": 0.8}) == Transform(x=1, y=2.5, scale=0.8)


def test_from_raw_rejects_non_mapping():
    with pytest.raises(TypeError):
        Transform.from_raw([0, 0, 1])


@pytest.mark.parametrize("raw", [{"x": "1"}, {"scale": None}, {"y": False}])
def test_from_raw_rejects_non_numeric(raw):
    with pytest.raises(ValueError):
        Transform.from_raw(raw)


def test_transform_is_frozen():
    t = Transform()
    with pytest.raises(AttributeError):
        t.x = 3


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1, True), (1.5, True), (0, True), (True, False), ("1", False), (None, False)],
)
def test_is_number(value, expected):
    assert is_number(value) is expected


@pytest.mark.parametrize("raw", [{"x": float("inf")}, {"scale": float("nan")}])
def test_from_raw_rejects_non_finite(raw):
    with pytest.raises(ValueError, match="finite"):
        Transform.from_raw(raw)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, True), (-0.5, True), (float("inf"), False), (float("nan"), False), (True, False), ("1", False)],
)
def test_is_finite_number(value, expected):
    assert is_finite_number(value) is expected
