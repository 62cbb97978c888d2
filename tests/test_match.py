import math

import pytest

from colorflow.match import distance, matches


def test_distance_identity_and_symmetry():
    assert distance("R", "R") == 0.0
    assert distance("R", "#FF5555") == 0.0
    assert distance("#102030", "#C0B0A0") == distance("#C0B0A0", "#102030")


def test_distance_values():
    assert distance("R", "Y") == pytest.approx(170.0)
    assert distance("K", "W") == pytest.approx(204 * math.sqrt(3))


def test_uses_int_not_uint8():
    assert distance("#000000", "#C8C8C8") > 300


def test_exact_match_by_hex():
    assert matches("Y", "#ffff55")
    assert not matches("Y", "#FFFF54")


def test_tolerance_is_per_channel():
    assert matches("#101010", "#181818", 10)
    assert not matches("#101010", "#181818", 5)
    # Euclidean distance 13.9 but every channel within 8
    assert matches("#101010", "#181818", 8)
    assert not matches("#101010", "#181810", 7)


def test_tolerance_monotonic():
    a, b = "#204060", "#2A3A70"
    hits = [matches(a, b, t) for t in range(0, 40)]
    first = hits.index(True)
    assert all(hits[first:])
    assert not any(hits[:first])


def test_negative_tolerance_is_exact():
    assert matches("R", "R", -3)
    assert not matches("#101010", "#111111", -3)
