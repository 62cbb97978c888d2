import pytest

import dataclasses

from colorflow.colors import CODES, Color
from colorflow.search import (
    MIN_STEPS_CEILING,
    BlendPath,
    SearchLimitExceeded,
    calculate_min_steps,
    find_path,
)


def hexes(found: BlendPath):
    return [c.hex for c in found.colors]


def test_symbolic_single_step():
    found = find_path("R", "Y", ["G"], 5, tolerance=0, mode="symbolic")
    assert found is not None
    assert found.colors == (Color.of("R"), Color.of("Y"))
    assert found.ratios == (0.5,)
    assert found.steps == 1


def test_optimal_ratio_lands_on_palette_color():
    found = find_path("W", "#FF0000", ["#FF0000"], 1, tolerance=0, use_optimal_ratio=True)
    assert found is not None
    assert hexes(found) == ["#FFFFFF", "#FF0000"]
    assert found.ratios == (1.0,)


def test_black_absorbs_symbolic_blends():
    assert find_path("K", "R", ["G", "B"], 3, mode="symbolic") is None


def test_start_already_matches():
    found = find_path("R", "#FF5555", [], 0)
    assert found is not None
    assert found.colors == (Color.of("R"),)
    assert found.ratios == ()


def test_start_matches_within_tolerance():
    found = find_path("#101010", "#181818", [], 0, tolerance=10)
    assert found is not None and found.steps == 0
    assert find_path("#101010", "#181818", [], 0, tolerance=5) is None


def test_empty_palette_is_no_path():
    assert find_path("R", "G", [], 10) is None


def test_step_budget():
    # W+G=G, then G+B=C
    assert find_path("W", "C", ["G", "B"], 1, mode="symbolic") is None
    found = find_path("W", "C", ["G", "B"], 2, mode="symbolic")
    assert found is not None
    assert found.colors == (Color.of("W"), Color.of("G"), Color.of("C"))
    assert found.ratios == (0.5, 0.5)


def test_fixed_ratio_interpolation():
    found = find_path("#000000", "#C0C0C0", ["#FFFFFF"], 3, use_optimal_ratio=False)
    assert found is not None
    assert hexes(found) == ["#000000", "#808080", "#C0C0C0"]
    assert found.ratios == (0.5, 0.5)


def test_optimal_ratio_interpolation():
    found = find_path("#000000", "#808080", ["#FFFFFF"], 3)
    assert found is not None
    assert hexes(found) == ["#000000", "#808080"]
    assert found.ratios == (pytest.approx(128 / 255),)


def test_ratios_align_with_colors():
    found = find_path("R", "#AA55AA", ["G", "B"], 4, use_optimal_ratio=False)
    assert found is not None
    assert len(found.ratios) == len(found.colors) - 1
    assert hexes(found) == ["#FF5555", "#AA55AA"]


@pytest.mark.parametrize("optimal", [True, False])
def test_terminates_with_large_budget(optimal):
    assert find_path("R", "#000000", ["W", "K"], 50, use_optimal_ratio=optimal) is None


def test_duplicate_palette_entries_collapse():
    found = find_path("R", "Y", ["G", "g", "#55FF55"], 2, mode="symbolic")
    assert found is not None and found.steps == 1


def test_to_dict():
    found = find_path("R", "Y", ["G"], 5, mode="symbolic")
    assert found.to_dict() == {"path": ["#FF5555", "#FFFF55"], "ratios": [0.5]}


def test_min_steps():
    assert calculate_min_steps("W", "C", ["G", "B"], mode="symbolic") == 2
    assert calculate_min_steps("R", "R", []) == 0
    assert calculate_min_steps("K", "R", ["G", "B"], mode="symbolic") == -1


def test_min_steps_ceiling_is_large():
    assert MIN_STEPS_CEILING >= 10


def test_path_is_immutable():
    found = find_path("W", "C", ["G", "B"], 2, mode="symbolic")
    assert isinstance(found.colors, tuple) and isinstance(found.ratios, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        found.colors = ()
    with pytest.raises(AttributeError):
        found.ratios.append(0.5)


def test_expansion_limit_stops_wide_search():
    # fixed-ratio blends over the whole palette reach a huge number of colors
    with pytest.raises(SearchLimitExceeded) as info:
        find_path("R", "#000000", list(CODES), 50, use_optimal_ratio=False, max_expansions=200)
    assert info.value.expansions == 200


def test_expansion_limit_not_hit():
    found = find_path("R", "Y", ["G"], 5, mode="symbolic", max_expansions=1)
    assert found is not None and found.steps == 1
    assert find_path("R", "R", ["G"], 5, max_expansions=0).steps == 0
    with pytest.raises(SearchLimitExceeded):
        calculate_min_steps("R", "#000000", list(CODES), mode="symbolic", max_expansions=0)
