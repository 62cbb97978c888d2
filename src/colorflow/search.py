# search.py – breadth-first search over blend results
#
# Nodes are colors (identified by hex), edges blend the current color with one
# palette color. A color is enqueued at most once, which bounds the search even
# though interpolation can produce many distinct colors.
#
# Because the ratio may differ per edge, the first path dequeued is shortest
# among explored nodes only: a color first reached through one ratio sequence
# is never revisited through another of equal length.

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .blend import DEFAULT_RATIO, MixMode, blend
from .colors import Color, ColorLike
from .match import matches
from .ratio import optimal_ratio

log = logging.getLogger(__name__)

MIN_STEPS_CEILING = 20
NO_PATH = -1


class SearchLimitExceeded(RuntimeError):
    """The search expanded more colors than its caller allowed."""

    def __init__(self, expansions: int) -> None:
        super().__init__(f"search stopped after {expansions} expansions")
        self.expansions = expansions


@dataclass(frozen=True)
class BlendPath:
    """Colors visited from start to target and the ratio used at each step."""

    colors: Tuple[Color, ...]
    ratios: Tuple[float, ...] = ()

    @property
    def steps(self) -> int:
        return len(self.colors) - 1

    def to_dict(self) -> dict:
        return {
            "path": [c.hex for c in self.colors],
            "ratios": list(self.ratios),
        }


def find_path(
    start: ColorLike,
    target: ColorLike,
    palette: Iterable[ColorLike],
    max_steps: int,
    tolerance: int = 0,
    use_optimal_ratio: bool = True,
    mode: MixMode = "interpolate",
    max_expansions: int | None = None,
) -> BlendPath | None:
    """
    Search for a sequence of blends turning `start` into `target`.

    Each step blends the current color with one palette color, at the ratio
    that brings it closest to the target when `use_optimal_ratio` is set
    (interpolate mode only) and at 0.5 otherwise. Paths longer than
    `max_steps` blends are not explored. Returns None when no path exists.

    `max_expansions` bounds the work done; past it SearchLimitExceeded is
    raised instead of a result, since the answer is not known.
    """
    src, dst = Color.of(start), Color.of(target)
    # dedupe, keep order for deterministic expansion
    colors = list(dict.fromkeys(Color.of(c) for c in palette))
    optimize = use_optimal_ratio and mode != "symbolic"

    queue: deque[tuple[List[Color], List[float], Color]] = deque([([src], [], src)])
    visited = {src.hex}
    expanded = 0

    while queue:
        path, ratios, current = queue.popleft()
        if matches(current, dst, tolerance):
            log.debug(
                "path %s -> %s found: %d steps, %d expansions",
                src, dst, len(path) - 1, expanded,
            )
            return BlendPath(tuple(path), tuple(ratios))
        if len(path) - 1 >= max_steps:
            continue

        if max_expansions is not None and expanded >= max_expansions:
            log.debug("search %s -> %s hit the limit of %d expansions", src, dst, expanded)
            raise SearchLimitExceeded(expanded)
        expanded += 1
        for color in colors:
            ratio = optimal_ratio(current, color, dst) if optimize else DEFAULT_RATIO
            mixed = blend(current, color, ratio, mode)
            if mixed.hex in visited:
                continue
            visited.add(mixed.hex)
            queue.append((path + [mixed], ratios + [ratio], mixed))

    log.debug(
        "no path %s -> %s within %d steps (%d expansions, %d colors seen)",
        src, dst, max_steps, expanded, len(visited),
    )
    return None


def calculate_min_steps(
    start: ColorLike,
    target: ColorLike,
    palette: Iterable[ColorLike],
    tolerance: int = 0,
    mode: MixMode = "interpolate",
    max_expansions: int | None = None,
) -> int:
    """Blends needed to reach the target, or -1 when it is unreachable."""
    found = find_path(
        start,
        target,
        palette,
        MIN_STEPS_CEILING,
        tolerance=tolerance,
        use_optimal_ratio=True,
        mode=mode,
        max_expansions=max_expansions,
    )
    return found.steps if found is not None else NO_PATH


__all__ = [
    "BlendPath",
    "MIN_STEPS_CEILING",
    "NO_PATH",
    "SearchLimitExceeded",
    "calculate_min_steps",
    "find_path",
]
