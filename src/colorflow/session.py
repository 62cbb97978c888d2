from __future__ import annotations

import logging
from typing import List

from .blend import blend, clamp_ratio
from .colors import Color, ColorLike
from .level import Level
from .match import matches

log = logging.getLogger(__name__)


class MixSession:
    """
    Play-test a level: start from its start color and blend with allowed
    colors one step at a time until the target is matched or steps run out.
    """

    def __init__(self, level: Level) -> None:
        self.level = level
        self.reset()

    def reset(self) -> None:
        self.current: Color = self.level.start_color
        self.history: List[Color] = [self.current]
        self.ratios: List[float] = []

    @property
    def steps(self) -> int:
        return len(self.history) - 1

    @property
    def completed(self) -> bool:
        return matches(self.current, self.level.target_color, self.level.color_tolerance)

    @property
    def out_of_steps(self) -> bool:
        return not self.completed and self.steps >= self.level.max_steps

    @property
    def finished(self) -> bool:
        return self.completed or self.out_of_steps

    def _resolve(self, color: ColorLike, ratio: float | None) -> tuple[Color, float]:
        c = Color.of(color)
        if c not in self.level.allowed_colors:
            raise ValueError(f"{c} is not an allowed color in this level")
        if ratio is None:
            return c, self.level.default_blend_ratio
        return c, clamp_ratio(ratio)

    def preview(self, color: ColorLike, ratio: float | None = None) -> Color:
        c, r = self._resolve(color, ratio)
        return blend(self.current, c, r, self.level.mode)

    def apply(self, color: ColorLike, ratio: float | None = None) -> Color:
        if self.finished:
            raise ValueError("session is finished; reset to play again")
        c, r = self._resolve(color, ratio)
        self.current = blend(self.current, c, r, self.level.mode)
        self.history.append(self.current)
        self.ratios.append(r)

        if self.completed:
            log.info("level %r completed in %d steps", self.level.name, self.steps)
        elif self.out_of_steps:
            log.info("level %r: maximum steps reached", self.level.name)
        return self.current


__all__ = ["MixSession"]
