from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Literal, Mapping, get_args

from .blend import DEFAULT_RATIO, MixMode
from .colors import Color
from .search import MIN_STEPS_CEILING, NO_PATH, BlendPath, calculate_min_steps, find_path

log = logging.getLogger(__name__)

ChallengeType = Literal[
    "colorPath", "minimalSteps", "colorRestriction", "targetMatching", "colorMixing"
]
CHALLENGE_TYPES: tuple[str, ...] = get_args(ChallengeType)


@dataclass
class Level:
    """A puzzle level as far as color mixing is concerned."""

    name: str
    start_color: Color
    target_color: Color
    allowed_colors: List[Color]
    max_steps: int = 5
    challenge_type: ChallengeType = "colorPath"
    default_blend_ratio: float = DEFAULT_RATIO
    use_simple_mixing: bool = False
    color_tolerance: int = 0
    description: str | None = None

    def __post_init__(self) -> None:
        if self.challenge_type not in CHALLENGE_TYPES:
            raise ValueError(f"unknown challenge type '{self.challenge_type}'")
        self.start_color = Color.of(self.start_color)
        self.target_color = Color.of(self.target_color)
        self.allowed_colors = [Color.of(c) for c in self.allowed_colors]
        self.max_steps = max(0, int(self.max_steps))
        self.color_tolerance = max(0, min(255, int(self.color_tolerance)))
        r = float(self.default_blend_ratio)
        self.default_blend_ratio = 0.0 if r < 0.0 else 1.0 if r > 1.0 else r

    @property
    def mode(self) -> MixMode:
        return "symbolic" if self.use_simple_mixing else "interpolate"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Level:
        """Build from the editor's camelCase level record."""
        try:
            return cls(
                name=str(data.get("name", "Untitled")),
                start_color=Color.of(data["startColor"]),
                target_color=Color.of(data["targetColor"]),
                allowed_colors=[Color.of(c) for c in data.get("allowedColors", [])],
                max_steps=int(data.get("maxSteps", 5)),
                challenge_type=data.get("challengeType", "colorPath"),
                default_blend_ratio=float(data.get("defaultBlendRatio", DEFAULT_RATIO)),
                use_simple_mixing=bool(data.get("useSimpleMixing", False)),
                color_tolerance=int(data.get("colorTolerance", 0)),
                description=data.get("description"),
            )
        except KeyError as exc:
            raise ValueError(f"level is missing {exc.args[0]}") from exc


@dataclass
class LevelCheck:
    solvable: bool
    path: BlendPath | None = None
    min_steps: int = NO_PATH
    messages: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "solvable": self.solvable,
            "path": self.path.to_dict() if self.path else None,
            "calculatedMinSteps": self.min_steps,
            "messages": list(self.messages),
        }


def check_level(level: Level, max_expansions: int | None = None) -> LevelCheck:
    """Is the target reachable within the level's budget, and in how few steps?"""
    messages: List[str] = []
    if not level.allowed_colors:
        messages.append("no allowed colors selected")

    path = find_path(
        level.start_color,
        level.target_color,
        level.allowed_colors,
        level.max_steps,
        tolerance=level.color_tolerance,
        mode=level.mode,
        max_expansions=max_expansions,
    )
    # within the ceiling both searches expand the same nodes in the same order
    if path is not None and level.max_steps <= MIN_STEPS_CEILING:
        min_steps = path.steps
    else:
        min_steps = calculate_min_steps(
            level.start_color,
            level.target_color,
            level.allowed_colors,
            tolerance=level.color_tolerance,
            mode=level.mode,
            max_expansions=max_expansions,
        )

    if path is None:
        messages.append(
            f"target {level.target_color} is not reachable from "
            f"{level.start_color} within {level.max_steps} steps"
        )
        if min_steps != NO_PATH:
            messages.append(f"it needs at least {min_steps} steps")
    log.info("level %r: solvable=%s min_steps=%d", level.name, path is not None, min_steps)
    return LevelCheck(solvable=path is not None, path=path, min_steps=min_steps, messages=messages)


__all__ = ["CHALLENGE_TYPES", "ChallengeType", "Level", "LevelCheck", "check_level"]
