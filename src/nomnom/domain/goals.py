"""Domain models for macro goals."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MacroKey(str, Enum):
    """Macros that can carry a goal."""

    CALORIES = "calories"
    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"


class Direction(str, Enum):
    """Which side of the target counts as success."""

    UNDER = "under"
    OVER = "over"


DEFAULT_DIRECTIONS: dict[MacroKey, Direction] = {
    MacroKey.CALORIES: Direction.UNDER,
    MacroKey.PROTEIN: Direction.OVER,
    MacroKey.CARBS: Direction.UNDER,
    MacroKey.FAT: Direction.UNDER,
}


@dataclass(frozen=True)
class Goal:
    """Configured goal for a single macro."""

    key: MacroKey
    target: float
    direction: Direction
    tolerance: float = 0
    updated_at: datetime | None = None


@dataclass(frozen=True)
class GoalUpdate:
    """Requested change to a goal; unset fields keep their stored value."""

    key: MacroKey
    target: float | None = None
    direction: Direction | None = None
    tolerance: float | None = None
