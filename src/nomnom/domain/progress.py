"""Domain models for goal progress reports."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from nomnom.domain.goals import Direction, Goal, MacroKey
from nomnom.domain.stats import WeeklyAverage


class Zone(str, Enum):
    """Classification of an actual value against a goal."""

    MET = "met"
    NEAR = "near"
    OVER = "over"
    UNDER = "under"


QUALIFYING_ZONES = frozenset({Zone.MET, Zone.NEAR})


@dataclass(frozen=True)
class ZoneResult:
    """Zone plus the tolerance band edge it was judged against."""

    zone: Zone
    band: float


@dataclass(frozen=True)
class MacroProgress:
    """Progress toward one goal on the reference day."""

    actual: float
    goal: float
    remaining: float
    percent: int
    tolerance: float
    band: float
    zone: Zone


@dataclass(frozen=True)
class Streak:
    """Current and best run of qualifying days."""

    current: int
    best: int
    direction: Direction | None = None


@dataclass(frozen=True)
class ProgressReport:
    """Everything the progress command returns."""

    date: date
    goals: dict[MacroKey, Goal]
    today: dict[MacroKey, MacroProgress]
    meal_count: int
    streaks: dict[MacroKey, Streak]
    all_goals: Streak
    weekly_avg: WeeklyAverage

    def to_dict(self) -> dict[str, object]:
        """Serialize using the field names agent integrations expect."""
        today: dict[str, object] = {
            key.value: {
                "actual": entry.actual,
                "goal": entry.goal,
                "remaining": entry.remaining,
                "percent": entry.percent,
                "tolerance": entry.tolerance,
                "band": entry.band,
                "zone": entry.zone.value,
            }
            for key, entry in self.today.items()
        }
        today["mealCount"] = self.meal_count
        streaks: dict[str, object] = {
            key.value: {
                "current": streak.current,
                "best": streak.best,
                "direction": streak.direction.value if streak.direction else None,
            }
            for key, streak in self.streaks.items()
        }
        streaks["allGoals"] = {
            "current": self.all_goals.current,
            "best": self.all_goals.best,
        }
        return {
            "date": self.date.isoformat(),
            "goals": {
                key.value: {
                    "target": goal.target,
                    "direction": goal.direction.value,
                    "tolerance": goal.tolerance,
                }
                for key, goal in self.goals.items()
            },
            "today": today,
            "streaks": streaks,
            "weeklyAvg": {
                "calories": self.weekly_avg.calories,
                "protein": self.weekly_avg.protein,
                "carbs": self.weekly_avg.carbs,
                "fat": self.weekly_avg.fat,
                "daysTracked": self.weekly_avg.days_tracked,
            },
        }
