"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class MealLogRow:
    """Nutrient values of a logged meal; unset nutrients are None."""

    meal_id: UUID
    logged_at: datetime
    calories: float | None
    protein: float | None
    carbs: float | None
    fat: float | None


@dataclass(frozen=True)
class DailyTotals:
    """Summed macros for a calendar day with at least one logged meal."""

    day: date
    calories: float
    protein: float
    carbs: float
    fat: float
    meal_count: int

    def value_for(self, key: str) -> float:
        """Return the total for a macro key."""
        return float(getattr(self, key))


@dataclass(frozen=True)
class WeeklyAverage:
    """Trailing 7-day averages over days that have data."""

    calories: float
    protein: float
    carbs: float
    fat: float
    days_tracked: int
