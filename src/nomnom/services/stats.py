"""Daily aggregation of the meal ledger."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from nomnom.domain.stats import DailyTotals, MealLogRow, WeeklyAverage
from nomnom.services.zones import round1

WEEK_DAYS = 7


class StatsRepository(Protocol):
    """Read interface over the meal ledger."""

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogRow]:
        """Return meal logs within a time range."""

    def list_all_meal_logs(self, user_id: UUID) -> list[MealLogRow]:
        """Return every meal log for a user, oldest first."""


@dataclass
class StatsService:
    """Service that groups meal logs into per-day totals by timezone."""

    repository: StatsRepository

    def daily_total(
        self, user_id: UUID, day: date, timezone_name: str
    ) -> DailyTotals | None:
        """Return the totals for a local calendar day, or None without meals."""
        tz = ZoneInfo(timezone_name)
        start = datetime.combine(day, time.min, tzinfo=tz)
        end = start + timedelta(days=1)
        logs = self.repository.list_meal_logs(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )
        return _group_by_day(logs, tz).get(day)

    def all_daily_totals(self, user_id: UUID, timezone_name: str) -> list[DailyTotals]:
        """Return totals for every day with meals, ascending by date."""
        tz = ZoneInfo(timezone_name)
        logs = self.repository.list_all_meal_logs(user_id)
        grouped = _group_by_day(logs, tz)
        return [grouped[day] for day in sorted(grouped)]

    def daily_history(self, user_id: UUID, timezone_name: str) -> dict[date, DailyTotals]:
        """Return all daily totals keyed by date."""
        return {
            totals.day: totals
            for totals in self.all_daily_totals(user_id, timezone_name)
        }


def weekly_average(
    history: dict[date, DailyTotals], reference_date: date
) -> WeeklyAverage:
    """Average the trailing 7 days over the days that have data."""
    calories = protein = carbs = fat = 0.0
    days_tracked = 0
    for offset in range(WEEK_DAYS):
        totals = history.get(reference_date - timedelta(days=offset))
        if totals is None:
            continue
        days_tracked += 1
        calories += totals.calories
        protein += totals.protein
        carbs += totals.carbs
        fat += totals.fat

    if days_tracked == 0:
        return WeeklyAverage(calories=0, protein=0, carbs=0, fat=0, days_tracked=0)
    return WeeklyAverage(
        calories=round1(calories / days_tracked),
        protein=round1(protein / days_tracked),
        carbs=round1(carbs / days_tracked),
        fat=round1(fat / days_tracked),
        days_tracked=days_tracked,
    )


def _group_by_day(logs: list[MealLogRow], tz: ZoneInfo) -> dict[date, DailyTotals]:
    sums: dict[date, list[float]] = {}
    counts: dict[date, int] = {}
    for log in logs:
        log_day = log.logged_at.astimezone(tz).date()
        current = sums.setdefault(log_day, [0.0, 0.0, 0.0, 0.0])
        current[0] += log.calories or 0
        current[1] += log.protein or 0
        current[2] += log.carbs or 0
        current[3] += log.fat or 0
        counts[log_day] = counts.get(log_day, 0) + 1

    return {
        day: DailyTotals(
            day=day,
            calories=round1(values[0]),
            protein=round1(values[1]),
            carbs=round1(values[2]),
            fat=round1(values[3]),
            meal_count=counts[day],
        )
        for day, values in sums.items()
    }
