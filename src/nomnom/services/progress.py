"""Goal progress report assembly."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nomnom.domain.errors import NoGoalsConfiguredError
from nomnom.domain.goals import Goal, MacroKey
from nomnom.domain.progress import MacroProgress, ProgressReport, Streak
from nomnom.domain.stats import DailyTotals
from nomnom.services.goals import GoalService
from nomnom.services.stats import StatsService, weekly_average
from nomnom.services.streaks import (
    best_all_goals_streak,
    best_streak,
    current_all_goals_streak,
    current_streak,
)
from nomnom.services.zones import classify, round1

# Reported when a zero target has a non-zero actual.
PERCENT_OVERFLOW = 999

_logger = logging.getLogger(__name__)


@dataclass
class ProgressService:
    """Service that loads goals and history and builds progress reports."""

    stats_service: StatsService
    goal_service: GoalService

    def get_report(
        self, user_id: UUID, reference_date: date, timezone_name: str
    ) -> ProgressReport:
        """Return the progress report for a user on a local calendar day."""
        goals = self.goal_service.get_goals(user_id)
        if not goals:
            raise NoGoalsConfiguredError
        history = self.stats_service.daily_history(user_id, timezone_name)
        _logger.debug(
            "Building progress: user_id=%s date=%s goals=%s days=%s",
            user_id,
            reference_date,
            len(goals),
            len(history),
        )
        return build_report(goals, history, reference_date)


def build_report(
    goals: Mapping[MacroKey, Goal],
    history: Mapping[date, DailyTotals],
    reference_date: date,
) -> ProgressReport:
    """Assemble a progress report from goals and daily totals."""
    if not goals:
        raise NoGoalsConfiguredError

    day_totals = history.get(reference_date)
    today: dict[MacroKey, MacroProgress] = {}
    streaks: dict[MacroKey, Streak] = {}
    for key, goal in goals.items():
        actual = day_totals.value_for(key.value) if day_totals else 0.0
        result = classify(actual, goal.target, goal.direction, goal.tolerance)
        today[key] = MacroProgress(
            actual=actual,
            goal=goal.target,
            remaining=round1(goal.target - actual),
            percent=_percent(actual, goal.target),
            tolerance=goal.tolerance,
            band=result.band,
            zone=result.zone,
        )
        current = current_streak(goal, history, reference_date)
        streaks[key] = Streak(
            current=current,
            best=max(best_streak(goal, history), current),
            direction=goal.direction,
        )

    all_current = current_all_goals_streak(goals.values(), history, reference_date)
    all_best = best_all_goals_streak(goals.values(), history)
    return ProgressReport(
        date=reference_date,
        goals=dict(goals),
        today=today,
        meal_count=day_totals.meal_count if day_totals else 0,
        streaks=streaks,
        all_goals=Streak(current=all_current, best=max(all_best, all_current)),
        weekly_avg=weekly_average(dict(history), reference_date),
    )


def _percent(actual: float, target: float) -> int:
    if target == 0:
        return 100 if actual == 0 else PERCENT_OVERFLOW
    return math.floor(actual / target * 100 + 0.5)
