"""Current and best streaks over a daily totals history."""

from collections.abc import Callable, Iterable, Mapping
from datetime import date, timedelta

from nomnom.domain.goals import Goal
from nomnom.domain.progress import QUALIFYING_ZONES
from nomnom.domain.stats import DailyTotals
from nomnom.services.zones import classify

History = Mapping[date, DailyTotals]

_ONE_DAY = timedelta(days=1)


def qualifies(goal: Goal, totals: DailyTotals | None) -> bool:
    """Return True when the day has data and lands in met or near."""
    if totals is None:
        return False
    result = classify(
        totals.value_for(goal.key.value), goal.target, goal.direction, goal.tolerance
    )
    return result.zone in QUALIFYING_ZONES


def qualifies_all(goals: Iterable[Goal], totals: DailyTotals | None) -> bool:
    """Return True when every goal qualifies on the day."""
    goal_list = list(goals)
    if not goal_list:
        return False
    return all(qualifies(goal, totals) for goal in goal_list)


def current_streak(goal: Goal, history: History, reference_date: date) -> int:
    """Count consecutive qualifying days ending at the reference date."""
    return _walk_back(history, reference_date, lambda totals: qualifies(goal, totals))


def best_streak(goal: Goal, history: History) -> int:
    """Return the longest qualifying run anywhere in the history."""
    return _longest_run(history, lambda totals: qualifies(goal, totals))


def current_all_goals_streak(
    goals: Iterable[Goal], history: History, reference_date: date
) -> int:
    """Count consecutive days ending at the reference date where all goals qualify."""
    goal_list = list(goals)
    return _walk_back(
        history, reference_date, lambda totals: qualifies_all(goal_list, totals)
    )


def best_all_goals_streak(goals: Iterable[Goal], history: History) -> int:
    """Return the longest run where all goals qualify."""
    goal_list = list(goals)
    return _longest_run(history, lambda totals: qualifies_all(goal_list, totals))


def _walk_back(
    history: History, start: date, predicate: Callable[[DailyTotals], bool]
) -> int:
    # A day missing from the history stops the walk, so it never runs past
    # the earliest logged day.
    count = 0
    day = start
    while True:
        totals = history.get(day)
        if totals is None or not predicate(totals):
            return count
        count += 1
        day -= _ONE_DAY


def _longest_run(history: History, predicate: Callable[[DailyTotals], bool]) -> int:
    best = 0
    run = 0
    previous: date | None = None
    for day in sorted(history):
        if previous is not None and day - previous > _ONE_DAY:
            run = 0
        run = run + 1 if predicate(history[day]) else 0
        best = max(best, run)
        previous = day
    return best
