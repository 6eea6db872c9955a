"""Tests for progress report assembly."""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from nomnom.domain.errors import NoGoalsConfiguredError
from nomnom.domain.goals import Direction, GoalUpdate, MacroKey
from nomnom.domain.progress import Zone
from nomnom.domain.stats import DailyTotals
from nomnom.services.goals import GoalService
from nomnom.services.progress import PERCENT_OVERFLOW, ProgressService, build_report
from nomnom.services.stats import StatsService
from tests.conftest import (
    InMemoryGoalRepository,
    InMemoryStatsRepository,
    make_goal,
    make_totals,
)

DAY = date(2026, 5, 20)


def _service(
    stats_repository: InMemoryStatsRepository, goal_repository: InMemoryGoalRepository
) -> ProgressService:
    return ProgressService(
        stats_service=StatsService(stats_repository),
        goal_service=GoalService(goal_repository),
    )


def test_report_without_goals_fails() -> None:
    service = _service(InMemoryStatsRepository(), InMemoryGoalRepository())

    with pytest.raises(NoGoalsConfiguredError):
        service.get_report(uuid4(), DAY, "UTC")
    with pytest.raises(NoGoalsConfiguredError):
        build_report({}, {}, DAY)


def test_report_today_entries() -> None:
    user_id = uuid4()
    stats_repository = InMemoryStatsRepository()
    stats_repository.add(DAY, calories=1300, protein=60, carbs=150, fat=40)
    stats_repository.add(DAY, calories=800, protein=30, carbs=110, fat=35)
    goal_service = GoalService(InMemoryGoalRepository())
    goal_service.set_goals(
        user_id,
        [
            GoalUpdate(MacroKey.CALORIES, target=2000, tolerance=10),
            GoalUpdate(MacroKey.PROTEIN, target=120, tolerance=15),
            GoalUpdate(MacroKey.FAT, target=70),
        ],
    )
    service = ProgressService(StatsService(stats_repository), goal_service)

    report = service.get_report(user_id, DAY, "UTC")

    calories = report.today[MacroKey.CALORIES]
    assert calories.actual == 2100
    assert calories.remaining == -100
    assert calories.percent == 105
    assert calories.band == 2200
    assert calories.zone == Zone.NEAR
    protein = report.today[MacroKey.PROTEIN]
    assert protein.actual == 90
    assert protein.band == 102
    assert protein.zone == Zone.UNDER
    assert protein.percent == 75
    fat = report.today[MacroKey.FAT]
    assert fat.zone == Zone.OVER
    assert fat.band == 70
    assert MacroKey.CARBS not in report.today
    assert report.meal_count == 2


def test_report_on_day_without_meals_uses_zero_actual() -> None:
    goals = {MacroKey.CALORIES: make_goal(MacroKey.CALORIES, 2000)}
    history = {DAY - timedelta(days=1): make_totals(DAY - timedelta(days=1), 1500)}

    report = build_report(goals, history, DAY)

    entry = report.today[MacroKey.CALORIES]
    assert entry.actual == 0
    assert entry.zone == Zone.MET
    assert entry.remaining == 2000
    assert report.meal_count == 0
    assert report.streaks[MacroKey.CALORIES].current == 0
    assert report.streaks[MacroKey.CALORIES].best == 1
    assert report.weekly_avg.days_tracked == 1


def test_report_streaks_and_weekly_average() -> None:
    goals = {
        MacroKey.CALORIES: make_goal(MacroKey.CALORIES, 2000),
        MacroKey.PROTEIN: make_goal(MacroKey.PROTEIN, 100, Direction.OVER),
    }
    history = {}
    rows = [(1800, 80), (1900, 120), (1950, 110), (1700, 130)]
    for offset, (kcal, prot) in enumerate(rows):
        day = DAY - timedelta(days=len(rows) - 1 - offset)
        history[day] = make_totals(day, calories=kcal, protein=prot)

    report = build_report(goals, history, DAY)

    assert report.streaks[MacroKey.CALORIES].current == 4
    assert report.streaks[MacroKey.CALORIES].direction == Direction.UNDER
    assert report.streaks[MacroKey.PROTEIN].current == 3
    assert report.streaks[MacroKey.PROTEIN].direction == Direction.OVER
    assert report.all_goals.current == 3
    assert report.all_goals.best == 3
    assert report.weekly_avg.days_tracked == 4
    assert report.weekly_avg.calories == 1837.5
    assert report.weekly_avg.protein == 110


def test_percent_guards_zero_target() -> None:
    goals = {
        MacroKey.FAT: make_goal(MacroKey.FAT, 0),
        MacroKey.CARBS: make_goal(MacroKey.CARBS, 0),
    }
    history = {
        DAY: DailyTotals(
            day=DAY, calories=100, protein=0, carbs=0, fat=12, meal_count=1
        )
    }

    report = build_report(goals, history, DAY)

    assert report.today[MacroKey.FAT].percent == PERCENT_OVERFLOW
    assert report.today[MacroKey.CARBS].percent == 100


def test_report_is_idempotent() -> None:
    user_id = uuid4()
    stats_repository = InMemoryStatsRepository()
    for offset in range(10):
        stats_repository.add(DAY - timedelta(days=offset), calories=1500 + offset * 50)
    goal_repository = InMemoryGoalRepository()
    GoalService(goal_repository).set_goals(
        user_id, [GoalUpdate(MacroKey.CALORIES, target=1800, tolerance=5)]
    )
    service = _service(stats_repository, goal_repository)

    first = service.get_report(user_id, DAY, "UTC")
    second = service.get_report(user_id, DAY, "UTC")

    assert first == second
    assert first.to_dict() == second.to_dict()
    assert stats_repository.all_calls == 2


def test_report_serializes_contract_field_names() -> None:
    goals = {MacroKey.CALORIES: make_goal(MacroKey.CALORIES, 2000, tolerance=10)}
    history = {DAY: make_totals(DAY, calories=2100)}

    payload = build_report(goals, history, DAY).to_dict()

    assert payload["date"] == "2026-05-20"
    assert payload["goals"] == {
        "calories": {"target": 2000, "direction": "under", "tolerance": 10}
    }
    assert payload["today"] == {
        "calories": {
            "actual": 2100,
            "goal": 2000,
            "remaining": -100,
            "percent": 105,
            "tolerance": 10,
            "band": 2200,
            "zone": "near",
        },
        "mealCount": 1,
    }
    assert payload["streaks"] == {
        "calories": {"current": 1, "best": 1, "direction": "under"},
        "allGoals": {"current": 1, "best": 1},
    }
    assert payload["weeklyAvg"] == {
        "calories": 2100,
        "protein": 0,
        "carbs": 0,
        "fat": 0,
        "daysTracked": 1,
    }
