"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time
from uuid import UUID, uuid4

import pytest

from nomnom.config import Settings
from nomnom.containers import AppContainer
from nomnom.domain.goals import Direction, Goal, MacroKey
from nomnom.domain.stats import DailyTotals, MealLogRow
from nomnom.services.goals import GoalRepository, GoalService
from nomnom.services.progress import ProgressService
from nomnom.services.stats import StatsRepository, StatsService
from nomnom.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)

API_TOKEN = "api-token"


@dataclass
class InMemoryStatsRepository(StatsRepository):
    """In-memory meal ledger for tests."""

    logs: list[MealLogRow] = field(default_factory=list)
    all_calls: int = 0

    def list_meal_logs(self, user_id: UUID, start, end) -> list[MealLogRow]:
        return [log for log in self.logs if start <= log.logged_at < end]

    def list_all_meal_logs(self, user_id: UUID) -> list[MealLogRow]:
        self.all_calls += 1
        return sorted(self.logs, key=lambda log: log.logged_at)

    def add(  # noqa: PLR0913
        self,
        day: date,
        calories: float | None = None,
        protein: float | None = None,
        carbs: float | None = None,
        fat: float | None = None,
        at: time = time(12, 0),
    ) -> None:
        self.logs.append(
            MealLogRow(
                meal_id=uuid4(),
                logged_at=datetime.combine(day, at, tzinfo=UTC),
                calories=calories,
                protein=protein,
                carbs=carbs,
                fat=fat,
            )
        )


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal store for tests."""

    goals: dict[UUID, dict[MacroKey, Goal]] = field(default_factory=dict)
    upserts: int = 0

    def list_goals(self, user_id: UUID) -> list[Goal]:
        return list(self.goals.get(user_id, {}).values())

    def upsert_goal(self, user_id: UUID, goal: Goal) -> None:
        self.upserts += 1
        self.goals.setdefault(user_id, {})[goal.key] = goal

    def delete_goals(self, user_id: UUID) -> None:
        self.goals.pop(user_id, None)


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    timezones: dict[UUID, str] = field(default_factory=dict)

    def get_timezone(self, user_id: UUID) -> str | None:
        return self.timezones.get(user_id)

    def set_timezone(self, user_id: UUID, timezone: str) -> None:
        self.timezones[user_id] = timezone


def make_goal(
    key: MacroKey,
    target: float,
    direction: Direction = Direction.UNDER,
    tolerance: float = 0,
) -> Goal:
    return Goal(key=key, target=target, direction=direction, tolerance=tolerance)


def make_totals(day: date, calories: float = 0, protein: float = 0) -> DailyTotals:
    return DailyTotals(
        day=day, calories=calories, protein=protein, carbs=0, fat=0, meal_count=1
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token=API_TOKEN,
    )


@pytest.fixture
def stats_repository() -> InMemoryStatsRepository:
    return InMemoryStatsRepository()


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def container(
    settings: Settings,
    stats_repository: InMemoryStatsRepository,
    goal_repository: InMemoryGoalRepository,
) -> AppContainer:
    stats_service = StatsService(stats_repository)
    goal_service = GoalService(goal_repository)
    return AppContainer(
        settings=settings,
        stats_service=stats_service,
        goal_service=goal_service,
        user_settings_service=UserSettingsService(InMemoryUserSettingsRepository()),
        progress_service=ProgressService(
            stats_service=stats_service,
            goal_service=goal_service,
        ),
    )
