"""Goal configuration service."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from nomnom.domain.errors import (
    GoalNotConfiguredError,
    InvalidGoalError,
    InvalidToleranceError,
)
from nomnom.domain.goals import DEFAULT_DIRECTIONS, Goal, GoalUpdate, MacroKey

MAX_TOLERANCE = 100

_logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for macro goals."""

    def list_goals(self, user_id: UUID) -> list[Goal]:
        """Return all goals configured for a user."""

    def upsert_goal(self, user_id: UUID, goal: Goal) -> None:
        """Create or replace the goal for its macro key."""

    def delete_goals(self, user_id: UUID) -> None:
        """Remove every goal for a user."""


@dataclass
class GoalService:
    """Service for reading and changing macro goals."""

    repository: GoalRepository

    def get_goals(self, user_id: UUID) -> dict[MacroKey, Goal]:
        """Return configured goals keyed by macro, in macro order."""
        stored = {goal.key: goal for goal in self.repository.list_goals(user_id)}
        return {key: stored[key] for key in MacroKey if key in stored}

    def set_goals(self, user_id: UUID, updates: list[GoalUpdate]) -> list[MacroKey]:
        """Validate and apply goal updates, returning the keys written.

        Nothing is written unless every update is valid.
        """
        existing = self.get_goals(user_id)
        for update in updates:
            _validate(update, existing)

        now = datetime.now(tz=UTC)
        written: list[MacroKey] = []
        for update in updates:
            goal = _apply(update, existing.get(update.key), now)
            self.repository.upsert_goal(user_id, goal)
            existing[update.key] = goal
            written.append(update.key)
        _logger.info(
            "Goals updated: user_id=%s keys=%s",
            user_id,
            ",".join(key.value for key in written),
        )
        return written

    def reset_goals(self, user_id: UUID) -> None:
        """Delete all goals for a user."""
        self.repository.delete_goals(user_id)
        _logger.info("Goals reset: user_id=%s", user_id)


def _validate(update: GoalUpdate, existing: dict[MacroKey, Goal]) -> None:
    if update.target is not None and update.target <= 0:
        raise InvalidGoalError(update.key.value, update.target)
    if update.tolerance is not None and not 0 <= update.tolerance <= MAX_TOLERANCE:
        raise InvalidToleranceError(update.key.value, update.tolerance)
    if update.target is None and update.key not in existing:
        raise GoalNotConfiguredError(update.key.value)


def _apply(update: GoalUpdate, current: Goal | None, now: datetime) -> Goal:
    if current is None:
        return Goal(
            key=update.key,
            target=float(update.target or 0),
            direction=update.direction or DEFAULT_DIRECTIONS[update.key],
            tolerance=update.tolerance if update.tolerance is not None else 0,
            updated_at=now,
        )
    return replace(
        current,
        target=update.target if update.target is not None else current.target,
        direction=update.direction or current.direction,
        tolerance=(
            update.tolerance if update.tolerance is not None else current.tolerance
        ),
        updated_at=now,
    )
