"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from nomnom.domain.goals import Direction, GoalUpdate, MacroKey


class GoalPayload(BaseModel):
    """Requested change to one macro goal."""

    key: MacroKey
    target: float | None = None
    direction: Direction | None = None
    tolerance: float | None = None

    def to_update(self) -> GoalUpdate:
        """Convert to the domain update model."""
        return GoalUpdate(
            key=self.key,
            target=self.target,
            direction=self.direction,
            tolerance=self.tolerance,
        )


class GoalsRequest(BaseModel):
    """Body of a goal update request."""

    goals: list[GoalPayload] = Field(min_length=1)


class TimezoneRequest(BaseModel):
    """Body of a timezone update request."""

    timezone: str
