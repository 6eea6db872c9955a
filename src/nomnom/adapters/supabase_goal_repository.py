"""Supabase repository for macro goals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nomnom.domain.goals import Direction, Goal, MacroKey
from nomnom.services.goals import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goal persistence."""

    client: Client

    def list_goals(self, user_id: UUID) -> list[Goal]:
        """Return the goals stored for a user."""
        response = (
            self.client.table("goals")
            .select("key, target, direction, tolerance, updated_at")
            .eq("user_id", str(user_id))
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def upsert_goal(self, user_id: UUID, goal: Goal) -> None:
        """Insert or replace the goal row for the macro key."""
        self.client.table("goals").upsert(
            {
                "user_id": str(user_id),
                "key": goal.key.value,
                "target": goal.target,
                "direction": goal.direction.value,
                "tolerance": goal.tolerance,
                "updated_at": goal.updated_at.isoformat() if goal.updated_at else None,
            },
            on_conflict="user_id,key",
        ).execute()

    def delete_goals(self, user_id: UUID) -> None:
        """Delete every goal row for the user."""
        self.client.table("goals").delete().eq("user_id", str(user_id)).execute()


def _parse_row(row: dict[str, object]) -> Goal:
    updated_at_raw = row.get("updated_at")
    return Goal(
        key=MacroKey(str(row["key"])),
        target=float(row["target"]),  # type: ignore[arg-type]
        direction=Direction(str(row["direction"])),
        tolerance=float(row.get("tolerance") or 0),  # type: ignore[arg-type]
        updated_at=(
            datetime.fromisoformat(updated_at_raw)
            if isinstance(updated_at_raw, str) and updated_at_raw
            else None
        ),
    )
