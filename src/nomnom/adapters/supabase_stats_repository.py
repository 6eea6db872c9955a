"""Supabase repository for meal log statistics."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nomnom.domain.stats import MealLogRow
from nomnom.services.stats import StatsRepository

_COLUMNS = "id, logged_at, calories, protein, carbs, fat"

# PostgREST caps a single response at this many rows by default.
PAGE_SIZE = 1000


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for ledger reads."""

    client: Client
    page_size: int = PAGE_SIZE

    def list_meal_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealLogRow]:
        """Return meal logs in the time range."""
        return self._fetch_all(user_id, start, end)

    def list_all_meal_logs(self, user_id: UUID) -> list[MealLogRow]:
        """Return the full ledger for a user, reading it page by page."""
        return self._fetch_all(user_id)

    def _fetch_all(
        self,
        user_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[MealLogRow]:
        logs: list[MealLogRow] = []
        offset = 0
        while True:
            query = (
                self.client.table("meal_logs")
                .select(_COLUMNS)
                .eq("user_id", str(user_id))
            )
            if start is not None:
                query = query.gte("logged_at", start.isoformat())
            if end is not None:
                query = query.lt("logged_at", end.isoformat())
            response = (
                query.order("logged_at", desc=False)
                .order("id", desc=False)
                .range(offset, offset + self.page_size - 1)
                .execute()
            )
            page = response.data or []
            logs.extend(_parse_row(row) for row in page)
            if len(page) < self.page_size:
                return logs
            offset += self.page_size


def _parse_row(row: dict[str, object]) -> MealLogRow:
    logged_at_raw = row.get("logged_at")
    if not isinstance(logged_at_raw, str) or not logged_at_raw:
        raise RuntimeError(f"Meal log {row.get('id')} has no logged_at timestamp")
    logged_at = datetime.fromisoformat(logged_at_raw)
    if logged_at.tzinfo is None:
        logged_at = logged_at.replace(tzinfo=UTC)
    return MealLogRow(
        meal_id=UUID(str(row["id"])),
        logged_at=logged_at,
        calories=_optional_float(row.get("calories")),
        protein=_optional_float(row.get("protein")),
        carbs=_optional_float(row.get("carbs")),
        fat=_optional_float(row.get("fat")),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)  # type: ignore[arg-type]
