"""Per-user progress and goal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from nomnom.api.auth import require_token
from nomnom.api.models import GoalsRequest, TimezoneRequest
from nomnom.domain.goals import Goal
from nomnom.domain.progress import ProgressReport
from nomnom.services.dates import resolve_reference_date, today_in

if TYPE_CHECKING:
    from nomnom.containers import AppContainer

router = APIRouter(
    prefix="/users", tags=["users"], dependencies=[Depends(require_token)]
)


@router.get("/{user_id}/progress")
async def get_progress(
    user_id: UUID, request: Request, date: str | None = None
) -> dict[str, object]:
    """Return goal progress, streaks and weekly averages for a day."""
    return _build_report(request.app.state.container, user_id, date).to_dict()


@router.get("/{user_id}/progress/text", response_class=PlainTextResponse)
async def get_progress_text(
    user_id: UUID, request: Request, date: str | None = None
) -> PlainTextResponse:
    """Return the progress report as readable text."""
    report = _build_report(request.app.state.container, user_id, date)
    return PlainTextResponse(_format_progress_report(report))


@router.get("/{user_id}/goals")
async def get_goals(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the configured goals, or null when none are set."""
    container: AppContainer = request.app.state.container
    goals = container.goal_service.get_goals(user_id)
    if not goals:
        return {"goals": None}
    return {"goals": {key.value: _serialize_goal(goal) for key, goal in goals.items()}}


@router.put("/{user_id}/goals")
async def set_goals(
    user_id: UUID, payload: GoalsRequest, request: Request
) -> dict[str, object]:
    """Create or update goals."""
    container: AppContainer = request.app.state.container
    written = container.goal_service.set_goals(
        user_id, [entry.to_update() for entry in payload.goals]
    )
    return {"success": True, "goalsSet": [key.value for key in written]}


@router.delete("/{user_id}/goals")
async def reset_goals(user_id: UUID, request: Request) -> dict[str, object]:
    """Remove all goals."""
    container: AppContainer = request.app.state.container
    container.goal_service.reset_goals(user_id)
    return {"success": True}


@router.put("/{user_id}/timezone")
async def set_timezone(
    user_id: UUID, payload: TimezoneRequest, request: Request
) -> dict[str, object]:
    """Set the timezone used to group meals into days."""
    container: AppContainer = request.app.state.container
    container.user_settings_service.set_timezone(user_id, payload.timezone)
    return {"success": True, "timezone": payload.timezone}


def _build_report(
    container: AppContainer, user_id: UUID, raw_date: str | None
) -> ProgressReport:
    timezone = container.user_settings_service.get_timezone(user_id)
    reference_date = resolve_reference_date(raw_date, today_in(timezone))
    return container.progress_service.get_report(user_id, reference_date, timezone)


def _serialize_goal(goal: Goal) -> dict[str, object]:
    return {
        "target": goal.target,
        "direction": goal.direction.value,
        "tolerance": goal.tolerance,
        "updatedAt": goal.updated_at.isoformat() if goal.updated_at else None,
    }


def _format_progress_report(report: ProgressReport) -> str:
    """Format a progress report as plain text."""
    lines = [f"Progress for {report.date} ({report.meal_count} meals)"]
    for key, entry in report.today.items():
        lines.append(
            f"  {key.value}: {entry.actual:g} / {entry.goal:g} "
            f"({entry.percent}%, {entry.remaining:g} left) [{entry.zone.value}]"
        )
    lines.append("Streaks:")
    for key, streak in report.streaks.items():
        lines.append(
            f"  {key.value}: {streak.current} days (best {streak.best}, "
            f"{streak.direction.value if streak.direction else '-'})"
        )
    lines.append(
        f"  all goals: {report.all_goals.current} days "
        f"(best {report.all_goals.best})"
    )
    avg = report.weekly_avg
    lines.append(
        f"7-day avg: {avg.calories:g} cal | {avg.protein:g}p {avg.carbs:g}c "
        f"{avg.fat:g}f ({avg.days_tracked} days tracked)"
    )
    return "\n".join(lines)
