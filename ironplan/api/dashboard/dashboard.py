"""Dashboard API routes.

Weekly volume summary for the dashboard's volume tracking cards.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from ironplan.api.dependencies.auth import get_current_user_id
from ironplan.dashboard.volume import VolumeStats, calculate_volume_stats, format_hours_minutes
from ironplan.db import session as db_session
from ironplan.onboarding.service import get_plan_breakdown, get_plan_week_number, get_profile_record, today_for_timezone
from ironplan.plans.enums import Phase
from ironplan.plans.phases import get_phase_for_week
from ironplan.workouts.repository import get_workouts

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


class WeeklyVolumeResponse(BaseModel):
    """Planned and completed volume for one training week."""

    week_number: int
    total_weeks: int
    phase: Phase
    planned: VolumeStats
    completed: VolumeStats
    planned_formatted: str
    completed_formatted: str


@router.get("/volume", response_model=WeeklyVolumeResponse)
def get_weekly_volume(
    week_number: int | None = Query(default=None, ge=1, description="Training week, defaults to the current week"),
    user_id: str = Depends(get_current_user_id),
) -> WeeklyVolumeResponse:
    """Get planned vs completed volume for a week (defaults to the current week)."""
    with db_session.get_session() as session:
        record = get_profile_record(session, user_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")

        breakdown = get_plan_breakdown(record)
        if week_number is None:
            week_number = get_plan_week_number(record, today_for_timezone(record.timezone))

        workouts = get_workouts(session, user_id, week_number=week_number)
        planned = calculate_volume_stats(workouts, completed_only=False)
        completed = calculate_volume_stats(workouts)

        return WeeklyVolumeResponse(
            week_number=week_number,
            total_weeks=breakdown.total_weeks,
            phase=get_phase_for_week(week_number, breakdown),
            planned=planned,
            completed=completed,
            planned_formatted=format_hours_minutes(planned.total_minutes),
            completed_formatted=format_hours_minutes(completed.total_minutes),
        )
