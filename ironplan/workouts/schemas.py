"""Pydantic schemas for workout API requests and responses."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from ironplan.plans.enums import Discipline, Phase, WorkoutStatus, WorkoutType


class WorkoutSchema(BaseModel):
    """Workout schema for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    discipline: Discipline
    workout_type: WorkoutType
    duration_minutes: int
    scheduled_date: date
    scheduled_time: str
    description: str
    status: WorkoutStatus
    completed_at: datetime | None = None
    week_number: int
    phase: Phase
    timezone: str | None = None


class WorkoutListResponse(BaseModel):
    """List of workouts for a user."""

    workouts: list[WorkoutSchema]


class WorkoutResponse(BaseModel):
    """Single workout wrapped for lifecycle endpoints."""

    workout: WorkoutSchema


class RescheduleRequest(BaseModel):
    """Request to move a workout to a new date and time."""

    scheduled_date: date = Field(description="New scheduled date")
    scheduled_time: str = Field(description="New time of day (HH:MM)", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
