"""Workout API routes.

HTTP boundary for listing workouts and the lifecycle endpoints
(complete, skip, reschedule). Business rules live in
ironplan.workouts.service.
"""

from __future__ import annotations

from datetime import date
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from ironplan.api.dependencies.auth import get_current_user_id
from ironplan.db import session as db_session
from ironplan.plans.errors import InvalidInputError
from ironplan.workouts.errors import InvalidWorkoutTransitionError, WorkoutError, WorkoutForbiddenError, WorkoutNotFoundError
from ironplan.workouts.repository import get_workouts
from ironplan.workouts.schemas import RescheduleRequest, WorkoutListResponse, WorkoutResponse, WorkoutSchema
from ironplan.workouts.service import complete_workout, get_owned_workout, reschedule_workout, skip_workout

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


def _raise_http(error: WorkoutError | InvalidInputError) -> NoReturn:
    """Translate a domain error into the matching HTTP error."""
    if isinstance(error, WorkoutNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found") from error
    if isinstance(error, WorkoutForbiddenError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden") from error
    if isinstance(error, InvalidWorkoutTransitionError):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error)) from error
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)) from error


@router.get("", response_model=WorkoutListResponse)
def list_workouts(
    week_number: int | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    user_id: str = Depends(get_current_user_id),
) -> WorkoutListResponse:
    """List the caller's workouts, optionally filtered by week or date range."""
    with db_session.get_session() as session:
        workouts = get_workouts(session, user_id, week_number=week_number, start_date=start_date, end_date=end_date)
        return WorkoutListResponse(workouts=[WorkoutSchema.model_validate(w) for w in workouts])


@router.get("/{workout_id}", response_model=WorkoutResponse)
def get_workout_detail(
    workout_id: str,
    user_id: str = Depends(get_current_user_id),
) -> WorkoutResponse:
    try:
        with db_session.get_session() as session:
            workout = get_owned_workout(session, workout_id, user_id)
            return WorkoutResponse(workout=WorkoutSchema.model_validate(workout))
    except WorkoutError as e:
        _raise_http(e)


@router.post("/{workout_id}/complete", response_model=WorkoutResponse)
def complete(
    workout_id: str,
    user_id: str = Depends(get_current_user_id),
) -> WorkoutResponse:
    """Mark a workout as completed.

    Status codes:
        - 200: Workout completed
        - 403: Workout belongs to another user
        - 404: Workout not found
        - 409: Workout is not scheduled
    """
    try:
        with db_session.get_session() as session:
            workout = complete_workout(session, workout_id, user_id)
            return WorkoutResponse(workout=WorkoutSchema.model_validate(workout))
    except WorkoutError as e:
        logger.info(f"Complete rejected for workout_id={workout_id}: {e}")
        _raise_http(e)


@router.post("/{workout_id}/skip", response_model=WorkoutResponse)
def skip(
    workout_id: str,
    user_id: str = Depends(get_current_user_id),
) -> WorkoutResponse:
    """Mark a workout as skipped (same status codes as complete)."""
    try:
        with db_session.get_session() as session:
            workout = skip_workout(session, workout_id, user_id)
            return WorkoutResponse(workout=WorkoutSchema.model_validate(workout))
    except WorkoutError as e:
        logger.info(f"Skip rejected for workout_id={workout_id}: {e}")
        _raise_http(e)


@router.patch("/{workout_id}/reschedule", response_model=WorkoutResponse)
def reschedule(
    workout_id: str,
    request: RescheduleRequest,
    user_id: str = Depends(get_current_user_id),
) -> WorkoutResponse:
    """Move a scheduled workout to a new date and time."""
    try:
        with db_session.get_session() as session:
            workout = reschedule_workout(
                session,
                workout_id,
                user_id,
                scheduled_date=request.scheduled_date,
                scheduled_time=request.scheduled_time,
            )
            return WorkoutResponse(workout=WorkoutSchema.model_validate(workout))
    except (WorkoutError, InvalidInputError) as e:
        logger.info(f"Reschedule rejected for workout_id={workout_id}: {e}")
        _raise_http(e)
