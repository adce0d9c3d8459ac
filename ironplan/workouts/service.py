"""Workout lifecycle service.

State machine for a persisted workout:

    scheduled -> completed   (complete_workout)
    scheduled -> skipped     (skip_workout)
    scheduled -> scheduled   (reschedule_workout, new date/time)

Completed and skipped are terminal.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from loguru import logger
from sqlalchemy.orm import Session

from ironplan.plans.enums import WorkoutStatus
from ironplan.plans.validators import validate_time_of_day
from ironplan.workouts.errors import InvalidWorkoutTransitionError, WorkoutForbiddenError, WorkoutNotFoundError
from ironplan.workouts.models import Workout
from ironplan.workouts.repository import get_workout


def get_owned_workout(session: Session, workout_id: str, user_id: str) -> Workout:
    """Get a workout and check ownership.

    Raises:
        WorkoutNotFoundError: If the workout does not exist
        WorkoutForbiddenError: If the workout belongs to another user
    """
    workout = get_workout(session, workout_id)
    if workout is None:
        raise WorkoutNotFoundError(workout_id)
    if workout.user_id != user_id:
        raise WorkoutForbiddenError(workout_id, user_id)
    return workout


def _require_scheduled(workout: Workout, action: str) -> None:
    if workout.status != WorkoutStatus.SCHEDULED:
        raise InvalidWorkoutTransitionError(workout.id, workout.status, action)


def complete_workout(
    session: Session,
    workout_id: str,
    user_id: str,
    completed_at: datetime | None = None,
) -> Workout:
    """Mark a scheduled workout as completed."""
    workout = get_owned_workout(session, workout_id, user_id)
    _require_scheduled(workout, "complete")

    workout.status = WorkoutStatus.COMPLETED.value
    workout.completed_at = completed_at or datetime.now(timezone.utc)
    session.flush()
    logger.info(f"Workout completed: workout_id={workout_id} user_id={user_id}")
    return workout


def skip_workout(session: Session, workout_id: str, user_id: str) -> Workout:
    """Mark a scheduled workout as skipped."""
    workout = get_owned_workout(session, workout_id, user_id)
    _require_scheduled(workout, "skip")

    workout.status = WorkoutStatus.SKIPPED.value
    session.flush()
    logger.info(f"Workout skipped: workout_id={workout_id} user_id={user_id}")
    return workout


def reschedule_workout(
    session: Session,
    workout_id: str,
    user_id: str,
    scheduled_date: date,
    scheduled_time: str,
) -> Workout:
    """Move a scheduled workout to a new date and time.

    Raises:
        InvalidInputError: If scheduled_time is not HH:MM
        InvalidWorkoutTransitionError: If the workout is no longer scheduled
    """
    validate_time_of_day(scheduled_time, "scheduled_time")
    workout = get_owned_workout(session, workout_id, user_id)
    _require_scheduled(workout, "reschedule")

    logger.info(
        f"Rescheduling workout_id={workout_id}: "
        f"{workout.scheduled_date} {workout.scheduled_time} -> {scheduled_date} {scheduled_time}"
    )
    workout.scheduled_date = scheduled_date
    workout.scheduled_time = scheduled_time
    session.flush()
    return workout
