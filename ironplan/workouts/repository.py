"""Workout persistence.

Session-scoped helpers for reading and writing workout rows. Callers own
the transaction (see ironplan.db.session.get_session).
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ironplan.plans.types import PlannedWorkout
from ironplan.workouts.models import Workout


def _to_row(workout: PlannedWorkout) -> Workout:
    return Workout(
        user_id=workout.user_id,
        discipline=workout.discipline.value,
        workout_type=workout.workout_type.value,
        duration_minutes=workout.duration_minutes,
        scheduled_date=workout.scheduled_date,
        scheduled_time=workout.scheduled_time,
        description=workout.description,
        status=workout.status.value,
        week_number=workout.week_number,
        phase=workout.phase.value,
        timezone=workout.timezone,
    )


def create_workouts(
    session: Session,
    workouts: Sequence[PlannedWorkout],
    batch_size: int = 100,
) -> list[Workout]:
    """Persist generated workouts in batches.

    Each chunk of batch_size rows is added and flushed separately to stay
    under backend insert limits.

    Args:
        session: Database session
        workouts: Generated workouts
        batch_size: Rows per flush

    Returns:
        Persisted Workout rows, in input order
    """
    if not workouts:
        return []
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    created: list[Workout] = []
    for start in range(0, len(workouts), batch_size):
        chunk = [_to_row(w) for w in workouts[start : start + batch_size]]
        session.add_all(chunk)
        session.flush()
        created.extend(chunk)
        logger.debug(f"Inserted workout batch {start // batch_size + 1} ({len(chunk)} rows)")

    logger.info(f"Persisted {len(created)} workouts")
    return created


def get_workouts(
    session: Session,
    user_id: str,
    week_number: int | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[Workout]:
    """Get a user's workouts ordered by scheduled date and time.

    Args:
        session: Database session
        user_id: Owning user
        week_number: Optional training week filter
        start_date: Optional inclusive lower bound on scheduled_date
        end_date: Optional inclusive upper bound on scheduled_date
    """
    stmt = select(Workout).where(Workout.user_id == user_id)
    if week_number is not None:
        stmt = stmt.where(Workout.week_number == week_number)
    if start_date is not None:
        stmt = stmt.where(Workout.scheduled_date >= start_date)
    if end_date is not None:
        stmt = stmt.where(Workout.scheduled_date <= end_date)
    stmt = stmt.order_by(Workout.scheduled_date, Workout.scheduled_time)
    return list(session.execute(stmt).scalars().all())


def get_workout(session: Session, workout_id: str) -> Workout | None:
    return session.get(Workout, workout_id)


def get_max_week_number(session: Session, user_id: str) -> int | None:
    """Highest generated week number for a user, or None if none exist."""
    return session.execute(select(func.max(Workout.week_number)).where(Workout.user_id == user_id)).scalar()


def delete_workouts_for_user(session: Session, user_id: str) -> int:
    """Delete all of a user's workouts (used when onboarding is redone)."""
    workouts = get_workouts(session, user_id)
    for workout in workouts:
        session.delete(workout)
    session.flush()
    return len(workouts)
