"""Onboarding and recurring plan generation.

Onboarding stores the training profile, fixes the plan start date and
eagerly generates the first weeks. The weekly cadence job then extends the
plan one week at a time against the same start date, so the phase
breakdown never shifts once a plan is running.
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from ironplan.config.settings import settings
from ironplan.db import session as db_session
from ironplan.db.models import TrainingProfileRecord
from ironplan.onboarding.schemas import OnboardingRequest, OnboardingResponse, TrainingProfileSchema, WeekGenerationResult
from ironplan.plans.enums import FitnessLevel
from ironplan.plans.phases import calculate_phases, get_current_week_number, get_training_start_date, get_week_start_date
from ironplan.plans.types import PhaseBreakdown, TrainingProfile
from ironplan.plans.workouts import generate_plan_weeks, generate_week_workouts
from ironplan.workouts.repository import create_workouts, delete_workouts_for_user, get_max_week_number


def today_for_timezone(tz_name: str, now: datetime | None = None) -> date:
    """Get the current calendar date in an IANA timezone."""
    now = now or datetime.now(ZoneInfo("UTC"))
    return now.astimezone(ZoneInfo(tz_name)).date()


def to_training_profile(record: TrainingProfileRecord) -> TrainingProfile:
    return TrainingProfile(
        race_date=record.race_date,
        fitness_level=FitnessLevel(record.fitness_level),
        target_hours_per_week=record.target_hours_per_week,
        weekday_time=record.weekday_time,
        weekend_time=record.weekend_time,
        timezone=record.timezone,
    )


def get_profile_record(session: Session, user_id: str) -> TrainingProfileRecord | None:
    return session.get(TrainingProfileRecord, user_id)


def get_plan_breakdown(record: TrainingProfileRecord) -> PhaseBreakdown:
    """Phase breakdown of a running plan, anchored at its stored start date."""
    return calculate_phases(record.race_date, record.training_start_date)


def get_plan_week_number(record: TrainingProfileRecord, as_of: date) -> int:
    """Current week of a running plan.

    Counted from the Monday of week 1, the same calendar weeks the workouts
    are placed on. The stored start date falls on the race weekday, so
    counting from it directly would lag by up to six days.
    """
    plan_monday = get_week_start_date(1, record.training_start_date)
    return get_current_week_number(record.race_date, as_of, start_date=plan_monday)


def _upsert_profile(
    session: Session,
    user_id: str,
    request: OnboardingRequest,
    training_start_date: date,
) -> TrainingProfileRecord:
    record = get_profile_record(session, user_id)
    if record is None:
        record = TrainingProfileRecord(user_id=user_id)
        session.add(record)
    else:
        logger.info(f"Replacing existing training profile for user_id={user_id}")

    record.race_date = request.race_date
    record.fitness_level = request.fitness_level.value
    record.target_hours_per_week = request.target_hours
    record.weekday_time = request.weekday_time
    record.weekend_time = request.weekend_time
    record.timezone = request.timezone
    record.training_start_date = training_start_date
    session.flush()
    return record


def complete_onboarding(
    session: Session,
    user_id: str,
    request: OnboardingRequest,
    as_of: date | None = None,
) -> OnboardingResponse:
    """Store the profile and generate the first weeks of the plan.

    Re-running onboarding replaces the profile and any previously generated
    workouts.

    Args:
        session: Database session (caller commits)
        user_id: Onboarding user
        request: Validated onboarding payload
        as_of: Reference date; defaults to today in the request timezone

    Returns:
        OnboardingResponse with the stored profile and workout count

    Raises:
        InsufficientLeadTimeError: If the race is less than 12 weeks away
    """
    as_of = as_of or today_for_timezone(request.timezone)
    logger.info(f"Starting onboarding for user_id={user_id} race_date={request.race_date} as_of={as_of}")

    breakdown = calculate_phases(request.race_date, as_of)
    training_start = get_training_start_date(request.race_date, as_of)

    record = _upsert_profile(session, user_id, request, training_start)
    removed = delete_workouts_for_user(session, user_id)
    if removed:
        logger.info(f"Removed {removed} workouts from previous plan for user_id={user_id}")

    planned = generate_plan_weeks(
        user_id,
        to_training_profile(record),
        breakdown,
        training_start,
        range(1, settings.onboarding_weeks + 1),
    )
    created = create_workouts(session, planned, batch_size=settings.workout_insert_batch_size)

    logger.info(
        f"Onboarding completed for user_id={user_id}: total_weeks={breakdown.total_weeks} "
        f"start={training_start} workouts={len(created)}"
    )
    return OnboardingResponse(
        success=True,
        profile=TrainingProfileSchema.model_validate(record),
        workouts_generated=len(created),
    )


def generate_next_week(
    session: Session,
    user_id: str,
    as_of: date | None = None,
) -> WeekGenerationResult:
    """Generate the next ungenerated week of a user's plan.

    Intended to run on a weekly cadence (e.g. every Sunday) from an external
    scheduler. Does nothing when the plan is complete or the user has no
    profile.
    """
    record = get_profile_record(session, user_id)
    if record is None:
        logger.warning(f"No training profile for user_id={user_id}, skipping weekly generation")
        return WeekGenerationResult(user_id=user_id, reason="no_profile")

    as_of = as_of or today_for_timezone(record.timezone)
    breakdown = get_plan_breakdown(record)
    last_week = get_max_week_number(session, user_id) or 0
    current_week = get_plan_week_number(record, as_of)
    next_week = last_week + 1

    if next_week > breakdown.total_weeks:
        logger.info(f"Plan complete for user_id={user_id} ({breakdown.total_weeks} weeks generated)")
        return WeekGenerationResult(user_id=user_id, reason="plan_complete")

    # Keep at most one week of lookahead beyond the current week
    if next_week > current_week + 1:
        logger.info(f"Week {next_week} not due yet for user_id={user_id} (current week {current_week})")
        return WeekGenerationResult(user_id=user_id, reason="not_due")

    week_start = get_week_start_date(next_week, record.training_start_date)
    planned = generate_week_workouts(user_id, next_week, week_start, to_training_profile(record), breakdown)
    created = create_workouts(session, planned, batch_size=settings.workout_insert_batch_size)

    logger.info(f"Generated week {next_week} for user_id={user_id}: {len(created)} workouts")
    return WeekGenerationResult(user_id=user_id, week_number=next_week, workouts_generated=len(created))


def list_profile_user_ids(session: Session) -> list[str]:
    return list(session.execute(select(TrainingProfileRecord.user_id).order_by(TrainingProfileRecord.user_id)).scalars().all())


def generate_next_week_for_all(as_of: date | None = None) -> list[WeekGenerationResult]:
    """Run weekly generation for every user with a training profile.

    Each user runs in its own session, so a failure rolls back only that
    user's week and the remaining users are still generated and committed.

    Returns:
        One result per user; failed users carry reason="error"
    """
    with db_session.get_session() as session:
        user_ids = list_profile_user_ids(session)
    logger.info(f"Running weekly generation for {len(user_ids)} users")

    results: list[WeekGenerationResult] = []
    for user_id in user_ids:
        try:
            with db_session.get_session() as session:
                results.append(generate_next_week(session, user_id, as_of=as_of))
        except Exception as e:
            logger.exception(f"Weekly generation failed for user_id={user_id}: {e}")
            results.append(WeekGenerationResult(user_id=user_id, reason="error"))

    failed = sum(1 for r in results if r.reason == "error")
    if failed:
        logger.warning(f"Weekly generation finished with {failed} failed users out of {len(user_ids)}")
    return results
