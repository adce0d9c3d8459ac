"""Weekly workout generation.

Turns a week's volume into concrete dated workouts using the fixed weekly
template: 2 swim, 3 bike and 3 run sessions every week. Pure - returns an
in-memory list and leaves persistence to the caller.
"""

import math
from datetime import date, timedelta

from loguru import logger

from ironplan.plans.constants import DISCIPLINE_RATIOS, WEEKEND_DAYS, WEEKLY_TEMPLATE, WORKOUT_DESCRIPTIONS
from ironplan.plans.enums import Discipline, Weekday, WorkoutStatus, WorkoutType
from ironplan.plans.phases import get_phase_for_week, get_week_start_date
from ironplan.plans.types import PhaseBreakdown, PlannedWorkout, TrainingProfile
from ironplan.plans.volume import calculate_weekly_volume


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values.

    Built-in round() uses banker's rounding, which would turn 22.5 minutes
    into 22.
    """
    return math.floor(value + 0.5)


def next_day_of_week(start_date: date, day: Weekday) -> date:
    """Get the next occurrence of a weekday on or after start_date."""
    days_until_target = (Weekday(day).index - start_date.weekday()) % 7
    return start_date + timedelta(days=days_until_target)


def get_workout_description(discipline: Discipline, workout_type: WorkoutType) -> str:
    return WORKOUT_DESCRIPTIONS[(Discipline(discipline), WorkoutType(workout_type))]


def get_scheduled_time(day: Weekday, profile: TrainingProfile) -> str:
    """Weekend slots use the weekend time, everything else the weekday time."""
    if day in WEEKEND_DAYS:
        return profile.weekend_time
    return profile.weekday_time


def generate_week_workouts(
    user_id: str,
    week_number: int,
    week_start_date: date,
    profile: TrainingProfile,
    breakdown: PhaseBreakdown,
) -> list[PlannedWorkout]:
    """Generate the workouts for one training week.

    Args:
        user_id: Owning user
        week_number: 1-indexed training week
        week_start_date: First day of the week; slots are placed on the next
            matching weekday on or after this date
        profile: Athlete training profile
        breakdown: Phase breakdown of the plan

    Returns:
        Eight scheduled workouts (2 swim, 3 bike, 3 run)
    """
    phase = get_phase_for_week(week_number, breakdown)
    weekly_hours = calculate_weekly_volume(
        week_number,
        phase,
        profile.target_hours_per_week,
        profile.fitness_level,
        breakdown,
    )

    workouts: list[PlannedWorkout] = []
    for discipline, templates in WEEKLY_TEMPLATE.items():
        discipline_hours = weekly_hours * DISCIPLINE_RATIOS[discipline]
        workouts.extend(
            PlannedWorkout(
                user_id=user_id,
                discipline=discipline,
                workout_type=template.workout_type,
                duration_minutes=round_half_up(discipline_hours * template.volume_fraction * 60),
                scheduled_date=next_day_of_week(week_start_date, template.day),
                scheduled_time=get_scheduled_time(template.day, profile),
                description=get_workout_description(discipline, template.workout_type),
                status=WorkoutStatus.SCHEDULED,
                week_number=week_number,
                phase=phase,
                timezone=profile.timezone,
            )
            for template in templates
        )

    logger.debug(
        f"Generated {len(workouts)} workouts for user_id={user_id} week={week_number} "
        f"phase={phase.value} weekly_hours={weekly_hours:.2f}"
    )
    return workouts


def generate_plan_weeks(
    user_id: str,
    profile: TrainingProfile,
    breakdown: PhaseBreakdown,
    training_start_date: date,
    weeks: range,
) -> list[PlannedWorkout]:
    """Generate workouts for several consecutive weeks.

    Weeks beyond breakdown.total_weeks are skipped.
    """
    workouts: list[PlannedWorkout] = []
    for week_number in weeks:
        if week_number > breakdown.total_weeks:
            logger.info(f"Skipping week {week_number}: plan has {breakdown.total_weeks} weeks")
            break
        week_start = get_week_start_date(week_number, training_start_date)
        workouts.extend(generate_week_workouts(user_id, week_number, week_start, profile, breakdown))
    return workouts
