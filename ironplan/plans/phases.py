"""Deterministic phase calculation.

Splits the weeks between an as-of date and the race into base, build,
peak and taper phases. Every function takes the reference date explicitly,
so results are stable for a given (race_date, as_of) pair and callers must
recompute rather than cache across days.
"""

import math
from datetime import date, datetime, timedelta

from ironplan.plans.constants import MINIMUM_TRAINING_WEEKS, PHASE_DISTRIBUTION
from ironplan.plans.enums import Phase
from ironplan.plans.errors import InsufficientLeadTimeError
from ironplan.plans.types import PhaseBreakdown


def _to_date(value: date | datetime) -> date:
    """Normalize a datetime to its calendar date (time-of-day ignored)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def calculate_phases(race_date: date | datetime, as_of: date | datetime) -> PhaseBreakdown:
    """Calculate the phase breakdown for a race.

    Args:
        race_date: Target race date
        as_of: Reference "today"

    Returns:
        PhaseBreakdown with total weeks and weeks per phase

    Raises:
        InsufficientLeadTimeError: If fewer than MINIMUM_TRAINING_WEEKS remain
    """
    total_weeks = (_to_date(race_date) - _to_date(as_of)).days // 7

    if total_weeks < MINIMUM_TRAINING_WEEKS:
        raise InsufficientLeadTimeError(total_weeks=total_weeks, minimum_weeks=MINIMUM_TRAINING_WEEKS)

    # Taper rounds up so borderline totals still get a taper week
    return PhaseBreakdown(
        total_weeks=total_weeks,
        base_weeks=math.floor(total_weeks * PHASE_DISTRIBUTION[Phase.BASE]),
        build_weeks=math.floor(total_weeks * PHASE_DISTRIBUTION[Phase.BUILD]),
        peak_weeks=math.floor(total_weeks * PHASE_DISTRIBUTION[Phase.PEAK]),
        taper_weeks=math.ceil(total_weeks * PHASE_DISTRIBUTION[Phase.TAPER]),
    )


def get_phase_for_week(week_number: int, breakdown: PhaseBreakdown) -> Phase:
    """Map a 1-indexed week number to its phase.

    Weeks past the allocated base/build/peak range fall through to taper,
    including overflow weeks caused by rounding drift.
    """
    if week_number <= breakdown.base_weeks:
        return Phase.BASE
    if week_number <= breakdown.base_weeks + breakdown.build_weeks:
        return Phase.BUILD
    if week_number <= breakdown.base_weeks + breakdown.build_weeks + breakdown.peak_weeks:
        return Phase.PEAK
    return Phase.TAPER


def get_training_start_date(race_date: date | datetime, as_of: date | datetime) -> date:
    """Get the plan start date: race date minus total_weeks whole weeks.

    Raises:
        InsufficientLeadTimeError: If fewer than MINIMUM_TRAINING_WEEKS remain
    """
    race_day = _to_date(race_date)
    breakdown = calculate_phases(race_day, as_of)
    return race_day - timedelta(weeks=breakdown.total_weeks)


def get_current_week_number(
    race_date: date | datetime,
    as_of: date | datetime,
    start_date: date | None = None,
) -> int:
    """Get the current 1-indexed training week.

    Without start_date the plan start is derived from (race_date, as_of),
    which requires the usual lead time. A persisted plan start date can be
    passed instead to track a plan that is already running.

    Returns:
        Week number, never below 1 (also before the plan has started)
    """
    today = _to_date(as_of)
    if start_date is None:
        start_date = get_training_start_date(race_date, today)

    weeks_since_start = (today - start_date).days // 7
    return max(1, weeks_since_start + 1)


def get_week_start_date(week_number: int, training_start_date: date) -> date:
    """Get the Monday that starts a training week.

    Week N nominally begins (N - 1) weeks after the training start; the
    result is moved to the Monday of that calendar week (Sunday goes back
    six days).
    """
    week_start = training_start_date + timedelta(weeks=week_number - 1)
    return week_start - timedelta(days=week_start.weekday())
