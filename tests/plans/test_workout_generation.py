"""Tests for weekly workout generation.

Tests enforce:
- Exactly 8 workouts per week (2 swim, 3 bike, 3 run)
- Durations follow discipline ratios and template fractions
- Dates land on the template weekday on or after the week start
- Weekend slots use the weekend time
"""

from collections import Counter
from datetime import date, timedelta

import pytest

from ironplan.plans.enums import Discipline, Phase, Weekday, WorkoutStatus, WorkoutType
from ironplan.plans.phases import calculate_phases
from ironplan.plans.types import PhaseBreakdown, TrainingProfile
from ironplan.plans.volume import calculate_weekly_volume
from ironplan.plans.workouts import (
    generate_plan_weeks,
    generate_week_workouts,
    get_workout_description,
    next_day_of_week,
    round_half_up,
)

MONDAY = date(2026, 1, 5)
SIXTEEN_WEEKS = PhaseBreakdown(total_weeks=16, base_weeks=6, build_weeks=5, peak_weeks=3, taper_weeks=1)


def _by_slot(workouts):
    return {(w.discipline, w.workout_type, w.scheduled_date.weekday()): w for w in workouts}


def test_next_day_of_week():
    assert next_day_of_week(MONDAY, Weekday.MONDAY) == MONDAY
    assert next_day_of_week(MONDAY, Weekday.TUESDAY) == date(2026, 1, 6)
    assert next_day_of_week(MONDAY, Weekday.SUNDAY) == date(2026, 1, 11)
    # Wraps around within seven days
    assert next_day_of_week(date(2026, 1, 9), Weekday.MONDAY) == date(2026, 1, 12)
    assert next_day_of_week(date(2026, 1, 9), Weekday.FRIDAY) == date(2026, 1, 9)


def test_round_half_up():
    assert round_half_up(22.5) == 23
    assert round_half_up(21.49) == 21
    assert round_half_up(0.0) == 0


def test_eight_workouts_per_week(intermediate_profile: TrainingProfile):
    workouts = generate_week_workouts("user-1", 1, MONDAY, intermediate_profile, SIXTEEN_WEEKS)

    assert len(workouts) == 8
    counts = Counter(w.discipline for w in workouts)
    assert counts == {Discipline.SWIM: 2, Discipline.BIKE: 3, Discipline.RUN: 3}


@pytest.mark.parametrize("week_number", [1, 7, 12, 15, 16])
def test_eight_workouts_in_every_phase(intermediate_profile: TrainingProfile, week_number: int):
    workouts = generate_week_workouts("user-1", week_number, MONDAY, intermediate_profile, SIXTEEN_WEEKS)
    assert len(workouts) == 8
    assert len({w.phase for w in workouts}) == 1


def test_records_are_scheduled_and_owned(intermediate_profile: TrainingProfile):
    workouts = generate_week_workouts("user-42", 3, MONDAY, intermediate_profile, SIXTEEN_WEEKS)

    for workout in workouts:
        assert workout.user_id == "user-42"
        assert workout.status == WorkoutStatus.SCHEDULED
        assert workout.week_number == 3
        assert workout.phase == Phase.BASE
        assert workout.timezone == "America/New_York"
        assert workout.description == get_workout_description(workout.discipline, workout.workout_type)


def test_sixteen_week_intermediate_scenario(intermediate_profile: TrainingProfile, as_of: date):
    """Race 16 weeks out, intermediate, 12 h/week, 06:00 weekdays, 08:00 weekends."""
    breakdown = calculate_phases(intermediate_profile.race_date, as_of)
    assert (breakdown.total_weeks, breakdown.base_weeks, breakdown.build_weeks) == (16, 6, 5)
    assert (breakdown.peak_weeks, breakdown.taper_weeks) == (3, 1)

    workouts = generate_week_workouts("user-1", 1, as_of, intermediate_profile, breakdown)
    slots = {(w.discipline, w.workout_type): (w.scheduled_date, w.scheduled_time) for w in workouts}

    tuesday, wednesday, thursday = date(2026, 1, 6), date(2026, 1, 7), date(2026, 1, 8)
    saturday, sunday = date(2026, 1, 10), date(2026, 1, 11)

    assert slots[(Discipline.SWIM, WorkoutType.EASY)] == (tuesday, "06:00")
    assert slots[(Discipline.SWIM, WorkoutType.INTERVALS)] == (thursday, "06:00")
    assert slots[(Discipline.BIKE, WorkoutType.EASY)] == (as_of, "06:00")
    assert slots[(Discipline.BIKE, WorkoutType.TEMPO)] == (wednesday, "06:00")
    assert slots[(Discipline.BIKE, WorkoutType.LONG)] == (saturday, "08:00")
    assert slots[(Discipline.RUN, WorkoutType.EASY)] == (tuesday, "06:00")
    assert slots[(Discipline.RUN, WorkoutType.INTERVALS)] == (thursday, "06:00")
    assert slots[(Discipline.RUN, WorkoutType.LONG)] == (sunday, "08:00")
    assert all(w.phase == Phase.BASE for w in workouts)


def test_scenario_durations(intermediate_profile: TrainingProfile):
    """Test week 1 durations: 12 x 0.7 x 0.6 = 5.04 h split by ratios and fractions."""
    workouts = generate_week_workouts("user-1", 1, MONDAY, intermediate_profile, SIXTEEN_WEEKS)
    minutes = {(w.discipline, w.workout_type): w.duration_minutes for w in workouts}

    assert minutes == {
        (Discipline.SWIM, WorkoutType.EASY): 22,
        (Discipline.SWIM, WorkoutType.INTERVALS): 33,
        (Discipline.BIKE, WorkoutType.EASY): 39,
        (Discipline.BIKE, WorkoutType.TEMPO): 47,
        (Discipline.BIKE, WorkoutType.LONG): 71,
        (Discipline.RUN, WorkoutType.EASY): 32,
        (Discipline.RUN, WorkoutType.INTERVALS): 27,
        (Discipline.RUN, WorkoutType.LONG): 32,
    }


@pytest.mark.parametrize("week_number", range(1, 17))
def test_swim_split_follows_template(intermediate_profile: TrainingProfile, week_number: int):
    """Test that swim minutes match the 18% share split 40/60 within rounding."""
    workouts = generate_week_workouts("user-1", week_number, MONDAY, intermediate_profile, SIXTEEN_WEEKS)
    weekly_hours = calculate_weekly_volume(
        week_number,
        workouts[0].phase,
        intermediate_profile.target_hours_per_week,
        intermediate_profile.fitness_level,
        SIXTEEN_WEEKS,
    )
    swim_minutes = weekly_hours * 0.18 * 60
    swims = {w.workout_type: w.duration_minutes for w in workouts if w.discipline == Discipline.SWIM}

    assert abs(swims[WorkoutType.EASY] - swim_minutes * 0.4) <= 0.5
    assert abs(swims[WorkoutType.INTERVALS] - swim_minutes * 0.6) <= 0.5
    assert abs(sum(swims.values()) - round(swim_minutes)) <= 1


def test_dates_stay_within_seven_days_of_week_start(beginner_profile: TrainingProfile):
    """Test dates for a week that starts mid-week."""
    thursday = date(2026, 1, 8)
    workouts = generate_week_workouts("user-1", 2, thursday, beginner_profile, SIXTEEN_WEEKS)

    for workout in workouts:
        assert thursday <= workout.scheduled_date < thursday + timedelta(days=7)

    slots = _by_slot(workouts)
    # Tuesday slot wraps into the following week
    assert slots[(Discipline.SWIM, WorkoutType.EASY, 1)].scheduled_date == date(2026, 1, 13)
    # Thursday slot uses the start date itself
    assert slots[(Discipline.SWIM, WorkoutType.INTERVALS, 3)].scheduled_date == thursday


def test_weekend_time_only_on_weekends(beginner_profile: TrainingProfile):
    workouts = generate_week_workouts("user-1", 1, MONDAY, beginner_profile, SIXTEEN_WEEKS)

    for workout in workouts:
        expected = "07:00" if workout.scheduled_date.weekday() >= 5 else "05:30"
        assert workout.scheduled_time == expected


def test_repeated_calls_return_equal_but_distinct_lists(intermediate_profile: TrainingProfile):
    first = generate_week_workouts("user-1", 5, MONDAY, intermediate_profile, SIXTEEN_WEEKS)
    second = generate_week_workouts("user-1", 5, MONDAY, intermediate_profile, SIXTEEN_WEEKS)

    assert first == second
    assert first is not second
    assert all(a is not b for a, b in zip(first, second, strict=True))


def test_zero_volume_produces_zero_minute_workouts():
    profile = TrainingProfile(
        race_date=date(2026, 4, 27),
        fitness_level="beginner",
        target_hours_per_week=0,
        weekday_time="06:00",
        weekend_time="08:00",
    )
    workouts = generate_week_workouts("user-1", 1, MONDAY, profile, SIXTEEN_WEEKS)
    assert [w.duration_minutes for w in workouts] == [0] * 8


def test_generate_plan_weeks(intermediate_profile: TrainingProfile):
    workouts = generate_plan_weeks("user-1", intermediate_profile, SIXTEEN_WEEKS, MONDAY, range(1, 4))

    assert len(workouts) == 24
    assert Counter(w.week_number for w in workouts) == {1: 8, 2: 8, 3: 8}
    week_two = [w for w in workouts if w.week_number == 2]
    assert min(w.scheduled_date for w in week_two) == date(2026, 1, 12)


def test_generate_plan_weeks_stops_at_plan_end(intermediate_profile: TrainingProfile):
    workouts = generate_plan_weeks("user-1", intermediate_profile, SIXTEEN_WEEKS, MONDAY, range(15, 20))
    assert {w.week_number for w in workouts} == {15, 16}
