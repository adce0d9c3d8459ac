"""Tests for workout persistence."""

from datetime import date

import pytest

from ironplan.plans.enums import WorkoutStatus
from ironplan.plans.types import PhaseBreakdown, TrainingProfile
from ironplan.plans.workouts import generate_plan_weeks
from ironplan.workouts.models import Workout
from ironplan.workouts.repository import (
    create_workouts,
    delete_workouts_for_user,
    get_max_week_number,
    get_workout,
    get_workouts,
)

MONDAY = date(2026, 1, 5)
SIXTEEN_WEEKS = PhaseBreakdown(total_weeks=16, base_weeks=6, build_weeks=5, peak_weeks=3, taper_weeks=1)


@pytest.fixture
def planned(intermediate_profile: TrainingProfile):
    return generate_plan_weeks("user-1", intermediate_profile, SIXTEEN_WEEKS, MONDAY, range(1, 4))


def test_create_workouts_persists_all_rows(db_session, planned):
    created = create_workouts(db_session, planned)

    assert len(created) == 24
    assert all(row.id for row in created)
    assert db_session.query(Workout).count() == 24
    first = created[0]
    assert first.status == WorkoutStatus.SCHEDULED.value
    assert first.discipline == planned[0].discipline.value
    assert first.scheduled_date == planned[0].scheduled_date
    assert first.completed_at is None


def test_create_workouts_in_small_batches(db_session, planned):
    """Test that chunked inserts keep every row and the input order."""
    created = create_workouts(db_session, planned, batch_size=5)

    assert len(created) == 24
    assert [row.scheduled_date for row in created] == [w.scheduled_date for w in planned]
    assert len({row.id for row in created}) == 24


def test_create_workouts_empty(db_session):
    assert create_workouts(db_session, []) == []


def test_create_workouts_rejects_bad_batch_size(db_session, planned):
    with pytest.raises(ValueError, match="batch_size"):
        create_workouts(db_session, planned, batch_size=0)


def test_get_workouts_filters(db_session, planned):
    create_workouts(db_session, planned)

    all_rows = get_workouts(db_session, "user-1")
    assert len(all_rows) == 24
    assert [r.scheduled_date for r in all_rows] == sorted(r.scheduled_date for r in all_rows)

    assert len(get_workouts(db_session, "user-1", week_number=2)) == 8
    in_range = get_workouts(db_session, "user-1", start_date=date(2026, 1, 12), end_date=date(2026, 1, 18))
    assert {r.week_number for r in in_range} == {2}
    assert get_workouts(db_session, "someone-else") == []


def test_get_workout_and_max_week(db_session, planned):
    created = create_workouts(db_session, planned)

    assert get_workout(db_session, created[3].id) is created[3]
    assert get_workout(db_session, "missing") is None
    assert get_max_week_number(db_session, "user-1") == 3
    assert get_max_week_number(db_session, "nobody") is None


def test_delete_workouts_for_user(db_session, planned):
    create_workouts(db_session, planned)

    assert delete_workouts_for_user(db_session, "user-1") == 24
    assert get_workouts(db_session, "user-1") == []
