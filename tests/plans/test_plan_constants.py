"""Tests for the fixed plan generation tables."""

import pytest
from pydantic import ValidationError

from ironplan.plans.constants import (
    DISCIPLINE_RATIOS,
    FITNESS_MULTIPLIERS,
    MINIMUM_TRAINING_WEEKS,
    PHASE_DISTRIBUTION,
    WEEKEND_DAYS,
    WEEKLY_TEMPLATE,
    WORKOUT_DESCRIPTIONS,
)
from ironplan.plans.enums import Discipline, FitnessLevel, Phase, Weekday, WorkoutType


def test_discipline_ratios_sum_to_one():
    assert sum(DISCIPLINE_RATIOS.values()) == pytest.approx(1.0)
    assert DISCIPLINE_RATIOS[Discipline.SWIM] == 0.18
    assert DISCIPLINE_RATIOS[Discipline.BIKE] == 0.52
    assert DISCIPLINE_RATIOS[Discipline.RUN] == 0.30


def test_phase_distribution_sums_to_one():
    assert sum(PHASE_DISTRIBUTION.values()) == pytest.approx(1.0)
    assert list(PHASE_DISTRIBUTION) == list(Phase)


def test_fitness_multipliers():
    assert FITNESS_MULTIPLIERS == {
        FitnessLevel.BEGINNER: 0.6,
        FitnessLevel.INTERMEDIATE: 0.7,
        FitnessLevel.ADVANCED: 0.8,
    }


def test_minimum_training_weeks():
    assert MINIMUM_TRAINING_WEEKS == 12


@pytest.mark.parametrize("discipline", list(Discipline))
def test_template_fractions_sum_to_one(discipline: Discipline):
    templates = WEEKLY_TEMPLATE[discipline]
    assert sum(t.volume_fraction for t in templates) == pytest.approx(1.0)
    assert all(t.discipline == discipline for t in templates)


def test_template_slot_counts():
    assert [len(WEEKLY_TEMPLATE[d]) for d in Discipline] == [2, 3, 3]


def test_swim_template():
    swim = WEEKLY_TEMPLATE[Discipline.SWIM]
    assert [(t.day, t.workout_type, t.volume_fraction) for t in swim] == [
        (Weekday.TUESDAY, WorkoutType.EASY, 0.40),
        (Weekday.THURSDAY, WorkoutType.INTERVALS, 0.60),
    ]


def test_long_sessions_are_on_weekends():
    long_days = {t.day for templates in WEEKLY_TEMPLATE.values() for t in templates if t.workout_type == WorkoutType.LONG}
    assert long_days == set(WEEKEND_DAYS)


def test_description_for_every_combination():
    assert len(WORKOUT_DESCRIPTIONS) == 12
    for discipline in Discipline:
        for workout_type in WorkoutType:
            assert WORKOUT_DESCRIPTIONS[(discipline, workout_type)]


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        DISCIPLINE_RATIOS[Discipline.SWIM] = 0.5  # type: ignore[index]
    with pytest.raises(TypeError):
        WEEKLY_TEMPLATE[Discipline.RUN] = ()  # type: ignore[index]


def test_templates_are_frozen():
    template = WEEKLY_TEMPLATE[Discipline.BIKE][0]
    with pytest.raises(ValidationError):
        template.volume_fraction = 0.9  # type: ignore[misc]


def test_phase_index_order():
    assert [p.index for p in Phase] == [0, 1, 2, 3]
    assert Weekday.MONDAY.index == 0
    assert Weekday.SUNDAY.index == 6
