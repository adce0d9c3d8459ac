"""Plans module - deterministic Ironman plan generation.

This module provides:
- Phase breakdown from race date (base/build/peak/taper)
- Weekly volume ramps per phase and fitness level
- Weekly workout generation from fixed templates

All functions are pure; the reference date is always passed explicitly.
"""

from ironplan.plans.enums import Discipline, FitnessLevel, Phase, Weekday, WorkoutStatus, WorkoutType
from ironplan.plans.errors import InsufficientLeadTimeError, InvalidInputError, PlanGenerationError
from ironplan.plans.phases import (
    calculate_phases,
    get_current_week_number,
    get_phase_for_week,
    get_training_start_date,
    get_week_start_date,
)
from ironplan.plans.types import PhaseBreakdown, PlannedWorkout, TrainingProfile, WorkoutTemplate
from ironplan.plans.volume import calculate_weekly_volume
from ironplan.plans.workouts import generate_plan_weeks, generate_week_workouts

__all__ = [
    "Discipline",
    "FitnessLevel",
    "InsufficientLeadTimeError",
    "InvalidInputError",
    "Phase",
    "PhaseBreakdown",
    "PlanGenerationError",
    "PlannedWorkout",
    "TrainingProfile",
    "Weekday",
    "WorkoutStatus",
    "WorkoutTemplate",
    "WorkoutType",
    "calculate_phases",
    "calculate_weekly_volume",
    "generate_plan_weeks",
    "generate_week_workouts",
    "get_current_week_number",
    "get_phase_for_week",
    "get_training_start_date",
    "get_week_start_date",
]
