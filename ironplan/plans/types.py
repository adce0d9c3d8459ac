"""Plan generation data model.

Inputs (TrainingProfile), derived values (PhaseBreakdown), static
configuration (WorkoutTemplate) and output records (PlannedWorkout).
Inputs and configuration are frozen so a generation call cannot mutate them.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from ironplan.plans.enums import Discipline, FitnessLevel, Phase, Weekday, WorkoutStatus, WorkoutType


class TrainingProfile(BaseModel):
    """Athlete inputs for plan generation.

    Attributes:
        race_date: Target race date
        fitness_level: Self-reported fitness level
        target_hours_per_week: Weekly training time budget in hours
        weekday_time: Workout time-of-day on weekdays ("HH:MM")
        weekend_time: Workout time-of-day on Saturday/Sunday ("HH:MM")
        timezone: IANA timezone name (e.g., "America/New_York")
    """

    model_config = ConfigDict(frozen=True)

    race_date: date
    fitness_level: FitnessLevel
    target_hours_per_week: float
    weekday_time: str
    weekend_time: str
    timezone: str = "UTC"


class PhaseBreakdown(BaseModel):
    """Number of weeks allocated to each training phase.

    Base, build and peak are floored and taper is ceiled, so the phase counts
    can add up to as much as two weeks less than total_weeks. Weeks past the
    allocated range count as taper.
    """

    model_config = ConfigDict(frozen=True)

    total_weeks: int = Field(..., ge=0)
    base_weeks: int = Field(..., ge=0)
    build_weeks: int = Field(..., ge=0)
    peak_weeks: int = Field(..., ge=0)
    taper_weeks: int = Field(..., ge=0)

    @property
    def allocated_weeks(self) -> int:
        return self.base_weeks + self.build_weeks + self.peak_weeks + self.taper_weeks

    def weeks_for(self, phase: Phase) -> int:
        """Number of weeks allocated to a phase."""
        return {
            Phase.BASE: self.base_weeks,
            Phase.BUILD: self.build_weeks,
            Phase.PEAK: self.peak_weeks,
            Phase.TAPER: self.taper_weeks,
        }[phase]

    def weeks_before(self, phase: Phase) -> int:
        """Number of weeks in all phases preceding the given phase."""
        return sum(self.weeks_for(p) for p in Phase if p.index < phase.index)


class WorkoutTemplate(BaseModel):
    """One fixed weekly workout slot for a discipline."""

    model_config = ConfigDict(frozen=True)

    discipline: Discipline
    workout_type: WorkoutType
    day: Weekday
    volume_fraction: float = Field(..., gt=0, le=1)


class PlannedWorkout(BaseModel):
    """Generated workout, ready to be persisted.

    Status is always "scheduled" when produced by the generator; completion,
    skipping and rescheduling happen after persistence.
    """

    user_id: str
    discipline: Discipline
    workout_type: WorkoutType
    duration_minutes: int = Field(..., ge=0)
    scheduled_date: date
    scheduled_time: str
    description: str
    status: WorkoutStatus = WorkoutStatus.SCHEDULED
    week_number: int = Field(..., ge=1)
    phase: Phase
    timezone: str | None = None
