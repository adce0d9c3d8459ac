"""Canonical enums for plan generation.

All enums are string-based so they serialize to JSON and map to
database columns without conversion.
"""

from enum import StrEnum


# -----------------------------
# Athlete Profile
# -----------------------------
class FitnessLevel(StrEnum):
    """Self-reported fitness level collected during onboarding."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# -----------------------------
# Workouts
# -----------------------------
class Discipline(StrEnum):
    """Triathlon discipline."""

    SWIM = "swim"
    BIKE = "bike"
    RUN = "run"


class WorkoutType(StrEnum):
    """Workout type within a discipline."""

    EASY = "easy"
    TEMPO = "tempo"
    INTERVALS = "intervals"
    LONG = "long"


class WorkoutStatus(StrEnum):
    """Lifecycle status of a persisted workout."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    SKIPPED = "skipped"


# -----------------------------
# Periodization
# -----------------------------
class Phase(StrEnum):
    """Training phase, in the order the phases occur before a race."""

    BASE = "base"
    BUILD = "build"
    PEAK = "peak"
    TAPER = "taper"

    @property
    def index(self) -> int:
        """Position of the phase in the plan (base=0 ... taper=3)."""
        return list(Phase).index(self)


class Weekday(StrEnum):
    """Day of week, Monday first to match date.weekday()."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def index(self) -> int:
        """Weekday number compatible with date.weekday() (Monday=0)."""
        return list(Weekday).index(self)
