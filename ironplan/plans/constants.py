"""Plan generation constants.

Fixed lookup tables for periodization, volume and weekly structure.
Mappings are read-only proxies so the tables cannot be mutated at runtime.
"""

from types import MappingProxyType

from ironplan.plans.enums import Discipline, FitnessLevel, Phase, Weekday, WorkoutType
from ironplan.plans.types import WorkoutTemplate

MINIMUM_TRAINING_WEEKS = 12

# Share of total weekly volume per discipline
DISCIPLINE_RATIOS = MappingProxyType(
    {
        Discipline.SWIM: 0.18,
        Discipline.BIKE: 0.52,
        Discipline.RUN: 0.30,
    }
)

# Fraction of target hours used as the starting point for ramping
FITNESS_MULTIPLIERS = MappingProxyType(
    {
        FitnessLevel.BEGINNER: 0.6,
        FitnessLevel.INTERMEDIATE: 0.7,
        FitnessLevel.ADVANCED: 0.8,
    }
)

# Share of total training weeks per phase
PHASE_DISTRIBUTION = MappingProxyType(
    {
        Phase.BASE: 0.40,
        Phase.BUILD: 0.35,
        Phase.PEAK: 0.20,
        Phase.TAPER: 0.05,
    }
)

WEEKEND_DAYS = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})

# Weekly workout distribution, fractions are of the discipline's weekly volume
WEEKLY_TEMPLATE = MappingProxyType(
    {
        Discipline.SWIM: (
            WorkoutTemplate(discipline=Discipline.SWIM, workout_type=WorkoutType.EASY, day=Weekday.TUESDAY, volume_fraction=0.40),
            WorkoutTemplate(discipline=Discipline.SWIM, workout_type=WorkoutType.INTERVALS, day=Weekday.THURSDAY, volume_fraction=0.60),
        ),
        Discipline.BIKE: (
            WorkoutTemplate(discipline=Discipline.BIKE, workout_type=WorkoutType.EASY, day=Weekday.MONDAY, volume_fraction=0.25),
            WorkoutTemplate(discipline=Discipline.BIKE, workout_type=WorkoutType.TEMPO, day=Weekday.WEDNESDAY, volume_fraction=0.30),
            WorkoutTemplate(discipline=Discipline.BIKE, workout_type=WorkoutType.LONG, day=Weekday.SATURDAY, volume_fraction=0.45),
        ),
        Discipline.RUN: (
            WorkoutTemplate(discipline=Discipline.RUN, workout_type=WorkoutType.EASY, day=Weekday.TUESDAY, volume_fraction=0.35),
            WorkoutTemplate(discipline=Discipline.RUN, workout_type=WorkoutType.INTERVALS, day=Weekday.THURSDAY, volume_fraction=0.30),
            WorkoutTemplate(discipline=Discipline.RUN, workout_type=WorkoutType.LONG, day=Weekday.SUNDAY, volume_fraction=0.35),
        ),
    }
)

WORKOUT_DESCRIPTIONS = MappingProxyType(
    {
        (Discipline.SWIM, WorkoutType.EASY): "Easy swim - Focus on technique and efficiency. Keep effort conversational.",
        (Discipline.SWIM, WorkoutType.TEMPO): "Tempo swim - Sustained moderate effort. Build endurance at race pace.",
        (Discipline.SWIM, WorkoutType.INTERVALS): "Swim intervals - Build speed and power. Alternate hard efforts with recovery.",
        (Discipline.SWIM, WorkoutType.LONG): "Long swim - Build aerobic endurance. Steady, sustainable pace.",
        (Discipline.BIKE, WorkoutType.EASY): "Easy spin - Recovery pace. Keep cadence high, resistance low.",
        (Discipline.BIKE, WorkoutType.TEMPO): "Tempo ride - Sustained moderate effort. Build strength and endurance.",
        (Discipline.BIKE, WorkoutType.INTERVALS): "Bike intervals - Build power and speed. Alternate hard efforts with recovery.",
        (Discipline.BIKE, WorkoutType.LONG): "Long ride - Build aerobic endurance. Steady pace you can sustain for hours.",
        (Discipline.RUN, WorkoutType.EASY): "Easy run - Conversational pace. Focus on form and aerobic development.",
        (Discipline.RUN, WorkoutType.TEMPO): "Tempo run - Comfortably hard pace. Build lactate threshold.",
        (Discipline.RUN, WorkoutType.INTERVALS): "Run intervals - Build speed and VO2max. Alternate hard efforts with recovery.",
        (Discipline.RUN, WorkoutType.LONG): "Long run - Build endurance. Steady pace, practice race nutrition.",
    }
)
