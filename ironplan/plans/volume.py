"""Weekly volume calculation - hours.

Weekly volume ramps within each phase on top of a fitness-dependent base:

    volume = target_hours * fitness_multiplier * phase_multiplier

Phase multipliers use progress through the phase, clamped to [0, 1]:
- base:  0.6 -> 0.8
- build: 0.8 -> 1.0
- peak:  1.0 plus at most 0.1 (plateau, may exceed target)
- taper: 1.0 -> 0.4
"""

from ironplan.plans.constants import FITNESS_MULTIPLIERS
from ironplan.plans.enums import FitnessLevel, Phase
from ironplan.plans.types import PhaseBreakdown


def _phase_progress(week_number: int, phase: Phase, breakdown: PhaseBreakdown) -> float:
    week_in_phase = week_number - breakdown.weeks_before(phase)
    progress = (week_in_phase - 1) / max(1, breakdown.weeks_for(phase))
    return max(0.0, min(1.0, progress))


def get_phase_multiplier(week_number: int, phase: Phase, breakdown: PhaseBreakdown) -> float:
    """Get the within-phase ramp multiplier for a week."""
    progress = _phase_progress(week_number, phase, breakdown)

    if phase == Phase.BASE:
        return 0.6 + progress * 0.2
    if phase == Phase.BUILD:
        return 0.8 + progress * 0.2
    if phase == Phase.PEAK:
        return 1.0 + min(progress, 0.1)
    return 1.0 - progress * 0.6


def calculate_weekly_volume(
    week_number: int,
    phase: Phase,
    target_hours: float,
    fitness_level: FitnessLevel,
    breakdown: PhaseBreakdown,
) -> float:
    """Calculate total training volume for a week.

    Args:
        week_number: 1-indexed training week
        phase: Phase the week belongs to
        target_hours: Athlete's weekly target hours
        fitness_level: Athlete fitness level
        breakdown: Phase breakdown of the plan

    Returns:
        Weekly volume in hours (not clamped)
    """
    base_multiplier = FITNESS_MULTIPLIERS[FitnessLevel(fitness_level)]
    phase_multiplier = get_phase_multiplier(week_number, Phase(phase), breakdown)
    return target_hours * base_multiplier * phase_multiplier
