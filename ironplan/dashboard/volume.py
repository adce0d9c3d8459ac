"""Training volume aggregation for the dashboard.

Only completed workouts count towards completed volume. Intensity zones
are derived from the workout type:
- easy, long -> zone2
- tempo -> zone3
- intervals -> zone4
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, Field

from ironplan.plans.enums import Discipline, WorkoutStatus, WorkoutType
from ironplan.workouts.models import Workout

Zone = Literal["zone2", "zone3", "zone4"]

WORKOUT_TYPE_ZONES = MappingProxyType(
    {
        WorkoutType.EASY: "zone2",
        WorkoutType.LONG: "zone2",
        WorkoutType.TEMPO: "zone3",
        WorkoutType.INTERVALS: "zone4",
    }
)


class VolumeStats(BaseModel):
    """Minutes of training, in total and broken down by discipline and zone."""

    total_minutes: int = 0
    discipline_minutes: dict[Discipline, int] = Field(default_factory=lambda: {d: 0 for d in Discipline})
    zone_minutes: dict[Zone, int] = Field(default_factory=lambda: {"zone2": 0, "zone3": 0, "zone4": 0})


def get_zone_for_workout_type(workout_type: str) -> Zone | None:
    try:
        return WORKOUT_TYPE_ZONES[WorkoutType(workout_type)]
    except ValueError:
        return None


def calculate_volume_stats(workouts: Iterable[Workout], completed_only: bool = True) -> VolumeStats:
    """Aggregate workout minutes by discipline and intensity zone.

    Args:
        workouts: Workouts to aggregate
        completed_only: Count only completed workouts (dashboard default);
            False aggregates every workout regardless of status (planned volume)

    Returns:
        VolumeStats with minute totals
    """
    stats = VolumeStats()
    for workout in workouts:
        if completed_only and workout.status != WorkoutStatus.COMPLETED:
            continue
        stats.total_minutes += workout.duration_minutes
        stats.discipline_minutes[Discipline(workout.discipline)] += workout.duration_minutes
        zone = get_zone_for_workout_type(workout.workout_type)
        if zone:
            stats.zone_minutes[zone] += workout.duration_minutes
    return stats


def format_hours_minutes(total_minutes: float) -> str:
    """Format minutes as H:MM (e.g., 95 -> "1:35")."""
    hours = int(total_minutes // 60)
    minutes = round(total_minutes % 60)
    if minutes == 60:
        hours, minutes = hours + 1, 0
    return f"{hours}:{minutes:02d}"
