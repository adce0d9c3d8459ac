"""Training profile validators.

The generation core trusts its inputs. These checks run at the boundary
(onboarding, CLI) before a profile reaches the core.
"""

import re
from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ironplan.config.settings import settings
from ironplan.plans.errors import InvalidInputError
from ironplan.plans.phases import calculate_phases
from ironplan.plans.types import TrainingProfile

_TIME_OF_DAY = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_time_of_day(value: str, field: str = "time") -> str:
    """Validate an "HH:MM" 24-hour time string.

    Raises:
        InvalidInputError: If the value is not HH:MM
    """
    if not isinstance(value, str) or not _TIME_OF_DAY.match(value):
        raise InvalidInputError(field, f"expected HH:MM, got {value!r}")
    return value


def validate_timezone(value: str) -> str:
    """Validate an IANA timezone name.

    Raises:
        InvalidInputError: If the timezone is unknown
    """
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidInputError("timezone", f"unknown timezone {value!r}") from e
    return value


def validate_target_hours(
    value: float,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    """Validate weekly target hours are within [minimum, maximum].

    Bounds default to settings.min_target_hours and settings.max_target_hours.

    Raises:
        InvalidInputError: If out of range
    """
    minimum = settings.min_target_hours if minimum is None else minimum
    maximum = settings.max_target_hours if maximum is None else maximum
    if not minimum <= value <= maximum:
        raise InvalidInputError("target_hours_per_week", f"must be between {minimum:g} and {maximum:g}, got {value:g}")
    return value


def validate_training_profile(profile: TrainingProfile, as_of: date) -> None:
    """Validate a full training profile, including race lead time.

    Raises:
        InvalidInputError: If a field is malformed or out of range
        InsufficientLeadTimeError: If the race is less than 12 weeks away
    """
    validate_target_hours(profile.target_hours_per_week)
    validate_time_of_day(profile.weekday_time, "weekday_time")
    validate_time_of_day(profile.weekend_time, "weekend_time")
    validate_timezone(profile.timezone)
    calculate_phases(profile.race_date, as_of)
