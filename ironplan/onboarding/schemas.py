"""Pydantic request/response models for onboarding."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ironplan.plans.enums import FitnessLevel
from ironplan.plans.errors import InvalidInputError
from ironplan.plans.validators import validate_target_hours, validate_time_of_day, validate_timezone


class OnboardingRequest(BaseModel):
    """Onboarding payload collected by the multi-step onboarding form.

    Single atomic payload - all fields are required.
    """

    race_date: date = Field(description="Target race date (at least 12 weeks away)")
    fitness_level: FitnessLevel = Field(description="Self-reported fitness level")
    target_hours: float = Field(description="Weekly training hours, within the configured bounds")
    weekday_time: str = Field(description="Weekday workout time (HH:MM)")
    weekend_time: str = Field(description="Weekend workout time (HH:MM)")
    timezone: str = Field(description="IANA timezone string (e.g., 'America/New_York')")

    @field_validator("target_hours")
    @classmethod
    def validate_hours(cls, value: float) -> float:
        try:
            return validate_target_hours(value)
        except InvalidInputError as e:
            raise ValueError(str(e)) from e

    @field_validator("weekday_time", "weekend_time")
    @classmethod
    def validate_time(cls, value: str) -> str:
        try:
            return validate_time_of_day(value)
        except InvalidInputError as e:
            raise ValueError(str(e)) from e

    @field_validator("timezone")
    @classmethod
    def validate_tz(cls, value: str) -> str:
        try:
            return validate_timezone(value)
        except InvalidInputError as e:
            raise ValueError(str(e)) from e


class TrainingProfileSchema(BaseModel):
    """Stored training profile."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    race_date: date
    fitness_level: FitnessLevel
    target_hours_per_week: float
    weekday_time: str
    weekend_time: str
    timezone: str
    training_start_date: date


class OnboardingResponse(BaseModel):
    """Response for onboarding completion."""

    success: bool = Field(description="Whether the plan was created")
    profile: TrainingProfileSchema
    workouts_generated: int = Field(description="Number of workouts persisted")
    message: str = Field(default="Training plan created successfully")


class WeekGenerationResult(BaseModel):
    """Outcome of a weekly generation run for one user."""

    user_id: str
    week_number: int | None = Field(default=None, description="Week generated, None if nothing was generated")
    workouts_generated: int = 0
    reason: str | None = Field(default=None, description="Why no week was generated")
