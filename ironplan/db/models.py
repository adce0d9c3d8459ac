from __future__ import annotations

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Float, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class TrainingProfileRecord(Base):
    """Athlete training profile captured during onboarding.

    One row per user. Stores:
    - race_date: Target race date
    - fitness_level: beginner | intermediate | advanced
    - target_hours_per_week: Weekly time budget in hours
    - weekday_time / weekend_time: Preferred workout time ("HH:MM")
    - timezone: IANA timezone name
    - training_start_date: Plan start computed at onboarding; later weeks
      are generated against this date so the phase breakdown stays fixed
    """

    __tablename__ = "training_profiles"

    user_id: Mapped[str] = mapped_column(String, primary_key=True, index=True)
    race_date: Mapped[date] = mapped_column(Date, nullable=False)
    fitness_level: Mapped[str] = mapped_column(String, nullable=False)
    target_hours_per_week: Mapped[float] = mapped_column(Float, nullable=False)
    weekday_time: Mapped[str] = mapped_column(String(5), nullable=False)
    weekend_time: Mapped[str] = mapped_column(String(5), nullable=False)
    timezone: Mapped[str] = mapped_column(String, nullable=False, default="UTC")
    training_start_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc)
    )
