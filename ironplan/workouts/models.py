"""Workout database models.

Generated workouts are persisted here and then owned by the workout
lifecycle endpoints (complete, skip, reschedule).
"""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ironplan.db.models import Base
from ironplan.plans.enums import WorkoutStatus


class Workout(Base):
    """Workout table - one scheduled training session.

    Schema:
    - id: UUID primary key
    - user_id: Owning user
    - discipline: swim | bike | run
    - workout_type: easy | tempo | intervals | long
    - duration_minutes: Planned duration
    - scheduled_date / scheduled_time: When the workout is planned ("HH:MM")
    - description: Human-readable workout description
    - status: scheduled | completed | skipped
    - completed_at: Set when the workout is completed
    - week_number / phase: Position in the training plan
    - timezone: IANA timezone of scheduled_time
    """

    __tablename__ = "workouts"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    discipline: Mapped[str] = mapped_column(String, nullable=False)
    workout_type: Mapped[str] = mapped_column(String, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False)
    scheduled_time: Mapped[str] = mapped_column(String(5), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String, nullable=False, default=WorkoutStatus.SCHEDULED.value)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    week_number: Mapped[int] = mapped_column(Integer, nullable=False)
    phase: Mapped[str] = mapped_column(String, nullable=False)
    timezone: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc)
    )

    __table_args__ = (
        Index("idx_workouts_user_date", "user_id", "scheduled_date"),
        Index("idx_workouts_user_week", "user_id", "week_number"),
    )
