# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import UTC, date, datetime, time
from typing import Any, ClassVar

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, Text, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lifelog.infrastructure.db.session import Base
from lifelog.infrastructure.db.types import UTCDateTime


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _serialize(value: Any) -> Any:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC).isoformat()
    if isinstance(value, (date, time)):
        return value.isoformat()
    return value


class User(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(254), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256))
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=_utcnow)


class OwnedMixin:
    """Columns shared by every account-scoped table.

    ``writable`` lists the columns a client may set; ``user_id`` is never among them.
    """

    writable: ClassVar[tuple[str, ...]] = ()
    readonly: ClassVar[tuple[str, ...]] = ("created_at",)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=_utcnow, index=True)

    def values(self) -> dict[str, Any]:
        return {name: _serialize(getattr(self, name)) for name in self.writable + self.readonly}


class JournalEntry(OwnedMixin, Base):
    __tablename__ = "journal_entries"
    writable = ("content",)
    readonly = ("created_at", "updated_at")

    content: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=_utcnow, onupdate=_utcnow)


class Idea(OwnedMixin, Base):
    __tablename__ = "ideas"
    writable = ("title", "content", "category")

    title: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text)
    category: Mapped[str] = mapped_column(String(64), default="general")


class Note(OwnedMixin, Base):
    __tablename__ = "notes"
    writable = ("title", "content", "category", "tags")
    readonly = ("created_at", "updated_at")

    title: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text)
    category: Mapped[str] = mapped_column(String(64), default="general")
    tags: Mapped[str | None] = mapped_column(String(512), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=_utcnow, onupdate=_utcnow)


class Reminder(OwnedMixin, Base):
    __tablename__ = "reminders"
    writable = ("title", "description", "reminder_date", "completed")

    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    reminder_date: Mapped[datetime] = mapped_column(UTCDateTime(), index=True)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )


class Event(OwnedMixin, Base):
    __tablename__ = "events"
    writable = ("title", "description", "start_time", "end_time", "event_type")

    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_time: Mapped[datetime] = mapped_column(UTCDateTime(), index=True)
    end_time: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)
    event_type: Mapped[str] = mapped_column(String(32), default="meeting")


class MoodEntry(OwnedMixin, Base):
    __tablename__ = "mood_entries"
    writable = ("mood", "energy_level", "notes", "stoic_quote")

    mood: Mapped[str] = mapped_column(String(32))
    energy_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    stoic_quote: Mapped[str | None] = mapped_column(Text, nullable=True)


class Poem(OwnedMixin, Base):
    __tablename__ = "poetry"
    writable = ("title", "content", "language")
    readonly = ("created_at", "updated_at")

    title: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text)
    language: Mapped[str] = mapped_column(String(16), default="en")
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=_utcnow, onupdate=_utcnow)


class PoetryIdea(OwnedMixin, Base):
    __tablename__ = "poetry_ideas"
    writable = ("idea", "inspiration")

    idea: Mapped[str] = mapped_column(Text)
    inspiration: Mapped[str | None] = mapped_column(Text, nullable=True)


class Workout(OwnedMixin, Base):
    __tablename__ = "workouts"
    writable = (
        "name",
        "description",
        "target_date",
        "target_time",
        "recurring_type",
        "recurring_days",
        "completed",
        "completion_date",
        "duration",
        "calories_burned",
        "notes",
        "reminder_enabled",
        "reminder_minutes",
    )

    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    target_date: Mapped[date] = mapped_column(Date, index=True)
    target_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    recurring_type: Mapped[str] = mapped_column(String(16), default="none")
    recurring_days: Mapped[str | None] = mapped_column(String(64), nullable=True)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )
    completion_date: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)
    calories_burned: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    reminder_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default="1"
    )
    reminder_minutes: Mapped[int] = mapped_column(Integer, default=15)


class Meal(OwnedMixin, Base):
    __tablename__ = "meals"
    writable = ("meal_name", "description", "calories", "meal_time")

    meal_name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    calories: Mapped[int | None] = mapped_column(Integer, nullable=True)
    meal_time: Mapped[datetime] = mapped_column(UTCDateTime(), default=_utcnow, index=True)


class DailyGoal(OwnedMixin, Base):
    __tablename__ = "daily_goals"
    __table_args__ = (UniqueConstraint("user_id", "goal_date", name="uq_daily_goals_user_date"),)
    writable = ("goal_date", "calorie_goal", "water_goal", "exercise_goal")
    readonly = ("created_at", "updated_at")

    goal_date: Mapped[date] = mapped_column(Date)
    calorie_goal: Mapped[int | None] = mapped_column(Integer, nullable=True)
    water_goal: Mapped[int] = mapped_column(Integer, default=8)
    exercise_goal: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=_utcnow, onupdate=_utcnow)
