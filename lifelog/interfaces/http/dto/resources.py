from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


def _as_utc(value: datetime) -> datetime:
    # Naive input is read as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class OwnedResourceDTO(BaseModel):
    # Ownership comes from the session, never from the body.
    model_config = ConfigDict(extra="ignore")


class JournalEntryDTO(OwnedResourceDTO):
    content: str = Field(min_length=1)


class IdeaDTO(OwnedResourceDTO):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    category: str = Field("general", min_length=1, max_length=64)


class NoteDTO(OwnedResourceDTO):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    category: str = Field("general", min_length=1, max_length=64)
    tags: str | None = Field(None, max_length=512)


class ReminderDTO(OwnedResourceDTO):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    reminder_date: UtcDateTime
    completed: bool = False


class EventDTO(OwnedResourceDTO):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    start_time: UtcDateTime
    end_time: UtcDateTime | None = None
    event_type: str = Field("meeting", min_length=1, max_length=32)

    @model_validator(mode="after")
    def _end_after_start(self) -> EventDTO:
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class MoodEntryDTO(OwnedResourceDTO):
    mood: str = Field(min_length=1, max_length=32)
    energy_level: int | None = Field(None, ge=1, le=10)
    notes: str | None = None
    stoic_quote: str | None = None


class PoemDTO(OwnedResourceDTO):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    language: str = Field("en", min_length=2, max_length=16)


class PoetryIdeaDTO(OwnedResourceDTO):
    idea: str = Field(min_length=1)
    inspiration: str | None = None


class WorkoutDTO(OwnedResourceDTO):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    target_date: date
    target_time: time | None = None
    recurring_type: Literal["none", "daily", "weekly", "custom"] = "none"
    # Comma-separated weekday names for custom plans, e.g. "monday,friday"
    recurring_days: str | None = Field(None, max_length=64)
    completed: bool = False
    completion_date: UtcDateTime | None = None
    duration: int | None = Field(None, ge=0)
    calories_burned: int | None = Field(None, ge=0)
    notes: str | None = None
    reminder_enabled: bool = True
    reminder_minutes: int = Field(15, ge=0, le=24 * 60)


class MealDTO(OwnedResourceDTO):
    meal_name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    calories: int | None = Field(None, ge=0)
    # Defaults to the time of logging
    meal_time: UtcDateTime | None = None


class DailyGoalDTO(OwnedResourceDTO):
    goal_date: date
    calorie_goal: int | None = Field(None, ge=0)
    water_goal: int = Field(8, ge=0, le=64)
    exercise_goal: str | None = None


class QuoteRequestDTO(BaseModel):
    # Missing or blank is answered like an unknown mood
    mood: str | None = Field(None, max_length=32)
