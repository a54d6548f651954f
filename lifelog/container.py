# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from functools import cached_property

from pydantic import BaseModel

from lifelog.application.services.password_hashing import WerkzeugPasswordHasher
from lifelog.application.services.quotes import QuoteBook
from lifelog.application.services.session_tokens import JwtSessionTokenCodec
from lifelog.application.use_cases.resources.manage_owned import ManageOwnedResourceUseCase
from lifelog.application.use_cases.users.login_user import LoginUserUseCase
from lifelog.application.use_cases.users.register_user import RegisterUserUseCase
from lifelog.domain.users.repositories import PasswordHasher
from lifelog.infrastructure.db import Database
from lifelog.infrastructure.db.models import (
    DailyGoal,
    Event,
    Idea,
    JournalEntry,
    Meal,
    MoodEntry,
    Note,
    OwnedMixin,
    Poem,
    PoetryIdea,
    Reminder,
    Workout,
)
from lifelog.infrastructure.repositories import (
    SqlAlchemyAccountRepository,
    SqlAlchemyOwnedResourceRepository,
)
from lifelog.interfaces.http.controllers import (
    AuthController,
    MiscController,
    OwnedResourceController,
    QuotesController,
)
from lifelog.interfaces.http.dto.resources import (
    DailyGoalDTO,
    EventDTO,
    IdeaDTO,
    JournalEntryDTO,
    MealDTO,
    MoodEntryDTO,
    NoteDTO,
    PoemDTO,
    PoetryIdeaDTO,
    ReminderDTO,
    WorkoutDTO,
)
from lifelog.interfaces.http.guard import AccessGuard
from lifelog.shared.config import AppConfig


@dataclass(frozen=True, slots=True)
class ResourceKind:
    name: str
    url_prefix: str
    model: type[OwnedMixin]
    dto: type[BaseModel]


RESOURCE_KINDS: tuple[ResourceKind, ...] = (
    ResourceKind("journal", "/journal", JournalEntry, JournalEntryDTO),
    ResourceKind("ideas", "/ideas", Idea, IdeaDTO),
    ResourceKind("notes", "/notes", Note, NoteDTO),
    ResourceKind("reminders", "/reminders", Reminder, ReminderDTO),
    ResourceKind("events", "/events", Event, EventDTO),
    ResourceKind("mood", "/mood-entries", MoodEntry, MoodEntryDTO),
    ResourceKind("poetry", "/poetry", Poem, PoemDTO),
    ResourceKind("poetry_ideas", "/poetry-ideas", PoetryIdea, PoetryIdeaDTO),
    ResourceKind("workouts", "/workouts", Workout, WorkoutDTO),
    ResourceKind("meals", "/meals", Meal, MealDTO),
    ResourceKind("goals", "/goals", DailyGoal, DailyGoalDTO),
)


class Container:
    def __init__(
        self,
        config: AppConfig,
        *,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config
        self._password_hasher_override = password_hasher

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        if self._password_hasher_override is not None:
            return self._password_hasher_override
        security = self.config.security
        return WerkzeugPasswordHasher(
            security.password_hash_method, workers=security.hash_workers
        )

    @cached_property
    def session_tokens(self) -> JwtSessionTokenCodec:
        security = self.config.security
        return JwtSessionTokenCodec(
            security.jwt_secret.get_secret_value(),
            algorithm=security.jwt_algorithm,
            ttl=timedelta(seconds=security.token_ttl_seconds),
        )

    @cached_property
    def access_guard(self) -> AccessGuard:
        return AccessGuard(self.session_tokens)

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.database)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            accounts=self.account_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            accounts=self.account_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        security = self.config.security
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            rate_limit_enabled=security.enable_rate_limit,
            rate_limit_requests=security.rate_limit_requests,
            rate_limit_window=security.rate_limit_window,
        )

    @cached_property
    def resource_controllers(self) -> list[OwnedResourceController]:
        return [
            OwnedResourceController(
                name=kind.name,
                url_prefix=kind.url_prefix,
                dto=kind.dto,
                use_case=ManageOwnedResourceUseCase(
                    kind=kind.name,
                    records=SqlAlchemyOwnedResourceRepository(self.database, kind.model),
                ),
                guard=self.access_guard,
            )
            for kind in RESOURCE_KINDS
        ]

    @cached_property
    def quotes_controller(self) -> QuotesController:
        return QuotesController(quotes=QuoteBook())

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)

    def close(self) -> None:
        hasher = self.__dict__.get("password_hasher")
        if isinstance(hasher, WerkzeugPasswordHasher):
            hasher.close()
        if "database" in self.__dict__:
            self.database.dispose()
