# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from datetime import date

DAILY_QUOTES: tuple[str, ...] = (
    "The happiness of your life depends upon the quality of your thoughts. — Marcus Aurelius",
    "We suffer more often in imagination than in reality. — Seneca",
    "It's not what happens to you, but how you react to it that matters. — Epictetus",
    "Waste no more time arguing about what a good man should be. Be one. — Marcus Aurelius",
    "Luck is what happens when preparation meets opportunity. — Seneca",
    "First say to yourself what you would be; and then do what you have to do. — Epictetus",
    "The best revenge is not to be like your enemy. — Marcus Aurelius",
    "While we are postponing, life speeds by. — Seneca",
    "No man is free who is not master of himself. — Epictetus",
    "Very little is needed to make a happy life; it is all within yourself. — Marcus Aurelius",
    "Difficulties strengthen the mind, as labor does the body. — Seneca",
    "Wealth consists not in having great possessions, but in having few wants. — Epictetus",
)

MOOD_QUOTES: Mapping[str, tuple[str, ...]] = {
    "happy": (
        "Happiness and freedom begin with understanding: some things are within our "
        "control, some are not. — Epictetus",
    ),
    "sad": (
        "You have power over your mind — not outside events. Realize this, and you "
        "will find strength. — Marcus Aurelius",
    ),
    "anxious": (
        "Today I escaped anxiety. Or no, I discarded it, because it was within me. "
        "— Marcus Aurelius",
    ),
    "angry": (
        "How much more grievous are the consequences of anger than the causes of it. "
        "— Marcus Aurelius",
    ),
    "calm": (
        "If you are pained by external things, it is not they that disturb you, but "
        "your own judgment of them. — Marcus Aurelius",
    ),
}

FALLBACK_QUOTE = (
    "No quote found for that mood, but remember: all is opinion. — Marcus Aurelius"
)


class QuoteBook:
    def __init__(
        self,
        daily: Sequence[str] = DAILY_QUOTES,
        by_mood: Mapping[str, Sequence[str]] = MOOD_QUOTES,
        *,
        rng: random.Random | None = None,
    ) -> None:
        if not daily:
            raise ValueError("daily quote list must not be empty")
        self._daily = tuple(daily)
        self._by_mood = {mood.lower(): tuple(quotes) for mood, quotes in by_mood.items()}
        self._rng = rng or random.Random()

    def daily(self, day: date) -> str:
        """Same calendar day, same quote."""
        day_of_year = day.timetuple().tm_yday
        return self._daily[(day_of_year - 1) % len(self._daily)]

    def for_mood(self, mood: str) -> str | None:
        quotes = self._by_mood.get(mood.strip().lower())
        if not quotes:
            return None
        return self._rng.choice(quotes)
