"""Random human-readable clauses used to vary citation fragments."""

from __future__ import annotations

import random
from typing import Callable, Sequence

from faker import Faker

DEFAULT_LOCALE = "fr_FR"


class PhraseSource:
    """Draws attribution and insertion clauses from a seeded Faker instance."""

    def __init__(self, rng: random.Random | None = None, locale: str = DEFAULT_LOCALE):
        self.rng = rng or random.Random()
        self.fake = Faker(locale)
        self.fake.seed_instance(self.rng.getrandbits(32))

    # ------------------------------------------------------------------
    def attribution(self) -> str:
        """Return one of five attribution clauses, one of which is empty."""

        templates: Sequence[Callable[[], str]] = (
            lambda: f"», selon {self.fake.name()}",
            lambda: f"», rappelle {self.fake.last_name()}",
            lambda: f"», souligne {self.fake.first_name()}",
            lambda: f"», {self.fake.catch_phrase()}",
            lambda: "",
        )
        return self.rng.choice(templates)()

    def insertion(self) -> str:
        options: Sequence[Callable[[], str]] = (
            lambda: "",
            lambda: self.fake.sentence(nb_words=2),
            lambda: " ".join(self.fake.words(nb=3)),
        )
        return self.rng.choice(options)()
