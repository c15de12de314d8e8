"""Unique citation variants built from a pool of base fragments."""

from __future__ import annotations

from dataclasses import dataclass, field
import hashlib
import logging
import random
from typing import MutableSet, Sequence
import uuid

from .phrases import DEFAULT_LOCALE, PhraseSource
from .types import CitationVariant

logger = logging.getLogger(__name__)

FINGERPRINT_LENGTH = 12
ATTEMPTS_PER_FRAGMENT = 3
ID_SEPARATOR = " — ID "


@dataclass
class GeneratorConfig:
    """Configuration knobs for the citation generator."""

    rng: random.Random = field(default_factory=random.Random)
    fingerprint_length: int = FINGERPRINT_LENGTH
    attempts_per_fragment: int = ATTEMPTS_PER_FRAGMENT
    locale: str = DEFAULT_LOCALE


def fingerprint(text: str, length: int = FINGERPRINT_LENGTH) -> str:
    """Return the truncated SHA-256 hex digest of ``text``."""

    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:length]


class CitationGenerator:
    """Generates hash-unique textual variations of base fragments."""

    def __init__(self, config: GeneratorConfig | None = None, phrases: PhraseSource | None = None):
        self.config = config or GeneratorConfig()
        self.rng = self.config.rng
        self.phrases = phrases or PhraseSource(rng=self.rng, locale=self.config.locale)

    # ------------------------------------------------------------------
    def generate(
        self,
        pool: Sequence[str],
        registry: MutableSet[str],
        count: int = 4,
    ) -> list[CitationVariant]:
        """Generate up to ``count`` variants whose hashes are absent from ``registry``.

        Accepted hashes are added to ``registry`` in place. At most
        ``len(pool) * attempts_per_fragment`` attempts are made, so the
        result may be shorter than requested.
        """

        chosen: list[CitationVariant] = []
        if not pool:
            return chosen

        budget = len(pool) * self.config.attempts_per_fragment
        attempts = 0
        while len(chosen) < count and attempts < budget:
            attempts += 1
            variant = self._compose(self.rng.choice(pool).strip())
            if variant.hash in registry:
                logger.debug("Discarding duplicate citation hash %s", variant.hash)
                continue
            registry.add(variant.hash)
            chosen.append(variant)

        if len(chosen) < count:
            logger.debug("Attempt budget of %d exhausted with %d/%d citations", budget, len(chosen), count)
        return chosen

    # ------------------------------------------------------------------
    def _compose(self, base: str) -> CitationVariant:
        attribution = self.phrases.attribution()
        insertion = self.phrases.insertion()
        short_id = self._short_id()
        if insertion:
            text = f"{base} {insertion} {attribution}{ID_SEPARATOR}{short_id}"
        else:
            text = f"{base} {attribution}{ID_SEPARATOR}{short_id}"
        return CitationVariant(text=text, id=short_id, hash=self._fingerprint(text))

    def _short_id(self) -> str:
        token = uuid.UUID(int=self.rng.getrandbits(128), version=4)
        return self._fingerprint(str(token))

    def _fingerprint(self, text: str) -> str:
        return fingerprint(text, self.config.fingerprint_length)
