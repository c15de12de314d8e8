"""Randomized page copy and palette selection."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Mapping, Sequence

from faker import Faker

PALETTES: Sequence[Mapping[str, str]] = (
    {"bg": "#ffffff", "primary": "#0055A4", "accent": "#EF4135"},
    {"bg": "#f8f9fa", "primary": "#2b2b2b", "accent": "#c1121f"},
    {"bg": "#fffaf0", "primary": "#1f4e79", "accent": "#e63946"},
)


@dataclass(frozen=True)
class PageContent:
    title: str
    description: str
    paragraphs: Sequence[str]


def pick_palette(rng: random.Random) -> dict[str, str]:
    return dict(rng.choice(PALETTES))


def build_page_content(fake: Faker, site_name: str, site_link: str) -> PageContent:
    """Draw a title, a description and body paragraphs from ``fake``."""

    title = f"{fake.catch_phrase()} — {site_name}"
    description = " ".join(fake.sentences(nb=2)) + f" Visitez {site_link} pour plus d'informations."
    paragraphs = (fake.paragraph(), fake.paragraph())
    return PageContent(title=title, description=description, paragraphs=paragraphs)
