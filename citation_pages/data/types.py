"""Shared type helpers for citation generation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CitationVariant:
    """A single generated citation and its uniqueness fingerprint."""

    text: str
    id: str
    hash: str
