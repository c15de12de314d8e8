"""Citation generation and uniqueness registry."""

from .fragments import load_pool
from .registry import HashRegistry, RegistryStore
from .types import CitationVariant
from .variations import CitationGenerator, GeneratorConfig, fingerprint

__all__ = [
    "CitationGenerator",
    "CitationVariant",
    "GeneratorConfig",
    "HashRegistry",
    "RegistryStore",
    "fingerprint",
    "load_pool",
]
