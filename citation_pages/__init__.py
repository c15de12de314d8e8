"""Daily static citation pages with a persisted uniqueness registry."""

__version__ = "0.1.0"
