"""Base fragment pool loading."""

from __future__ import annotations

from pathlib import Path

from .registry import read_json_list


def load_pool(path: str | Path) -> list[str]:
    """Return the fragment pool stored at ``path``.

    A missing or unreadable file yields an empty pool; non-string entries
    are skipped.
    """

    return [item for item in read_json_list(Path(path)) if isinstance(item, str)]
