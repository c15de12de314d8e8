"""CLI for building today's citation page, sitemap and robots file."""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import os
from pathlib import Path

import yaml

from citation_pages.data.phrases import DEFAULT_LOCALE
from citation_pages.data.registry import DEFAULT_LIMIT
from citation_pages.site.builder import (
    DEFAULT_SITE_LINK,
    DEFAULT_SITE_NAME,
    DEFAULT_STATIC_DIR,
    SiteConfig,
    SiteBuilder,
)
from citation_pages.site.render import DEFAULT_TEMPLATES_DIR

DEFAULT_COUNT = 4
INVALID_HTML_EXIT = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", type=Path, default=Path.cwd())
    parser.add_argument("--data-dir", type=Path, default=Path("data"))
    parser.add_argument("--output-dir", type=Path, default=Path("output"))
    parser.add_argument("--templates-dir", type=Path, default=DEFAULT_TEMPLATES_DIR)
    parser.add_argument("--static-dir", type=Path, default=DEFAULT_STATIC_DIR)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--locale", default=DEFAULT_LOCALE)
    parser.add_argument("--base-url", default=os.environ.get("SITE_BASE_URL"))
    parser.add_argument("--date", type=dt.date.fromisoformat, help="Override the output date (YYYY-MM-DD)")
    parser.add_argument("--config", type=Path, help="Optional YAML config overriding CLI flags")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = load_config(args.config)
    config = build_site_config(cfg, args)

    result = SiteBuilder(config).build()

    print(f"Generated site at {result.output_dir}")
    print(f"Title: {result.title}")
    print("Citations:")
    for citation in result.citations:
        print(f" - {citation.text}")
    print("Done.")
    return 0 if result.valid else INVALID_HTML_EXIT


def load_config(path: Path | None) -> dict:
    if not path:
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("Config file must define a YAML mapping")
    return data


def build_site_config(cfg: dict, args: argparse.Namespace) -> SiteConfig:
    seed = cfg.get("seed", args.seed)
    date = cfg.get("date", args.date)
    if isinstance(date, str):
        date = dt.date.fromisoformat(date)
    return SiteConfig(
        root=Path(cfg.get("root", args.root)),
        data_dir=Path(cfg.get("data_dir", args.data_dir)),
        output_dir=Path(cfg.get("output_dir", args.output_dir)),
        templates_dir=Path(cfg.get("templates_dir", args.templates_dir)),
        static_dir=Path(cfg.get("static_dir", args.static_dir)),
        count=int(cfg.get("count", args.count)),
        seed=int(seed) if seed is not None else None,
        locale=str(cfg.get("locale", args.locale)),
        base_url=cfg.get("base_url", args.base_url) or None,
        site_name=str(cfg.get("site_name", DEFAULT_SITE_NAME)),
        site_link=str(cfg.get("site_link", DEFAULT_SITE_LINK)),
        registry_limit=int(cfg.get("registry_limit", DEFAULT_LIMIT)),
        date=date,
    )


if __name__ == "__main__":
    raise SystemExit(main())
