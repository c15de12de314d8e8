"""Build one dated output directory: page, sitemap, robots and static assets."""

from __future__ import annotations

from dataclasses import dataclass, field
import datetime as dt
import logging
from pathlib import Path
import random
import shutil
from typing import Sequence

from ..data.fragments import load_pool
from ..data.phrases import DEFAULT_LOCALE
from ..data.registry import DEFAULT_LIMIT, RegistryStore
from ..data.types import CitationVariant
from ..data.variations import CitationGenerator, GeneratorConfig
from .content import build_page_content, pick_palette
from .render import DEFAULT_TEMPLATES_DIR, PACKAGE_DIR, PageRenderer
from .sitemap import build_robots, build_sitemap
from .validate import validate_html

logger = logging.getLogger(__name__)

DEFAULT_SITE_NAME = "RMH France"
DEFAULT_SITE_LINK = "https://sites.google.com/view/rmh-france/home"
DEFAULT_STATIC_DIR = PACKAGE_DIR / "static"
CITATIONS_FILE = "citations.json"
REGISTRY_FILE = "used.json"


@dataclass
class SiteConfig:
    """Locations and knobs for a single site build.

    Relative directories are resolved against ``root``.
    """

    root: Path = field(default_factory=Path.cwd)
    data_dir: Path = Path("data")
    output_dir: Path = Path("output")
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    static_dir: Path = DEFAULT_STATIC_DIR
    count: int = 4
    seed: int | None = None
    locale: str = DEFAULT_LOCALE
    base_url: str | None = None
    site_name: str = DEFAULT_SITE_NAME
    site_link: str = DEFAULT_SITE_LINK
    registry_limit: int = DEFAULT_LIMIT
    date: dt.date | None = None

    def resolve(self, path: Path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else Path(self.root) / path

    @property
    def citations_path(self) -> Path:
        return self.resolve(self.data_dir) / CITATIONS_FILE

    @property
    def registry_path(self) -> Path:
        return self.resolve(self.data_dir) / REGISTRY_FILE

    @property
    def date_str(self) -> str:
        return (self.date or dt.date.today()).isoformat()


@dataclass(frozen=True)
class BuildResult:
    output_dir: Path
    title: str
    citations: Sequence[CitationVariant]
    valid: bool


class SiteBuilder:
    """Runs the generator against the persisted registry and writes the site."""

    def __init__(self, config: SiteConfig | None = None, rng: random.Random | None = None):
        self.config = config or SiteConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.store = RegistryStore(self.config.registry_path, limit=self.config.registry_limit)
        self.generator = CitationGenerator(GeneratorConfig(rng=self.rng, locale=self.config.locale))
        self.renderer = PageRenderer(self.config.resolve(self.config.templates_dir))

    # ------------------------------------------------------------------
    def build(self) -> BuildResult:
        cfg = self.config
        pool = load_pool(cfg.citations_path)
        registry = self.store.load()
        logger.info("Loaded %d fragments and %d known hashes", len(pool), len(registry))

        date_str = cfg.date_str
        out_dir = cfg.resolve(cfg.output_dir) / date_str
        out_dir.mkdir(parents=True, exist_ok=True)
        self._copy_static(out_dir)

        palette = pick_palette(self.rng)
        content = build_page_content(self.generator.phrases.fake, cfg.site_name, cfg.site_link)
        citations = self.generator.generate(pool, registry, cfg.count)
        if len(citations) < cfg.count:
            logger.warning("Only %d of %d requested citations were unique", len(citations), cfg.count)

        html = self.renderer.render(
            {
                "title": content.title,
                "description": content.description,
                "paragraphs": content.paragraphs,
                "citations": citations,
                "palette": palette,
                "site_link": cfg.site_link,
                "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(),
                "date_str": date_str,
            }
        )
        _write_text(out_dir / "index.html", html)
        _write_text(out_dir / "sitemap.xml", build_sitemap(date_str, cfg.base_url))
        _write_text(out_dir / "robots.txt", build_robots(date_str, cfg.base_url))

        valid = validate_html(html)
        self.store.save(registry)
        return BuildResult(output_dir=out_dir, title=content.title, citations=citations, valid=valid)

    def _copy_static(self, out_dir: Path) -> None:
        static_dir = self.config.resolve(self.config.static_dir)
        if not static_dir.is_dir():
            logger.debug("No static directory at %s", static_dir)
            return
        shutil.copytree(static_dir, out_dir / "static", dirs_exist_ok=True)


def _write_text(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")
