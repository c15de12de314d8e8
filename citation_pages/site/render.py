"""Jinja2 rendering of the daily page."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"
PAGE_TEMPLATE = "index.html"


class PageRenderer:
    def __init__(self, templates_dir: str | Path | None = None):
        self.templates_dir = Path(templates_dir or DEFAULT_TEMPLATES_DIR)
        self.env = Environment(loader=FileSystemLoader(str(self.templates_dir)), autoescape=True)

    def render(self, context: dict[str, Any], template_name: str = PAGE_TEMPLATE) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)
