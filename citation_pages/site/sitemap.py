"""sitemap.xml and robots.txt assembly."""

from __future__ import annotations

import posixpath
from urllib.parse import urljoin

from lxml import etree

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def url_for(base_url: str | None, path: str) -> str:
    """Resolve ``path`` against ``base_url``, or root-relative when unset."""

    if not base_url or base_url == "/":
        return posixpath.join("/", path)
    return urljoin(base_url.rstrip("/") + "/", path.lstrip("/"))


def build_sitemap(date_str: str, base_url: str | None = None) -> str:
    urlset = etree.Element(_q("urlset"), nsmap={None: SITEMAP_NS})
    url = etree.SubElement(urlset, _q("url"))
    etree.SubElement(url, _q("loc")).text = url_for(base_url, f"{date_str}/")
    etree.SubElement(url, _q("changefreq")).text = "weekly"
    etree.SubElement(url, _q("priority")).text = "0.7"
    return etree.tostring(urlset, xml_declaration=True, encoding="UTF-8", pretty_print=True).decode("utf-8")


def build_robots(date_str: str, base_url: str | None = None) -> str:
    sitemap_url = url_for(base_url, posixpath.join(date_str, "sitemap.xml"))
    return f"User-agent: *\nAllow: /\nSitemap: {sitemap_url}\n"


def _q(tag: str) -> str:
    return f"{{{SITEMAP_NS}}}{tag}"
