"""Tests for page content, rendering, sitemap/robots and HTML validation."""

import random

from faker import Faker
from lxml import etree

from citation_pages.data.types import CitationVariant
from citation_pages.site.content import PALETTES, build_page_content, pick_palette
from citation_pages.site.render import PageRenderer
from citation_pages.site.sitemap import SITEMAP_NS, build_robots, build_sitemap, url_for
from citation_pages.site.validate import validate_html


def test_url_for_without_base_is_root_relative():
    assert url_for(None, "2024-05-01/") == "/2024-05-01/"
    assert url_for("/", "2024-05-01/sitemap.xml") == "/2024-05-01/sitemap.xml"


def test_url_for_with_base_url():
    assert url_for("https://example.org", "2024-05-01/") == "https://example.org/2024-05-01/"
    assert url_for("https://example.org/site/", "2024-05-01/") == "https://example.org/site/2024-05-01/"


def test_sitemap_structure():
    xml = build_sitemap("2024-05-01", "https://example.org/")
    root = etree.fromstring(xml.encode("utf-8"))
    ns = {"sm": SITEMAP_NS}

    assert root.tag == f"{{{SITEMAP_NS}}}urlset"
    assert root.xpath("sm:url/sm:loc/text()", namespaces=ns) == ["https://example.org/2024-05-01/"]
    assert root.xpath("sm:url/sm:changefreq/text()", namespaces=ns) == ["weekly"]
    assert root.xpath("sm:url/sm:priority/text()", namespaces=ns) == ["0.7"]
    assert xml.startswith("<?xml")


def test_robots_points_at_dated_sitemap():
    assert build_robots("2024-05-01") == "User-agent: *\nAllow: /\nSitemap: /2024-05-01/sitemap.xml\n"
    assert build_robots("2024-05-01", "https://example.org").endswith(
        "Sitemap: https://example.org/2024-05-01/sitemap.xml\n"
    )


def test_validate_html():
    assert validate_html("<!DOCTYPE html><html><body><p>ok</p></body></html>")
    assert not validate_html("")


def test_pick_palette_returns_known_palette():
    rng = random.Random(1)
    for _ in range(10):
        assert pick_palette(rng) in [dict(p) for p in PALETTES]


def test_page_content_mentions_site():
    fake = Faker("fr_FR")
    fake.seed_instance(4)
    content = build_page_content(fake, "RMH France", "https://example.org/rmh")

    assert content.title.endswith(" — RMH France")
    assert content.description.endswith(" Visitez https://example.org/rmh pour plus d'informations.")
    assert len(content.paragraphs) == 2


def test_renderer_escapes_citation_text():
    citation = CitationVariant(text="<b>Citation</b> — ID abc", id="abc", hash="0123456789ab")
    html = PageRenderer().render(
        {
            "title": "Titre",
            "description": "Description",
            "paragraphs": ["Premier paragraphe"],
            "citations": [citation],
            "palette": dict(PALETTES[0]),
            "site_link": "https://example.org/rmh",
            "generated_at": "2024-05-01T00:00:00+00:00",
            "date_str": "2024-05-01",
        }
    )

    assert "&lt;b&gt;Citation&lt;/b&gt;" in html
    assert 'id="c-abc"' in html
    assert 'href="https://example.org/rmh"' in html
    assert "--primary: #0055A4" in html
    assert validate_html(html)
