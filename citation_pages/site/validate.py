"""Pass/fail parse check for generated HTML."""

from __future__ import annotations

import logging

from lxml import etree, html as lxml_html

logger = logging.getLogger(__name__)


def validate_html(markup: str) -> bool:
    """Return True when ``markup`` parses as an HTML document."""

    try:
        lxml_html.document_fromstring(markup)
    except (etree.ParserError, ValueError) as exc:
        logger.error("Generated HTML could not be parsed: %s", exc)
        return False
    return True
