"""
Build a ContentBundle from raw markup.

The retrieval layer normally hands over a ready bundle. This helper covers
callers that already hold a page's HTML (saved fixtures, offline archives)
and need the same four views of it: markup, visible text, meta tags and
JSON-LD records. No network I/O happens here.
"""

import json
import logging
from typing import Any

from bs4 import BeautifulSoup

from ..models.content_bundle import ContentBundle

logger = logging.getLogger(__name__)

# Elements whose contents never count as visible text
NON_VISIBLE_TAGS = ["script", "style", "noscript", "iframe"]


def extract_meta_tags(soup: BeautifulSoup) -> dict[str, str]:
    """
    Collect <meta name|property=... content=...> pairs.

    Keys are unique; the first occurrence of a key wins. A <title> element
    is recorded under "title" when no meta tag already uses that key.
    """
    meta_tags: dict[str, str] = {}
    for tag in soup.find_all("meta"):
        key = tag.get("name") or tag.get("property")
        content = tag.get("content")
        if not key or content is None:
            continue
        meta_tags.setdefault(key.strip(), content.strip())

    if soup.title and soup.title.string and "title" not in meta_tags:
        meta_tags["title"] = soup.title.string.strip()
    return meta_tags


def extract_json_ld(soup: BeautifulSoup) -> list[Any]:
    """
    Parse every <script type="application/ld+json"> block in page order.

    Malformed blocks are skipped. A top-level array contributes each of its
    members as a separate record.
    """
    records: list[Any] = []
    for script in soup.find_all("script", attrs={"type": "application/ld+json"}):
        raw = script.string or script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
            continue
        if isinstance(data, list):
            records.extend(data)
        else:
            records.append(data)
    return records


def extract_visible_text(soup: BeautifulSoup) -> str:
    """Visible text with non-visible elements removed and whitespace collapsed."""
    for tag in soup.find_all(NON_VISIBLE_TAGS):
        tag.decompose()
    body = soup.body or soup
    return " ".join(body.get_text(" ").split())


def bundle_from_html(html: str, final_url: str) -> ContentBundle:
    """
    Parse raw markup into a ContentBundle.

    Args:
        html: Raw page markup
        final_url: URL the markup was served from (after redirects)

    Returns:
        ContentBundle with text, meta tags and JSON-LD derived from the markup
    """
    html = html or ""
    soup = BeautifulSoup(html, "html.parser")

    # JSON-LD must be read before visible-text extraction strips <script> tags
    meta_tags = extract_meta_tags(soup)
    json_ld = extract_json_ld(soup)
    text_content = extract_visible_text(soup)

    return ContentBundle(
        html=html,
        text_content=text_content,
        meta_tags=meta_tags,
        json_ld=json_ld,
        final_url=final_url,
    )
