"""
Meta tag extractor.

Meta tags are the page's own summary of itself: medium reliability, but
present on almost every site. Provides description, company name and tagline.
"""

import re
from typing import Mapping, Optional

from ..models.business_profile import BusinessProfile, ExtractionSource

# Priority-ordered key synonyms; first present value wins
DESCRIPTION_KEYS = ["description", "og:description", "twitter:description"]
TITLE_KEYS = ["og:site_name", "application-name", "title", "og:title"]
TAGLINE_KEY = "twitter:title"

_SEPARATOR_SUFFIX = re.compile(r"\s*[-|]\s*.*$")
_LEGAL_SUFFIX = re.compile(r"\s+(Inc|LLC|Ltd|Corporation|Corp)\.?$", re.IGNORECASE)


def clean_company_name(name: str) -> str:
    """
    Reduce a page title to a company name.

    Drops everything from the first hyphen or pipe separator, then a trailing
    legal-entity suffix, then surrounding whitespace.

    Examples:
        >>> clean_company_name("Acme Widgets Inc. | Home")
        'Acme Widgets'
        >>> clean_company_name("Globex Corporation")
        'Globex'
    """
    name = _SEPARATOR_SUFFIX.sub("", name)
    name = _LEGAL_SUFFIX.sub("", name)
    return name.strip()


def _first_present(meta_tags: Mapping[str, str], keys: list[str]) -> Optional[str]:
    for key in keys:
        value = meta_tags.get(key)
        if value:
            return value
    return None


class MetaSourceExtractor:
    """Builds a partial profile from a meta tag mapping."""

    source = ExtractionSource.META

    def extract(self, meta_tags: Optional[Mapping[str, str]]) -> BusinessProfile:
        """
        Extract a partial profile from meta tags.

        Args:
            meta_tags: Meta name/property -> content

        Returns:
            Partial BusinessProfile with description, company_name, tagline when found
        """
        meta_tags = meta_tags or {}
        profile = BusinessProfile()

        profile.description = _first_present(meta_tags, DESCRIPTION_KEYS)

        title = _first_present(meta_tags, TITLE_KEYS)
        if title:
            profile.company_name = clean_company_name(title) or None

        tagline = meta_tags.get(TAGLINE_KEY)
        if tagline and tagline != profile.company_name:
            profile.tagline = tagline

        return profile
