"""Business Classifier - Deterministic keyword scoring for business archetypes.

Pure Python (no LLM). Scans the profile's text corpus for archetype keywords
and picks the archetype with the most distinct keyword hits.

Archetypes:
- CATALOG: marketplaces, directories, listings, databases
- SPECIALIST: agencies, consultants, professional services
- ECOSYSTEM: integrated suites, all-in-one solutions

Ties resolve catalog > ecosystem > specialist.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from ..constants import BUSINESS_TYPE_KEYWORDS
from ..models.business_profile import BusinessProfile, BusinessType


def build_text_corpus(profile: BusinessProfile) -> str:
    """Build lowercase searchable text from name, description, tagline, services and products."""
    parts = [
        profile.company_name or "",
        profile.description or "",
        profile.tagline or "",
        *profile.services,
        *profile.products,
    ]
    return " ".join(parts).lower()


def count_keyword_hits(text: str, keywords: Sequence[str]) -> int:
    """Count distinct keywords present as substrings; repeats count once."""
    text_lower = text.lower()
    return sum(1 for kw in keywords if kw in text_lower)


class BusinessClassifier:
    """Assigns one BusinessType to a profile from keyword evidence."""

    def __init__(self, keywords: Mapping[str, Sequence[str]] | None = None):
        source = BUSINESS_TYPE_KEYWORDS if keywords is None else keywords
        self.keywords = {k: [kw.lower() for kw in v] for k, v in source.items()}

    def score(self, text: str) -> dict[BusinessType, int]:
        """Keyword hit count per archetype for a text corpus."""
        return {
            business_type: count_keyword_hits(text, self.keywords.get(business_type.value, []))
            for business_type in BusinessType
        }

    def classify_text(self, text: str) -> BusinessType:
        """
        Pick the archetype with the most keyword hits in text.

        Ties break catalog > ecosystem > specialist: catalog wins when its
        count is >= both others, else ecosystem wins when >= specialist.
        Text with no hits at all is therefore classified as catalog.
        """
        scores = self.score(text)
        catalog = scores[BusinessType.CATALOG]
        specialist = scores[BusinessType.SPECIALIST]
        ecosystem = scores[BusinessType.ECOSYSTEM]

        if catalog >= specialist and catalog >= ecosystem:
            return BusinessType.CATALOG
        if ecosystem >= specialist:
            return BusinessType.ECOSYSTEM
        return BusinessType.SPECIALIST

    def classify(self, profile: BusinessProfile) -> BusinessType:
        """
        Classify a merged profile.

        Args:
            profile: Merged (and policy-filtered) profile

        Returns:
            The winning BusinessType
        """
        return self.classify_text(build_text_corpus(profile))
