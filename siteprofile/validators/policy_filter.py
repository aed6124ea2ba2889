"""
Content Policy Filter.

Certain fragments must never reach the generated document: anything about
pricing or payment, and anything that looks like a credential or confidential
material. Extractors pre-filter what they find; the pipeline filters the
merged profile once more so the guarantee holds regardless of which
extractor produced an item.

This is a BLOCKING filter: matching items are dropped, not flagged.

Usage:
    from siteprofile.validators.policy_filter import PolicyFilter

    policy = PolicyFilter(["pricing", "password"])
    policy.is_excluded("Pricing Plans")        # True
    policy.filter_items(["Consulting", "Pricing Plans", "Support"])
    # Returns: ["Consulting", "Support"]
"""

import logging
from typing import Iterable, Optional

from ..constants import EXCLUDED_CONTENT
from ..models.business_profile import BusinessProfile

logger = logging.getLogger(__name__)


class PolicyFilter:
    """Case-insensitive substring denylist applied to services and products."""

    def __init__(self, excluded_terms: Optional[Iterable[str]] = None):
        terms = EXCLUDED_CONTENT if excluded_terms is None else excluded_terms
        self.excluded_terms = [t.lower() for t in terms if t]

    def is_excluded(self, text: str) -> bool:
        """
        Check if text contains any denylisted term.

        Args:
            text: Candidate service/product string

        Returns:
            True if any term appears as a case-insensitive substring
        """
        lower_text = text.lower()
        return any(term in lower_text for term in self.excluded_terms)

    def filter_items(self, items: Iterable[str]) -> list[str]:
        """
        Drop empty and denylisted entries, preserving order.

        Args:
            items: Candidate strings

        Returns:
            Surviving strings in their original order
        """
        kept = []
        for item in items:
            if not item or not item.strip():
                continue
            if self.is_excluded(item):
                logger.debug(f"Dropped excluded content: {item!r}")
                continue
            kept.append(item)
        return kept

    def apply(self, profile: BusinessProfile) -> BusinessProfile:
        """Filter the profile's services and products in place and return it."""
        services_before = len(profile.services)
        products_before = len(profile.products)

        profile.services = self.filter_items(profile.services)
        profile.products = self.filter_items(profile.products)

        dropped = (services_before - len(profile.services)) + (products_before - len(profile.products))
        if dropped:
            logger.debug(f"Policy filter removed {dropped} item(s) from merged profile")
        return profile
