"""
Pattern-based extractor for visible text and markup.

This module extracts fallback signals using pattern matching:
- Contact email (general mailboxes only, never consumer webmail)
- Phone number (first match, as written)
- Services list following a trigger phrase
- Mission statement following a trigger phrase
- Presence of API / developer documentation links

Text is the least reliable source, so every rule favors precision: narrow
trigger phrases, first match only, and no guessing when nothing matches.
"""

import logging
import re
from typing import Iterable, Optional

from bs4 import BeautifulSoup

from ..constants import (
    API_DOC_MARKERS,
    CONTACT_EMAIL_MARKERS,
    EMAIL_PATTERN,
    MISSION_PATTERN,
    PHONE_PATTERN,
    SERVICES_PATTERN,
    WEBMAIL_DOMAINS,
)
from ..models.business_profile import BusinessProfile, ExtractionSource
from ..validators.policy_filter import PolicyFilter

logger = logging.getLogger(__name__)


class TextSourceExtractor:
    """
    Regex-based extractor for page text and markup.

    Provides low-confidence extraction for:
    - Email: general contact addresses (contact@, info@, support@, sales@ ...)
    - Phone: US-style numbers
    - Services: "services" / "what we do" / "our solutions" up to the next period
    - Mission: "our mission" / "mission statement" up to the next period
    - API docs: any link whose target or label mentions api/developer/docs
    """

    source = ExtractionSource.TEXT

    EMAIL_RE = re.compile(EMAIL_PATTERN)
    PHONE_RE = re.compile(PHONE_PATTERN)
    SERVICES_RE = re.compile(SERVICES_PATTERN, re.IGNORECASE)
    MISSION_RE = re.compile(MISSION_PATTERN, re.IGNORECASE)

    def __init__(
        self,
        policy: Optional[PolicyFilter] = None,
        webmail_domains: Optional[Iterable[str]] = None,
        contact_email_markers: Optional[Iterable[str]] = None,
        api_doc_markers: Optional[Iterable[str]] = None,
    ):
        self.policy = policy or PolicyFilter()
        self.webmail_domains = [d.lower() for d in (WEBMAIL_DOMAINS if webmail_domains is None else webmail_domains)]
        self.contact_email_markers = [
            m.lower() for m in (CONTACT_EMAIL_MARKERS if contact_email_markers is None else contact_email_markers)
        ]
        self.api_doc_markers = [m.lower() for m in (API_DOC_MARKERS if api_doc_markers is None else api_doc_markers)]

    def extract(self, text: Optional[str], html: Optional[str]) -> BusinessProfile:
        """
        Extract a partial profile from visible text and raw markup.

        Args:
            text: Visible page text
            html: Raw page markup (only used for link inspection)

        Returns:
            Partial BusinessProfile; fields with no match stay unset
        """
        text = text or ""
        profile = BusinessProfile()

        profile.contact_info.email = self.extract_email(text)
        profile.contact_info.phone = self.extract_phone(text)
        profile.services = self.extract_services(text)
        profile.mission = self.extract_mission(text)
        if self.has_api_docs(html or ""):
            profile.api_docs = True

        return profile

    def extract_email(self, text: str) -> Optional[str]:
        """
        Find the first general-contact email in text.

        Consumer webmail addresses are excluded, and the local part must
        contain one of the contact markers.

        Examples:
            >>> TextSourceExtractor().extract_email("Write to jane@gmail.com or info@acme.com")
            'info@acme.com'
        """
        for email in self.EMAIL_RE.findall(text):
            lowered = email.lower()
            local_part, _, domain = lowered.partition("@")
            if any(domain.startswith(webmail) for webmail in self.webmail_domains):
                continue
            if any(marker in local_part for marker in self.contact_email_markers):
                return email
        return None

    def extract_phone(self, text: str) -> Optional[str]:
        """Return the first phone-shaped match, unnormalized."""
        match = self.PHONE_RE.search(text)
        return match.group(0) if match else None

    def extract_services(self, text: str) -> list[str]:
        """
        Split the sentence after a services trigger phrase into entries.

        Args:
            text: Visible page text

        Returns:
            Policy-filtered service names, possibly empty
        """
        match = self.SERVICES_RE.search(text)
        if not match:
            return []
        candidates = [part.strip().rstrip(".").strip() for part in re.split(r"[,;]", match.group(1))]
        return self.policy.filter_items(candidates)

    def extract_mission(self, text: str) -> Optional[str]:
        """Return the sentence after a mission trigger phrase, trailing period kept."""
        match = self.MISSION_RE.search(text)
        if not match:
            return None
        return match.group(1).strip() or None

    def has_api_docs(self, html: str) -> bool:
        """
        Check whether any link points at API or developer documentation.

        Only presence is reported; the link itself is not kept.
        """
        if not html:
            return False
        soup = BeautifulSoup(html, "html.parser")
        for anchor in soup.find_all("a"):
            target = (anchor.get("href") or "").lower()
            label = anchor.get_text(" ", strip=True).lower()
            if any(marker in target or marker in label for marker in self.api_doc_markers):
                logger.debug(f"API documentation link found: {target or label}")
                return True
        return False
