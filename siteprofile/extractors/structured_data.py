"""
Structured data extractor for JSON-LD records.

JSON-LD is the most reliable source: it is written for machines. Records are
polymorphic (any shape can claim any schema.org type), so each record is
dispatched on its @type plus the nested fields it carries:

- Organization / Corporation / LocalBusiness: name, description, slogan,
  contactPoint, address, sameAs
- Product, or any record with makesOffer: product names
- Service, or any record with hasOfferCatalog: service names
- Any record with employee / founder: team entries

Unrecognized types with none of those fields are a no-op. A record missing a
field contributes nothing for that field; it never stops the batch.
"""

import logging
from typing import Any, Callable, Iterable, Mapping, Optional

from ..constants import DEFAULT_TEAM_ROLE, SOCIAL_PLATFORMS
from ..models.business_profile import BusinessProfile, ExtractionSource
from ..validators.policy_filter import PolicyFilter

logger = logging.getLogger(__name__)

# Address sub-fields in output order
ADDRESS_FIELDS = ["streetAddress", "addressLocality", "addressRegion", "postalCode", "addressCountry"]


def format_address(address: Any) -> Optional[str]:
    """
    Flatten a PostalAddress into "street, locality, region, postal code, country".

    Absent sub-fields are skipped. A plain-string address is returned as-is.

    Args:
        address: PostalAddress mapping, a string, or a list of either

    Returns:
        Formatted address, or None if nothing usable was present

    Examples:
        >>> format_address({"streetAddress": "1 Main St", "addressLocality": "Springfield", "postalCode": "62701"})
        '1 Main St, Springfield, 62701'
    """
    if isinstance(address, list):
        address = address[0] if address else None
    if isinstance(address, str):
        return address.strip() or None
    if not isinstance(address, Mapping):
        return None

    parts = []
    for key in ADDRESS_FIELDS:
        value = address.get(key)
        # addressCountry may itself be a Country record
        if isinstance(value, Mapping):
            value = value.get("name")
        if value is not None and str(value).strip():
            parts.append(str(value).strip())
    return ", ".join(parts) or None


def identify_social_platform(url: str, platforms: Mapping[str, str]) -> Optional[str]:
    """
    Map a profile URL to a platform name by domain substring.

    Args:
        url: External profile URL
        platforms: Domain substring -> platform name, checked in order

    Returns:
        Platform name, or None if the URL matches no known platform
    """
    for domain, platform in platforms.items():
        if domain in url:
            return platform
    return None


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _text(value: Any) -> Optional[str]:
    """Return a stripped string, or None for anything else."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _item_name(entry: Any) -> Optional[str]:
    """Name of a catalog/offer entry: its own name, else the wrapped item's."""
    if isinstance(entry, str):
        return _text(entry)
    if not isinstance(entry, Mapping):
        return None
    name = _text(entry.get("name"))
    if name:
        return name
    for wrapper in ("itemOffered", "item"):
        inner = entry.get(wrapper)
        if isinstance(inner, Mapping):
            name = _text(inner.get("name"))
            if name:
                return name
    return None


class StructuredSourceExtractor:
    """
    Builds a partial profile from JSON-LD records.

    Later records override earlier ones for scalar fields; list fields
    accumulate in record order.
    """

    source = ExtractionSource.STRUCTURED

    ORGANIZATION_TYPES = {"Organization", "Corporation", "LocalBusiness"}

    def __init__(
        self,
        policy: Optional[PolicyFilter] = None,
        social_platforms: Optional[Mapping[str, str]] = None,
        default_team_role: str = DEFAULT_TEAM_ROLE,
    ):
        self.policy = policy or PolicyFilter()
        self.social_platforms = dict(SOCIAL_PLATFORMS if social_platforms is None else social_platforms)
        self.default_team_role = default_team_role

        # @type -> handlers
        self._type_handlers: dict[str, list[Callable[[Mapping[str, Any], BusinessProfile], None]]] = {
            **{t: [self._extract_organization] for t in self.ORGANIZATION_TYPES},
            "Product": [self._extract_products],
            "Service": [self._extract_services],
        }
        # nested field -> handler, applied whatever the @type
        self._shape_handlers: list[tuple[str, Callable[[Mapping[str, Any], BusinessProfile], None]]] = [
            ("makesOffer", self._extract_products),
            ("hasOfferCatalog", self._extract_services),
            ("employee", self._extract_team),
            ("founder", self._extract_team),
        ]

    def extract(self, records: Optional[Iterable[Any]]) -> BusinessProfile:
        """
        Extract a partial profile from JSON-LD records.

        Args:
            records: Parsed JSON-LD records in page order

        Returns:
            Partial BusinessProfile; schema_data holds the input verbatim
        """
        raw_records = list(records or [])
        profile = BusinessProfile(schema_data=raw_records)

        for record in self._flatten(raw_records):
            if not isinstance(record, Mapping):
                logger.debug(f"Skipping non-object JSON-LD record: {type(record).__name__}")
                continue
            for handler in self._handlers_for(record):
                handler(record, profile)

        return profile

    def _flatten(self, records: list[Any]) -> list[Any]:
        """Expand @graph containers into their member records."""
        flat = []
        for record in records:
            if isinstance(record, Mapping) and isinstance(record.get("@graph"), list):
                flat.extend(record["@graph"])
            else:
                flat.append(record)
        return flat

    def _handlers_for(self, record: Mapping[str, Any]) -> list[Callable[[Mapping[str, Any], BusinessProfile], None]]:
        """Resolve a record's handlers from its @type and nested fields, without duplicates."""
        handlers: list[Callable[[Mapping[str, Any], BusinessProfile], None]] = []
        for record_type in _as_list(record.get("@type")):
            if not isinstance(record_type, str):
                continue
            for handler in self._type_handlers.get(record_type, []):
                if handler not in handlers:
                    handlers.append(handler)
        for field_name, handler in self._shape_handlers:
            if record.get(field_name) and handler not in handlers:
                handlers.append(handler)
        return handlers

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _extract_organization(self, record: Mapping[str, Any], profile: BusinessProfile) -> None:
        profile.company_name = _text(record.get("name")) or profile.company_name
        profile.description = _text(record.get("description")) or profile.description
        profile.tagline = _text(record.get("slogan")) or profile.tagline

        contact = profile.contact_info

        contact_points = _as_list(record.get("contactPoint"))
        if contact_points and isinstance(contact_points[0], Mapping):
            point = contact_points[0]
            contact.email = _text(point.get("email")) or contact.email
            contact.phone = _text(point.get("telephone")) or contact.phone

        if record.get("address"):
            address = format_address(record["address"])
            if address:
                contact.address = address

        for url in _as_list(record.get("sameAs")):
            if not isinstance(url, str):
                continue
            platform = identify_social_platform(url, self.social_platforms)
            if platform:
                contact.social_media[platform] = url

    def _extract_products(self, record: Mapping[str, Any], profile: BusinessProfile) -> None:
        offers = _as_list(record.get("makesOffer"))
        if not offers and "Product" in _as_list(record.get("@type")):
            offers = [record]
        names = [_item_name(o) for o in offers]
        profile.products.extend(self.policy.filter_items(n for n in names if n))

    def _extract_services(self, record: Mapping[str, Any], profile: BusinessProfile) -> None:
        catalog = record.get("hasOfferCatalog")
        if isinstance(catalog, Mapping):
            entries = _as_list(catalog.get("itemListElement"))
        elif "Service" in _as_list(record.get("@type")):
            entries = [record]
        else:
            entries = []
        names = [_item_name(e) for e in entries]
        profile.services.extend(self.policy.filter_items(n for n in names if n))

    def _extract_team(self, record: Mapping[str, Any], profile: BusinessProfile) -> None:
        people = _as_list(record.get("employee")) + _as_list(record.get("founder"))
        for person in people:
            if not isinstance(person, Mapping):
                continue
            name = _text(person.get("name"))
            if not name:
                continue
            role = _text(person.get("jobTitle")) or _text(person.get("role")) or self.default_team_role
            profile.team_info.append(f"{name} — {role}")
