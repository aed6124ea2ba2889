"""
Generation payload - flattens a final profile into the string fields the
external document generator consumes.

Every value is a plain string: lists become numbered lines, the contact
record becomes "Label: value" lines, and missing sections get an explicit
"not available" sentence so the generator skips them instead of inventing
content.
"""

from typing import Any, Optional
from urllib.parse import urlparse

from ..constants import PLACEHOLDER_COMPANY_NAME, PLACEHOLDER_DESCRIPTION
from ..models.business_profile import BusinessProfile

DEFAULT_DOMAIN = "example.com"

# Fields the generator fills itself; passed through as prompts
TEMPLATE_HINTS = {
    "primary_audience": "{describe target audience}",
    "primary_offering": "{main product/service category}",
    "industry_type": "{industry}",
    "primary_service": "{main service}",
    "expertise_areas": "{list expertise areas}",
    "product_category": "{product category}",
    "integrations": "{list of integrations}",
}


def numbered_lines(items: list[str]) -> str:
    """
    Render items as a 1-based numbered list.

    Examples:
        >>> numbered_lines(["Consulting", "Support"])
        '1. Consulting\\n2. Support'
    """
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def infer_domain(schema_data: list[Any]) -> str:
    """
    Hostname of the first structured record's url, without a leading "www.".

    Args:
        schema_data: Raw JSON-LD records kept on the profile

    Returns:
        Bare hostname, or "example.com" when no usable URL is present
    """
    first = schema_data[0] if schema_data else None
    url = first.get("url") if isinstance(first, dict) else None
    if not isinstance(url, str):
        return DEFAULT_DOMAIN

    try:
        hostname = urlparse(url.strip()).hostname
    except ValueError:
        return DEFAULT_DOMAIN
    if not hostname:
        return DEFAULT_DOMAIN
    if hostname.startswith("www."):
        hostname = hostname[len("www.") :]
    return hostname


def format_contact_lines(profile: BusinessProfile) -> Optional[str]:
    contact = profile.contact_info
    lines = []
    if contact.email:
        lines.append(f"Email: {contact.email}")
    if contact.phone:
        lines.append(f"Phone: {contact.phone}")
    if contact.address:
        lines.append(f"Address: {contact.address}")
    for platform, url in contact.social_media.items():
        lines.append(f"{platform}: {url}")
    return "\n".join(lines) or None


def prepare_generation_fields(profile: BusinessProfile, include_template_hints: bool = False) -> dict[str, str]:
    """
    Convert a final profile into generator input fields.

    Args:
        profile: Finalized, scored profile that passed the quality gate
        include_template_hints: Also emit the {placeholder} prompts for
            template-specific sections

    Returns:
        Mapping of field name -> string value
    """
    fields = {
        "company_name": profile.company_name or PLACEHOLDER_COMPANY_NAME,
        "description": profile.description or PLACEHOLDER_DESCRIPTION,
        "tagline": profile.tagline or "",
        "mission": profile.mission or "",
        "services": numbered_lines(profile.services) or "Services information not available",
        "products": numbered_lines(profile.products) or "Products information not available",
        "contact_info": format_contact_lines(profile) or "Contact information not available",
        "team_info": "\n".join(profile.team_info) or "Team information not available",
        "api_docs": "API documentation available" if profile.api_docs else "API documentation not available",
        "domain": infer_domain(profile.schema_data),
        "business_type": profile.business_type.value if profile.business_type else "",
    }
    if include_template_hints:
        fields.update(TEMPLATE_HINTS)
    return fields
