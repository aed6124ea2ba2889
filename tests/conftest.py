"""Shared fixtures for siteprofile tests.

All fixtures are in-memory; no network or file I/O beyond tmp_path.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to path so tests can import siteprofile without installing
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def organization_record():
    """A fully populated Organization JSON-LD record."""
    return {
        "@context": "https://schema.org",
        "@type": "Organization",
        "name": "Acme Logistics",
        "url": "https://www.acme-logistics.com/",
        "description": "Acme moves freight across North America.",
        "slogan": "Freight, handled",
        "contactPoint": {
            "@type": "ContactPoint",
            "email": "info@acme-logistics.com",
            "telephone": "+1-555-123-4567",
        },
        "address": {
            "@type": "PostalAddress",
            "streetAddress": "1 Main St",
            "addressLocality": "Springfield",
            "addressRegion": "IL",
            "postalCode": "62701",
            "addressCountry": "US",
        },
        "sameAs": [
            "https://facebook.com/acme",
            "https://www.linkedin.com/company/acme",
            "https://example.org/not-social",
        ],
    }


@pytest.fixture
def sample_json_ld(organization_record):
    """Organization plus offer catalog, products and team in separate records."""
    return [
        organization_record,
        {
            "@type": "Organization",
            "hasOfferCatalog": {
                "@type": "OfferCatalog",
                "itemListElement": [
                    {"@type": "Offer", "itemOffered": {"@type": "Service", "name": "Freight Consulting"}},
                    {"@type": "Offer", "itemOffered": {"@type": "Service", "name": "Pricing Plans"}},
                    {"@type": "Offer", "itemOffered": {"@type": "Service", "name": "Warehousing"}},
                ],
            },
            "makesOffer": [
                {"@type": "Offer", "itemOffered": {"@type": "Product", "name": "Route Planner"}},
                {"@type": "Offer", "name": "Fleet Tracker"},
            ],
            "employee": [
                {"@type": "Person", "name": "Jane Doe", "jobTitle": "CEO"},
                {"@type": "Person", "name": "John Roe"},
            ],
        },
    ]


@pytest.fixture
def sample_meta_tags():
    return {
        "description": "Freight and logistics experts.",
        "og:site_name": "Acme Logistics Inc. | Home",
        "twitter:title": "Moving freight since 1999",
    }


@pytest.fixture
def sample_text():
    return (
        "Welcome to Acme Logistics. Our mission: To deliver excellence in logistics. "
        "Services: Freight Consulting, Customs Brokerage; Last-mile Delivery. "
        "Email jane.doe@gmail.com or contact@acme-logistics.com. Call (555) 123-4567."
    )


@pytest.fixture
def sample_html():
    return (
        "<html><body><nav><a href='/about'>About</a>"
        "<a href='https://developer.acme-logistics.com'>Developers</a></nav></body></html>"
    )


@pytest.fixture
def sample_bundle_dict(sample_html, sample_text, sample_meta_tags, sample_json_ld):
    """A bundle in the retrieval layer's camelCase shape."""
    return {
        "html": sample_html,
        "textContent": sample_text,
        "metaTags": sample_meta_tags,
        "jsonLd": sample_json_ld,
        "finalUrl": "https://www.acme-logistics.com/",
    }


@pytest.fixture
def sample_bundle(sample_bundle_dict):
    from siteprofile.models import ContentBundle

    return ContentBundle.model_validate(sample_bundle_dict)


@pytest.fixture
def empty_bundle():
    from siteprofile.models import ContentBundle

    return ContentBundle(final_url="https://empty.example.com/")


@pytest.fixture
def default_config():
    from siteprofile.config import ExtractionConfig

    return ExtractionConfig()
