"""Tests for pydantic models and profile finalization."""

import pytest
from pydantic import ValidationError
from siteprofile.models import BusinessProfile, BusinessType, ContactInfo, ContentBundle, ExtractionSource
from siteprofile.services.finalize import finalize_profile

# ─── ContentBundle ──────────────────────────────────────────────────────────


class TestContentBundle:
    """Input contract from the retrieval layer."""

    def test_aliases_and_names(self):
        by_alias = ContentBundle.model_validate({"textContent": "hi", "finalUrl": "https://acme.com"})
        by_name = ContentBundle(text_content="hi", final_url="https://acme.com")
        assert by_alias == by_name

    def test_frozen(self):
        bundle = ContentBundle(final_url="https://acme.com")
        with pytest.raises(ValidationError):
            bundle.html = "<p>changed</p>"

    @pytest.mark.parametrize("url", ["acme.com", "ftp://acme.com", "", "https://", "mailto:info@acme.com"])
    def test_rejects_bad_url(self, url):
        with pytest.raises(ValidationError):
            ContentBundle(final_url=url)

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/search?q=a,b",
            "https://example.com/page;jsessionid=1",
            "http://localhost:8080/",
            "https://example.com/it's",
            "https://example.com/sale!/*/$5",
            "HTTPS://Example.com",
        ],
    )
    def test_accepts_valid_url(self, url):
        """Any http(s) URL with a host is accepted, whatever its path characters."""
        assert ContentBundle(final_url=url).final_url == url


# ─── BusinessProfile ────────────────────────────────────────────────────────


class TestBusinessProfile:
    def test_partial_defaults(self):
        profile = BusinessProfile()
        assert profile.services == []
        assert profile.contact_info.is_empty()
        assert profile.business_type is None

    def test_quality_score_bounds(self):
        with pytest.raises(ValidationError):
            BusinessProfile(quality_score=101)

    def test_summary(self):
        profile = BusinessProfile(
            company_name="Acme",
            services=["A", "B"],
            contact_info=ContactInfo(email="info@acme.com"),
            business_type=BusinessType.ECOSYSTEM,
            quality_score=55,
        )
        assert profile.to_summary() == {
            "company_name": "Acme",
            "business_type": "ecosystem",
            "services": 2,
            "products": 0,
            "team_members": 0,
            "has_email": True,
            "quality_score": 55,
        }

    def test_source_reliability_order(self):
        ranked = sorted(ExtractionSource, key=lambda s: s.reliability, reverse=True)
        assert ranked == [ExtractionSource.STRUCTURED, ExtractionSource.META, ExtractionSource.TEXT]


# ─── finalize_profile ───────────────────────────────────────────────────────


class TestFinalizeProfile:
    """De-duplication and placeholders."""

    def test_placeholders_filled(self):
        final = finalize_profile(BusinessProfile())
        assert final.company_name == "Company Name"
        assert final.description == "No description available."

    def test_custom_placeholders(self):
        final = finalize_profile(BusinessProfile(), placeholder_company_name="?", placeholder_description="-")
        assert (final.company_name, final.description) == ("?", "-")

    def test_resolved_values_kept(self):
        final = finalize_profile(BusinessProfile(company_name="Acme", description="Things."))
        assert final.company_name == "Acme"
        assert final.description == "Things."

    def test_lists_cleaned(self):
        profile = BusinessProfile(services=["Support", " Support ", "", "Audits"], team_info=["Jane — CEO", "  "])
        final = finalize_profile(profile)
        assert final.services == ["Support", "Audits"]
        assert final.team_info == ["Jane — CEO"]

    def test_input_untouched(self):
        profile = BusinessProfile(services=["A", "A"])
        finalize_profile(profile)
        assert profile.services == ["A", "A"]
        assert profile.company_name is None
