"""Tests for the content policy denylist."""

from siteprofile.models.business_profile import BusinessProfile
from siteprofile.validators.policy_filter import PolicyFilter


class TestPolicyFilter:
    """Case-insensitive substring denylist."""

    def test_filter_example(self):
        """Pricing entries are removed, order preserved."""
        assert PolicyFilter().filter_items(["Consulting", "Pricing Plans", "Support"]) == ["Consulting", "Support"]

    def test_case_insensitive_substring(self):
        policy = PolicyFilter()
        assert policy.is_excluded("FREE API KEY generator") is True
        assert policy.is_excluded("Confidentiality reviews") is True
        assert policy.is_excluded("Freight") is False

    def test_empty_entries_dropped(self):
        assert PolicyFilter().filter_items(["", "   ", "Support"]) == ["Support"]

    def test_custom_terms(self):
        policy = PolicyFilter(["Beta"])
        assert policy.filter_items(["Beta Program", "Pricing"]) == ["Pricing"]

    def test_apply_filters_profile_in_place(self):
        profile = BusinessProfile(
            services=["Consulting", "Payment processing"],
            products=["Password vault", "Router"],
            team_info=["Pat — Pricing Lead"],
        )
        result = PolicyFilter().apply(profile)

        assert result is profile
        assert profile.services == ["Consulting"]
        assert profile.products == ["Router"]
        # Only offerings are filtered
        assert profile.team_info == ["Pat — Pricing Lead"]
