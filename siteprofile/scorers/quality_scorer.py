"""
Quality scoring - additive completeness score for a final profile.

The score gates downstream generation. Components (max 100):

- Company identification (20): name 10, description 10
- Offerings (20): 2 per service (max 10), 2 per product (max 10)
- Contact (20): email 10, phone 5, address 5
- Additional (20): mission 5, team 5, API docs 5, social media 5
- Structured data (20): flat bonus when any JSON-LD record was present

Placeholder name/description values filled in by finalization do not count.
"""

from typing import Optional

from ..constants import MAX_QUALITY_SCORE, PLACEHOLDER_COMPANY_NAME, PLACEHOLDER_DESCRIPTION
from ..models.business_profile import BusinessProfile
from ..models.quality import ComponentStatus, QualityAssessment, ScoreComponent

POINTS_PER_OFFERING = 2
MAX_OFFERING_POINTS = 10
STRUCTURED_DATA_BONUS = 20


def _presence(name: str, present: bool, points: int, found: str, missing: str) -> ScoreComponent:
    return ScoreComponent(
        name=name,
        scored=points if present else 0,
        possible=points,
        evidence=found if present else missing,
        status=ComponentStatus.FULL if present else ComponentStatus.MISSING,
    )


def _offerings(name: str, items: list[str]) -> ScoreComponent:
    scored = min(MAX_OFFERING_POINTS, len(items) * POINTS_PER_OFFERING)
    if scored >= MAX_OFFERING_POINTS:
        status = ComponentStatus.FULL
    elif scored > 0:
        status = ComponentStatus.PARTIAL
    else:
        status = ComponentStatus.MISSING
    return ScoreComponent(
        name=name,
        scored=scored,
        possible=MAX_OFFERING_POINTS,
        evidence=f"{len(items)} {name.lower()} found",
        status=status,
    )


class QualityScorer:
    """Scores profile completeness on a 0-100 scale."""

    def __init__(
        self,
        placeholder_company_name: str = PLACEHOLDER_COMPANY_NAME,
        placeholder_description: str = PLACEHOLDER_DESCRIPTION,
    ):
        self.placeholder_company_name = placeholder_company_name
        self.placeholder_description = placeholder_description

    def has_company_name(self, profile: BusinessProfile) -> bool:
        return bool(profile.company_name) and profile.company_name != self.placeholder_company_name

    def has_description(self, profile: BusinessProfile) -> bool:
        return bool(profile.description) and profile.description != self.placeholder_description

    def evaluate(self, profile: BusinessProfile) -> QualityAssessment:
        """
        Score a final profile.

        Args:
            profile: Merged, filtered, finalized profile

        Returns:
            QualityAssessment with score, component breakdown and issues
        """
        contact = profile.contact_info
        components = [
            _presence("Company Name", self.has_company_name(profile), 10, "Company name resolved", "No company name"),
            _presence("Description", self.has_description(profile), 10, "Description resolved", "No description"),
            _offerings("Services", profile.services),
            _offerings("Products", profile.products),
            _presence("Email", bool(contact.email), 10, "Contact email found", "No contact email"),
            _presence("Phone", bool(contact.phone), 5, "Phone number found", "No phone number"),
            _presence("Address", bool(contact.address), 5, "Address found", "No address"),
            _presence("Mission", bool(profile.mission), 5, "Mission statement found", "No mission statement"),
            _presence("Team", bool(profile.team_info), 5, f"{len(profile.team_info)} team entries", "No team info"),
            _presence("API Docs", bool(profile.api_docs), 5, "API documentation linked", "No API documentation"),
            _presence(
                "Social Media",
                bool(contact.social_media),
                5,
                f"{len(contact.social_media)} social profiles",
                "No social profiles",
            ),
            _presence(
                "Structured Data",
                bool(profile.schema_data),
                STRUCTURED_DATA_BONUS,
                f"{len(profile.schema_data)} JSON-LD records",
                "No JSON-LD records",
            ),
        ]

        score = min(sum(c.scored for c in components), MAX_QUALITY_SCORE)
        return QualityAssessment(score=score, components=components, issues=self.find_issues(profile))

    def score(self, profile: BusinessProfile) -> int:
        """Score only; see evaluate() for the breakdown."""
        return self.evaluate(profile).score

    def find_issues(self, profile: BusinessProfile) -> list[str]:
        """List the gaps that most reduce the usefulness of generated output."""
        issues = []
        if not self.has_company_name(profile):
            issues.append("Could not determine company name")
        if not self.has_description(profile):
            issues.append("No company description found")
        if not profile.services and not profile.products:
            issues.append("No services or products identified")
        if not profile.contact_info.email and not profile.contact_info.phone:
            issues.append("No contact information found")
        return issues


def calculate_quality_score(profile: BusinessProfile, scorer: Optional[QualityScorer] = None) -> int:
    """Convenience wrapper returning the 0-100 score."""
    return (scorer or QualityScorer()).score(profile)
