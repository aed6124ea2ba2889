"""
Pydantic models for extracted business profiles.

A BusinessProfile is built three times per bundle (one partial per source),
merged into one, then filtered, classified and scored. Partials share the
same model: every field is optional or empty by default.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BusinessType(str, Enum):
    """Business archetypes used for template selection downstream."""

    CATALOG = "catalog"  # Marketplaces, directories, listing platforms
    SPECIALIST = "specialist"  # Agencies, consultants, professional services
    ECOSYSTEM = "ecosystem"  # Integrated suites, all-in-one products


class ExtractionSource(str, Enum):
    """Where a partial profile came from."""

    STRUCTURED = "structured"  # JSON-LD
    META = "meta"  # <meta> tags
    TEXT = "text"  # Visible text and markup patterns

    @property
    def reliability(self) -> int:
        """Higher is more reliable."""
        return {"structured": 3, "meta": 2, "text": 1}[self.value]


class ContactInfo(BaseModel):
    """Contact record; every key optional."""

    email: Optional[str] = Field(None, description="General contact email")
    phone: Optional[str] = Field(None, description="Phone number as written on the page")
    address: Optional[str] = Field(None, description="Formatted postal address")
    social_media: dict[str, str] = Field(default_factory=dict, description="Platform name -> profile URL")

    def is_empty(self) -> bool:
        return not (self.email or self.phone or self.address or self.social_media)


class BusinessProfile(BaseModel):
    """
    Business profile extracted from a homepage.

    Used both for per-source partials and for the final merged record that
    is handed to the generation step.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "company_name": "Acme Logistics",
                "tagline": "Freight, handled",
                "description": "Acme moves freight across North America.",
                "mission": "To deliver excellence in logistics.",
                "services": ["Consulting", "Support"],
                "products": [],
                "contact_info": {
                    "email": "info@acme.example.com",
                    "phone": "(555) 123-4567",
                    "address": "1 Main St, Springfield, IL, 62701, US",
                    "social_media": {"linkedin": "https://linkedin.com/company/acme"},
                },
                "team_info": ["Jane Doe — CEO"],
                "api_docs": True,
                "business_type": "specialist",
                "quality_score": 85,
            }
        }
    )

    # Company identification
    company_name: Optional[str] = Field(None, description="Company name")
    tagline: Optional[str] = Field(None, description="Short slogan")
    description: Optional[str] = Field(None, description="One-paragraph description")
    mission: Optional[str] = Field(None, description="Mission statement")

    # Offerings (deduplicated, first-occurrence order)
    services: List[str] = Field(default_factory=list, description="Service names")
    products: List[str] = Field(default_factory=list, description="Product names")

    contact_info: ContactInfo = Field(default_factory=ContactInfo, description="Contact details")
    team_info: List[str] = Field(default_factory=list, description='"Name — Role" entries')
    api_docs: Optional[bool] = Field(None, description="Whether the page links to API/developer docs")

    # Raw JSON-LD, kept verbatim for audit and domain inference
    schema_data: List[Any] = Field(default_factory=list, description="Raw structured-data records")

    # Set by the classifier and quality scorer
    business_type: Optional[BusinessType] = Field(None, description="Business archetype")
    quality_score: Optional[int] = Field(None, ge=0, le=100, description="Completeness score (0-100)")

    def to_summary(self) -> dict[str, Any]:
        """Counts and presence flags for logging."""
        return {
            "company_name": self.company_name or "Not found",
            "business_type": self.business_type.value if self.business_type else None,
            "services": len(self.services),
            "products": len(self.products),
            "team_members": len(self.team_info),
            "has_email": bool(self.contact_info.email),
            "quality_score": self.quality_score,
        }


class ConflictRecord(BaseModel):
    """Records a scalar field where sources disagreed, for audit purposes."""

    field_name: str = Field(..., description="Field that has conflicting values")
    source_values: dict[str, Any] = Field(..., description="Map of source -> value it supplied")
    selected_source: str = Field(..., description="Which source was ultimately chosen")
    selected_value: Any = Field(None, description="The value that was selected")
    selection_reason: str = Field(..., description="Why this source was selected over others")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="When conflict was detected"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field_name": "company_name",
                "source_values": {"structured": "Acme Corp - Official", "meta": "Acme"},
                "selected_source": "structured",
                "selected_value": "Acme Corp - Official",
                "selection_reason": "structured outranks meta",
                "timestamp": "2024-01-15T10:30:00Z",
            }
        }
    )
